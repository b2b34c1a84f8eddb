"""
Slot catalog

The fixed universe of bookable (time, court) pairs. Every day has the same
hourly start times (from settings) and the same courts.
"""

from __future__ import annotations

from datetime import date
from typing import List, Sequence

from django.conf import settings  # type: ignore

from apps.bookings.models import BOTH_COURTS, Court
from shared.domain.exceptions import InvalidRequest
from shared.domain.value_objects import HourRange, SlotIdentity, format_hour, parse_hour


def time_slots() -> Sequence[str]:
    return tuple(settings.COURT_TIME_SLOTS)


def courts() -> Sequence[str]:
    return tuple(Court.values)


def court_selections() -> Sequence[str]:
    """Courts a request may name: each court, or both."""
    return (*courts(), BOTH_COURTS)


def closing_time() -> str:
    return format_hour(parse_hour(time_slots()[-1]) + 1)


def enumerate_slots(day: date) -> List[SlotIdentity]:
    """All slots of a day, time first then court."""
    return [SlotIdentity(day, start, court) for start in time_slots() for court in courts()]


def expand_courts(selection: str) -> List[str]:
    """'Both' -> every court; a single court -> itself."""
    if selection == BOTH_COURTS:
        return list(courts())
    if selection not in courts():
        raise InvalidRequest(
            f"Court must be one of: {', '.join(court_selections())}"
        )
    return [selection]


def expand_hours(start_time: str, hours: int) -> List[str]:
    """
    Start times of `hours` consecutive slots beginning at `start_time`.

    The whole run must fit inside opening hours; a booking may end at closing
    time but not after it.
    """
    slots = time_slots()
    if start_time not in slots:
        raise InvalidRequest(
            f"Invalid time slot {start_time}. Operating hours are "
            f"{slots[0]} to {closing_time()}"
        )
    if hours < 1:
        raise InvalidRequest("Duration must be at least one hour")

    run = HourRange.starting_at(start_time, hours)
    starts = list(run.start_times())
    if starts[-1] not in slots:
        raise InvalidRequest(
            f"A {hours} hour booking from {start_time} runs past closing time "
            f"({closing_time()})"
        )
    return starts


def expand_request(day: date, start_time: str, hours: int, selection: str) -> List[SlotIdentity]:
    """
    Slots covered by a request, court first then time:
    Court 1 09:00, Court 1 10:00, Court 2 09:00, Court 2 10:00.
    """
    starts = expand_hours(start_time, hours)
    return [SlotIdentity(day, start, court) for court in expand_courts(selection) for start in starts]
