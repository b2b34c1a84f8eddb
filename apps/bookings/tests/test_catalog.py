"""Tests for the slot catalog."""

from __future__ import annotations

from datetime import date

import pytest

from apps.bookings.domain import catalog
from shared.domain.exceptions import InvalidRequest
from shared.domain.value_objects import SlotIdentity

DAY = date(2030, 5, 10)


def test_day_has_seventeen_hours_on_two_courts() -> None:
    slots = catalog.enumerate_slots(DAY)

    assert len(slots) == 34
    assert slots[0] == SlotIdentity(DAY, "06:00", "Court 1")
    assert slots[1] == SlotIdentity(DAY, "06:00", "Court 2")
    assert slots[-1] == SlotIdentity(DAY, "22:00", "Court 2")
    assert catalog.closing_time() == "23:00"


def test_both_expands_to_every_court() -> None:
    assert catalog.expand_courts("Both") == ["Court 1", "Court 2"]
    assert catalog.expand_courts("Court 2") == ["Court 2"]


def test_unknown_court_is_rejected() -> None:
    with pytest.raises(InvalidRequest):
        catalog.expand_courts("Court 3")


def test_last_hour_may_end_at_closing_time() -> None:
    assert catalog.expand_hours("22:00", 1) == ["22:00"]
    assert catalog.expand_hours("20:00", 3) == ["20:00", "21:00", "22:00"]


def test_run_past_closing_time_is_rejected() -> None:
    with pytest.raises(InvalidRequest, match="runs past closing time"):
        catalog.expand_hours("22:00", 2)


@pytest.mark.parametrize("start_time", ["05:00", "23:00", "09:30"])
def test_start_outside_operating_hours_is_rejected(start_time) -> None:
    with pytest.raises(InvalidRequest):
        catalog.expand_hours(start_time, 1)


def test_zero_hours_is_rejected() -> None:
    with pytest.raises(InvalidRequest):
        catalog.expand_hours("09:00", 0)


def test_request_expands_court_first_then_time() -> None:
    slots = catalog.expand_request(DAY, "09:00", 2, "Both")

    assert [(s.court, s.start_time) for s in slots] == [
        ("Court 1", "09:00"),
        ("Court 1", "10:00"),
        ("Court 2", "09:00"),
        ("Court 2", "10:00"),
    ]
