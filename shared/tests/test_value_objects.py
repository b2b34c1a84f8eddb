"""Tests for the hour and slot value objects."""

from __future__ import annotations

from datetime import date

import pytest

from shared.domain.value_objects import HourRange, SlotIdentity, format_hour, parse_hour


def test_parse_and_format_hour() -> None:
    assert parse_hour("06:00") == 6
    assert parse_hour("22:00") == 22
    assert format_hour(7) == "07:00"


@pytest.mark.parametrize("value", ["9:30", "ab:00", "25:00", "", None, "10"])
def test_parse_hour_rejects_non_hours(value) -> None:
    with pytest.raises(ValueError):
        parse_hour(value)


def test_hour_range_covers_start_inclusive_end_exclusive() -> None:
    run = HourRange.from_times("09:00", "12:00")

    assert len(run) == 3
    assert list(run.start_times()) == ["09:00", "10:00", "11:00"]
    assert str(run) == "09:00-12:00"


def test_hour_range_requires_end_after_start() -> None:
    with pytest.raises(ValueError):
        HourRange(10, 10)


def test_slot_identity_is_a_value() -> None:
    slot = SlotIdentity(date(2030, 5, 10), "22:00", "Court 2")

    assert slot == SlotIdentity(date(2030, 5, 10), "22:00", "Court 2")
    assert slot.end_time == "23:00"
    assert slot.key == ("22:00", "Court 2")
    assert len({slot, SlotIdentity(date(2030, 5, 10), "22:00", "Court 2")}) == 1
