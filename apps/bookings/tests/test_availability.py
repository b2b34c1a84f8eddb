"""Tests for the day availability grid."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from apps.bookings.availability import AvailabilityViewBuilder
from apps.court_status.models import CourtClosure
from apps.pricing.models import CourtPricing

DAY = date(2030, 5, 10)


def _by_key(slots):
    return {(view.slot.start_time, view.slot.court): view for view in slots}


def test_grid_marks_exactly_the_booked_and_closed_slots(availability, coordinator, closure_repo, make_request) -> None:
    coordinator.reserve(make_request("09:00", court="Court 1"))
    closure_repo.table.insert(CourtClosure(date=DAY, start_time="15:00", court="Court 2", reason="Resurfacing"))

    slots = availability.build_day_slots(DAY)

    assert len(slots) == 34
    unavailable = {(v.slot.start_time, v.slot.court) for v in slots if not v.is_available}
    assert unavailable == {("09:00", "Court 1"), ("15:00", "Court 2")}

    grid = _by_key(slots)
    booked = grid[("09:00", "Court 1")]
    assert booked.booking is not None and not booked.is_closed
    closed = grid[("15:00", "Court 2")]
    assert closed.is_closed and closed.booking is None
    assert closed.closed_reason == "Resurfacing"
    assert grid[("15:00", "Court 1")].is_available
    assert grid[("22:00", "Court 2")].slot.end_time == "23:00"


def test_all_courts_closure_closes_each_court(availability, closure_repo) -> None:
    closure_repo.table.insert(CourtClosure(date=DAY, start_time="12:00", court="Both"))

    grid = _by_key(availability.build_day_slots(DAY))

    assert grid[("12:00", "Court 1")].is_closed
    assert grid[("12:00", "Court 2")].is_closed
    assert grid[("13:00", "Court 1")].is_available


def test_other_days_do_not_leak_into_the_grid(availability, coordinator, make_request) -> None:
    coordinator.reserve(make_request("09:00", day=date(2030, 5, 11)))

    assert all(view.is_available for view in availability.build_day_slots(DAY))


class _CountingResolver:
    def __init__(self, price):
        self.calls = 0
        self.price = price

    def resolve_price(self, as_of):
        self.calls += 1
        return self.price


def test_price_is_resolved_once_per_day(booking_repo, closure_repo) -> None:
    resolver = _CountingResolver(Decimal("1800"))
    builder = AvailabilityViewBuilder(booking_repo, closure_repo, resolver)

    slots = builder.build_day_slots(DAY)

    assert resolver.calls == 1
    assert {view.price for view in slots} == {Decimal("1800")}


def test_grid_uses_price_in_force_on_that_day(availability, price_repo) -> None:
    price_repo.save(CourtPricing(price_per_court_per_hour=Decimal("1800"), effective_date=date(2030, 1, 1)))

    slots = availability.build_day_slots(DAY)

    assert slots[0].price == Decimal("1800")
