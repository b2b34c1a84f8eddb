"""
Day availability grid

One entry per (time, court) of the day, built from two batch reads (the
day's bookings and the day's closures) and a single price lookup, however
many slots the catalog defines.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from apps.bookings.domain import catalog
from apps.bookings.models import Booking
from apps.bookings.repositories import BookingRepository, DjangoBookingRepository
from apps.court_status.models import CourtClosure
from apps.court_status.repositories import ClosureRepository, DjangoClosureRepository
from apps.pricing.services import PricingResolver, get_pricing_resolver
from shared.domain.value_objects import SlotIdentity


@dataclass
class SlotView:
    slot: SlotIdentity
    booking: Optional[Booking]
    closure: Optional[CourtClosure]
    price: Decimal

    @property
    def is_closed(self) -> bool:
        return self.closure is not None

    @property
    def is_available(self) -> bool:
        return self.booking is None and self.closure is None

    @property
    def closed_reason(self) -> Optional[str]:
        return self.closure.reason if self.closure is not None else None

    @property
    def closure_status(self) -> Optional[str]:
        return self.closure.status if self.closure is not None else None


class AvailabilityViewBuilder:
    def __init__(
        self,
        bookings: BookingRepository,
        closures: ClosureRepository,
        pricing: PricingResolver,
    ):
        self.bookings = bookings
        self.closures = closures
        self.pricing = pricing

    def _closure_map(self, closures: List[CourtClosure]) -> Dict[Tuple[str, str], CourtClosure]:
        """Key closures by (time, court); an all-courts row covers every court."""
        by_slot: Dict[Tuple[str, str], CourtClosure] = {}
        for closure in closures:
            targets = catalog.courts() if closure.covers_all_courts else [closure.court]
            for court in targets:
                by_slot.setdefault((closure.start_time, court), closure)
        return by_slot

    def build_day_slots(self, day: date) -> List[SlotView]:
        bookings = {booking.slot.key: booking for booking in self.bookings.find_by_date(day)}
        closures = self._closure_map(self.closures.find_by_date(day))
        price = self.pricing.resolve_price(day)

        return [
            SlotView(
                slot=slot,
                booking=bookings.get(slot.key),
                closure=closures.get(slot.key),
                price=price,
            )
            for slot in catalog.enumerate_slots(day)
        ]


def get_availability_builder() -> AvailabilityViewBuilder:
    return AvailabilityViewBuilder(
        DjangoBookingRepository(),
        DjangoClosureRepository(),
        get_pricing_resolver(),
    )
