"""Shared fixtures: services wired to in-memory ledgers."""

from __future__ import annotations

from datetime import date

import pytest

from apps.bookings.availability import AvailabilityViewBuilder
from apps.bookings.repositories import InMemoryBookingRepository
from apps.bookings.services import GroupMutationService, ReservationCoordinator, ReservationRequest
from apps.court_status.repositories import InMemoryClosureRepository
from apps.court_status.services import ClosureLedger
from apps.pricing.repositories import InMemoryPriceRepository
from apps.pricing.services import PricingResolver, PricingService
from shared.infrastructure.memory import InMemoryUnitOfWork

PLAY_DATE = date(2030, 5, 10)


@pytest.fixture
def booking_repo():
    return InMemoryBookingRepository()


@pytest.fixture
def closure_repo():
    return InMemoryClosureRepository()


@pytest.fixture
def price_repo():
    return InMemoryPriceRepository()


@pytest.fixture
def resolver(price_repo):
    return PricingResolver(price_repo)


@pytest.fixture
def coordinator(booking_repo, closure_repo, resolver):
    return ReservationCoordinator(booking_repo, closure_repo, resolver, uow_factory=InMemoryUnitOfWork)


@pytest.fixture
def mutations(booking_repo):
    return GroupMutationService(booking_repo, uow_factory=InMemoryUnitOfWork)


@pytest.fixture
def closure_ledger(closure_repo, booking_repo):
    return ClosureLedger(closure_repo, booking_repo, uow_factory=InMemoryUnitOfWork)


@pytest.fixture
def pricing_service(price_repo):
    return PricingService(price_repo, uow_factory=InMemoryUnitOfWork)


@pytest.fixture
def availability(booking_repo, closure_repo, resolver):
    return AvailabilityViewBuilder(booking_repo, closure_repo, resolver)


@pytest.fixture
def make_request():
    def _make(start_time="09:00", hours=1, court="Court 1", day=PLAY_DATE, **overrides):
        fields = {
            "date": day,
            "start_time": start_time,
            "hours": hours,
            "court_selection": court,
            "customer_name": "Nimal Perera",
            "mobile_number": "0771234567",
        }
        fields.update(overrides)
        return ReservationRequest(**fields)

    return _make
