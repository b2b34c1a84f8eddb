"""Tests for price resolution and the price history."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from apps.pricing.models import CourtPricing
from apps.pricing.repositories import DjangoPriceRepository
from apps.pricing.services import PricingService
from shared.domain.exceptions import InvalidRequest, NotFound
from shared.infrastructure.memory import InMemoryUnitOfWork


def _price(price_repo, amount: str, effective: date) -> CourtPricing:
    return price_repo.save(CourtPricing(price_per_court_per_hour=Decimal(amount), effective_date=effective))


def test_default_price_without_history(resolver) -> None:
    assert resolver.resolve_price(date(2030, 1, 1)) == Decimal("1500")
    assert resolver.resolve_record(date(2030, 1, 1)) is None


def test_latest_effective_record_wins(resolver, price_repo) -> None:
    _price(price_repo, "1500", date(2025, 1, 1))
    _price(price_repo, "1800", date(2025, 3, 1))

    assert resolver.resolve_price(date(2025, 2, 15)) == Decimal("1500")
    assert resolver.resolve_price(date(2025, 3, 1)) == Decimal("1800")
    assert resolver.resolve_price(date(2024, 12, 31)) == Decimal("1500")


def test_future_price_is_not_applied_early(resolver, price_repo) -> None:
    _price(price_repo, "2500", date(2025, 6, 1))

    assert resolver.resolve_record(date(2025, 5, 31)) is None


def test_total_scales_with_courts_and_hours(resolver, price_repo) -> None:
    _price(price_repo, "1800", date(2025, 1, 1))

    assert resolver.resolve_total(date(2025, 2, 1), 2, 3) == Decimal("10800")


def test_schedule_creates_then_updates_in_place(pricing_service, price_repo) -> None:
    record, created = pricing_service.schedule(Decimal("1600"), date(2025, 4, 1), reason="Season")
    again, created_again = pricing_service.schedule(Decimal("1700"), date(2025, 4, 1))

    assert created
    assert not created_again
    assert again.pk == record.pk
    assert again.price_per_court_per_hour == Decimal("1700")
    assert len(price_repo.table) == 1


class _StaleLookupPriceRepository(DjangoPriceRepository):
    """Misses a record another admin stored after the lookup ran."""

    def get_by_effective_date(self, day: date):
        return None


@pytest.mark.django_db
def test_schedule_updates_a_record_stored_concurrently() -> None:
    CourtPricing.objects.create(price_per_court_per_hour=Decimal("1500"), effective_date=date(2030, 1, 1))
    service = PricingService(_StaleLookupPriceRepository(), uow_factory=InMemoryUnitOfWork)

    record, created = service.schedule(Decimal("1800"), date(2030, 1, 1), reason="Evening rate")

    assert not created
    assert CourtPricing.objects.count() == 1
    stored = CourtPricing.objects.get()
    assert stored.pk == record.pk
    assert stored.price_per_court_per_hour == Decimal("1800")
    assert stored.reason == "Evening rate"


def test_negative_price_is_rejected(pricing_service) -> None:
    with pytest.raises(InvalidRequest):
        pricing_service.schedule(Decimal("-1"), date(2025, 4, 1))


def test_current_price_reports_default(pricing_service) -> None:
    current = pricing_service.current(today=date(2025, 4, 2))

    assert current.is_default
    assert current.price_per_court_per_hour == Decimal("1500")
    assert current.effective_date == date(2025, 4, 2)
    assert current.id is None


def test_current_price_uses_history(pricing_service) -> None:
    pricing_service.schedule(Decimal("1600"), date(2025, 4, 1))
    pricing_service.schedule(Decimal("1900"), date(2025, 5, 1))

    current = pricing_service.current(today=date(2025, 4, 20))

    assert not current.is_default
    assert current.price_per_court_per_hour == Decimal("1600")
    assert current.effective_date == date(2025, 4, 1)


def test_history_is_newest_first_and_limited(pricing_service) -> None:
    for month in (1, 2, 3, 4):
        pricing_service.schedule(Decimal(1500 + month), date(2025, month, 1))

    history = pricing_service.history(limit=3)

    assert [r.effective_date.month for r in history] == [4, 3, 2]
    assert len(pricing_service.history()) == 4


def test_history_limit_must_be_positive(pricing_service) -> None:
    with pytest.raises(InvalidRequest):
        pricing_service.history(limit=0)


def test_delete(pricing_service, price_repo) -> None:
    record, _ = pricing_service.schedule(Decimal("1600"), date(2025, 4, 1))

    pricing_service.delete(record.pk)

    assert len(price_repo.table) == 0
    with pytest.raises(NotFound):
        pricing_service.delete(record.pk)
