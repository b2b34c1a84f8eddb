"""Price resolution and price history maintenance."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, List, Optional, Tuple

from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore

from apps.pricing.events import PriceDeleted, PriceScheduled
from apps.pricing.models import CourtPricing
from apps.pricing.repositories import DjangoPriceRepository, PriceRepository
from shared.application.uow import AbstractUnitOfWork, DjangoUnitOfWork
from shared.domain.exceptions import InvalidRequest, NotFound

logger = logging.getLogger(__name__)


def default_price() -> Decimal:
    return Decimal(settings.COURT_DEFAULT_PRICE)


class PricingResolver:
    """
    Selects the price in force on a date.

    The record with the greatest effective date on or before the date wins;
    with no such record the configured default applies. Callers resolve
    once per request and store the result on every booking they create.
    """

    def __init__(self, prices: PriceRepository):
        self.prices = prices

    def resolve_record(self, as_of: date) -> Optional[CourtPricing]:
        return self.prices.effective_on(as_of)

    def resolve_price(self, as_of: date) -> Decimal:
        record = self.resolve_record(as_of)
        if record is None:
            return default_price()
        return Decimal(record.price_per_court_per_hour)

    def resolve_total(self, as_of: date, court_count: int, hours: int) -> Decimal:
        return self.resolve_price(as_of) * court_count * hours


@dataclass
class CurrentPrice:
    price_per_court_per_hour: Decimal
    effective_date: date
    is_default: bool
    reason: str = ""
    record: Optional[CourtPricing] = None

    @property
    def id(self):
        return self.record.pk if self.record is not None else None


class PricingService:
    """Admin operations over the price history."""

    def __init__(
        self,
        prices: PriceRepository,
        uow_factory: Callable[[], AbstractUnitOfWork] = DjangoUnitOfWork,
    ):
        self.prices = prices
        self.resolver = PricingResolver(prices)
        self.uow_factory = uow_factory

    def schedule(
        self,
        price: Decimal,
        effective_date: date,
        *,
        reason: str = "",
        changed_by: str = "admin",
    ) -> Tuple[CourtPricing, bool]:
        """
        Create the record for `effective_date`, or update it in place.

        Returns (record, created).
        """
        price = Decimal(price)
        if price < 0:
            raise InvalidRequest("Price cannot be negative")

        with self.uow_factory() as uow:
            existing = self.prices.get_by_effective_date(effective_date)
            previous_price = existing.price_per_court_per_hour if existing is not None else None
            record, created = self.prices.upsert(
                effective_date,
                price_per_court_per_hour=price,
                reason=reason or "",
                changed_by=changed_by,
            )
            uow.add_event(PriceScheduled(
                record_id=record.pk,
                effective_date=effective_date,
                price_per_court_per_hour=price,
                previous_price=previous_price,
                changed_by=changed_by,
                created=created,
            ))

        logger.info(
            "Price %s for %s effective %s",
            "created" if created else "updated",
            price,
            effective_date,
        )
        return record, created

    def current(self, today: date | None = None) -> CurrentPrice:
        today = today or timezone.localdate()
        record = self.resolver.resolve_record(today)
        if record is None:
            return CurrentPrice(
                price_per_court_per_hour=default_price(),
                effective_date=today,
                is_default=True,
            )
        return CurrentPrice(
            price_per_court_per_hour=Decimal(record.price_per_court_per_hour),
            effective_date=record.effective_date,
            is_default=False,
            reason=record.reason,
            record=record,
        )

    def history(self, limit: int | None = None) -> List[CourtPricing]:
        if limit is None:
            limit = settings.COURT_PRICING_HISTORY_LIMIT
        if limit < 1:
            raise InvalidRequest("limit must be a positive integer")
        return self.prices.history(limit)

    def delete(self, record_id) -> CourtPricing:
        with self.uow_factory() as uow:
            record = self.prices.get(record_id)
            if record is None:
                raise NotFound("Pricing not found")
            self.prices.delete(record_id)
            uow.add_event(PriceDeleted(
                record_id=record_id,
                effective_date=record.effective_date,
                price_per_court_per_hour=record.price_per_court_per_hour,
            ))
        return record


def get_pricing_resolver() -> PricingResolver:
    return PricingResolver(DjangoPriceRepository())


def get_pricing_service() -> PricingService:
    return PricingService(DjangoPriceRepository())
