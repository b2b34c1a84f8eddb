"""
Pricing Domain Events
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from shared.domain.base import DomainEvent


@dataclass
class PriceScheduled(DomainEvent):
    """A price was set for an effective date (created or replaced)."""
    record_id: int
    effective_date: date
    price_per_court_per_hour: Decimal
    previous_price: Decimal | None
    changed_by: str
    created: bool


@dataclass
class PriceDeleted(DomainEvent):
    record_id: int
    effective_date: date
    price_per_court_per_hour: Decimal


PRICING_EVENTS = (PriceScheduled, PriceDeleted)
