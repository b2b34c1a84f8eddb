"""
Booking Domain Events

Events that represent things that have happened in the booking ledger.
These are published after successful transaction commits.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from shared.domain.base import DomainEvent
from shared.domain.value_objects import SlotIdentity


@dataclass
class BookingsReserved(DomainEvent):
    """
    Event: A reservation request was committed

    One event per request, whether it produced one unit booking or a group.
    """
    booking_ids: List[int]
    date: date
    slots: List[SlotIdentity]
    group_id: Optional[UUID]
    customer_name: str
    total_price: Decimal


@dataclass
class BookingStatusChanged(DomainEvent):
    """
    Event: A booking status changed

    `booking_ids` lists every unit the change cascaded to.
    """
    booking_ids: List[int]
    group_id: Optional[UUID]
    previous_status: str
    status: str


@dataclass
class BookingsDeleted(DomainEvent):
    booking_ids: List[int]
    deleted_count: int
    group_id: Optional[UUID] = None
    cascaded: bool = field(default=False)


BOOKING_EVENTS = (BookingsReserved, BookingStatusChanged, BookingsDeleted)
