"""
Closure Domain Events
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from shared.domain.base import DomainEvent
from shared.domain.value_objects import SlotIdentity


@dataclass
class SlotsClosed(DomainEvent):
    """Slots were taken out of service (one or a whole day)."""
    date: date
    slots: List[SlotIdentity]
    status: str
    reason: str
    closed_by: str
    full_day: bool = False


@dataclass
class SlotsReopened(DomainEvent):
    date: date
    deleted_count: int
    start_time: Optional[str] = None
    court: Optional[str] = None
    closure_ids: List[int] = field(default_factory=list)


CLOSURE_EVENTS = (SlotsClosed, SlotsReopened)
