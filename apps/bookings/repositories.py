"""
Booking ledger persistence.

`BookingRepository` is the interface the services depend on; the Django
implementation relies on the `booking_unique_slot` constraint as the final
arbiter between concurrent writers.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Iterable, List, Optional, Sequence
from uuid import UUID

from django.db import IntegrityError, transaction  # type: ignore
from django.utils import timezone  # type: ignore

from apps.bookings.models import Booking
from shared.domain.exceptions import DuplicateSlot
from shared.domain.value_objects import SlotIdentity
from shared.infrastructure.memory import InMemoryTable

logger = logging.getLogger(__name__)


class BookingRepository(ABC):
    @abstractmethod
    def get(self, booking_id) -> Optional[Booking]:
        ...

    @abstractmethod
    def find_by_slot(self, slot: SlotIdentity) -> Optional[Booking]:
        ...

    def exists_for_slot(self, slot: SlotIdentity) -> bool:
        return self.find_by_slot(slot) is not None

    @abstractmethod
    def find_by_date(self, day: date) -> List[Booking]:
        ...

    @abstractmethod
    def find_by_group(self, group_id: UUID) -> List[Booking]:
        ...

    @abstractmethod
    def find_by_customer_name(self, name: str) -> List[Booking]:
        ...

    @abstractmethod
    def insert_batch(self, bookings: Sequence[Booking]) -> List[Booking]:
        """Insert all bookings or none; raises DuplicateSlot on a taken slot."""

    @abstractmethod
    def update_status(self, booking_id, status: str) -> int:
        ...

    @abstractmethod
    def update_group_status(self, group_id: UUID, status: str) -> int:
        ...

    @abstractmethod
    def update_contact(self, booking_id, *, customer_name=None, mobile_number=None) -> None:
        ...

    @abstractmethod
    def delete_by_id(self, booking_id) -> int:
        ...

    @abstractmethod
    def delete_by_group(self, group_id: UUID) -> int:
        ...

    @abstractmethod
    def delete_by_ids(self, booking_ids: Iterable) -> int:
        ...


class DjangoBookingRepository(BookingRepository):
    model = Booking

    def get(self, booking_id) -> Optional[Booking]:
        return self.model.objects.filter(pk=booking_id).first()

    def find_by_slot(self, slot: SlotIdentity) -> Optional[Booking]:
        return self.model.objects.filter(
            date=slot.date,
            start_time=slot.start_time,
            court=slot.court,
        ).first()

    def exists_for_slot(self, slot: SlotIdentity) -> bool:
        return self.model.objects.filter(
            date=slot.date,
            start_time=slot.start_time,
            court=slot.court,
        ).exists()

    def find_by_date(self, day: date) -> List[Booking]:
        return list(self.model.objects.filter(date=day).order_by("start_time", "court"))

    def find_by_group(self, group_id: UUID) -> List[Booking]:
        return list(self.model.objects.filter(group_id=group_id).order_by("court", "start_time"))

    def find_by_customer_name(self, name: str) -> List[Booking]:
        return list(self.model.objects.filter(customer_name=name))

    def insert_batch(self, bookings: Sequence[Booking]) -> List[Booking]:
        try:
            with transaction.atomic():
                return self.model.objects.bulk_create(list(bookings))
        except IntegrityError as exc:
            taken = self._first_taken(bookings)
            logger.info("Batch insert rejected by unique slot constraint: %s", taken or exc)
            raise DuplicateSlot(taken) from exc

    def _first_taken(self, bookings: Sequence[Booking]) -> Optional[SlotIdentity]:
        for booking in bookings:
            if self.exists_for_slot(booking.slot):
                return booking.slot
        return None

    def update_status(self, booking_id, status: str) -> int:
        return self.model.objects.filter(pk=booking_id).update(status=status, updated_at=timezone.now())

    def update_group_status(self, group_id: UUID, status: str) -> int:
        return self.model.objects.filter(group_id=group_id).update(status=status, updated_at=timezone.now())

    def update_contact(self, booking_id, *, customer_name=None, mobile_number=None) -> None:
        changes = {}
        if customer_name:
            changes["customer_name"] = customer_name
        if mobile_number:
            changes["mobile_number"] = mobile_number
        if changes:
            self.model.objects.filter(pk=booking_id).update(updated_at=timezone.now(), **changes)

    def delete_by_id(self, booking_id) -> int:
        deleted, _ = self.model.objects.filter(pk=booking_id).delete()
        return deleted

    def delete_by_group(self, group_id: UUID) -> int:
        deleted, _ = self.model.objects.filter(group_id=group_id).delete()
        return deleted

    def delete_by_ids(self, booking_ids: Iterable) -> int:
        deleted, _ = self.model.objects.filter(pk__in=list(booking_ids)).delete()
        return deleted


class InMemoryBookingRepository(BookingRepository):
    """Booking ledger held in process memory, keyed by slot like the table."""

    def __init__(self):
        self.table = InMemoryTable(key=lambda booking: booking.slot)

    def get(self, booking_id) -> Optional[Booking]:
        return self.table.get(booking_id)

    def find_by_slot(self, slot: SlotIdentity) -> Optional[Booking]:
        return self.table.first(lambda b: b.slot == slot)

    def find_by_date(self, day: date) -> List[Booking]:
        rows = self.table.filter(lambda b: b.date == day)
        return sorted(rows, key=lambda b: (b.start_time, b.court))

    def find_by_group(self, group_id: UUID) -> List[Booking]:
        rows = self.table.filter(lambda b: b.group_id is not None and b.group_id == group_id)
        return sorted(rows, key=lambda b: (b.court, b.start_time))

    def find_by_customer_name(self, name: str) -> List[Booking]:
        return self.table.filter(lambda b: b.customer_name == name)

    def insert_batch(self, bookings: Sequence[Booking]) -> List[Booking]:
        return self.table.insert_batch(bookings)

    def update_status(self, booking_id, status: str) -> int:
        booking = self.get(booking_id)
        if booking is None:
            return 0
        self.table.touch(booking, status=status)
        return 1

    def update_group_status(self, group_id: UUID, status: str) -> int:
        members = self.find_by_group(group_id)
        for booking in members:
            self.table.touch(booking, status=status)
        return len(members)

    def update_contact(self, booking_id, *, customer_name=None, mobile_number=None) -> None:
        booking = self.get(booking_id)
        changes = {}
        if customer_name:
            changes["customer_name"] = customer_name
        if mobile_number:
            changes["mobile_number"] = mobile_number
        if booking is not None and changes:
            self.table.touch(booking, **changes)

    def delete_by_id(self, booking_id) -> int:
        booking = self.get(booking_id)
        if booking is None:
            return 0
        return self.table.delete_where(lambda b: b.pk == booking.pk)

    def delete_by_group(self, group_id: UUID) -> int:
        return self.table.delete_where(lambda b: b.group_id is not None and b.group_id == group_id)

    def delete_by_ids(self, booking_ids: Iterable) -> int:
        wanted = {str(pk) for pk in booking_ids}
        return self.table.delete_where(lambda b: str(b.pk) in wanted)
