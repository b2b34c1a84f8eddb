"""
Closure ledger persistence.

Mirrors the booking repository: the `closure_unique_slot` constraint keeps
one closure per slot, and batch inserts are all or nothing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, Sequence, Tuple

from django.db import IntegrityError, transaction  # type: ignore

from apps.bookings.models import BOTH_COURTS
from apps.court_status.models import CourtClosure
from shared.domain.exceptions import DuplicateSlot
from shared.domain.value_objects import SlotIdentity
from shared.infrastructure.memory import InMemoryTable


class ClosureRepository(ABC):
    @abstractmethod
    def get(self, closure_id) -> Optional[CourtClosure]:
        ...

    @abstractmethod
    def find_by_slot(self, slot: SlotIdentity) -> Optional[CourtClosure]:
        """Closure for this court at this hour, including an all-courts row."""

    @abstractmethod
    def find_by_date(self, day: date) -> List[CourtClosure]:
        ...

    @abstractmethod
    def insert_batch(self, closures: Sequence[CourtClosure]) -> List[CourtClosure]:
        ...

    @abstractmethod
    def insert_if_absent(self, closure: CourtClosure) -> Tuple[CourtClosure, bool]:
        """Returns (closure, created); an existing closure is left untouched."""

    @abstractmethod
    def delete_by_id(self, closure_id) -> int:
        ...

    @abstractmethod
    def delete_matching(self, day: date, start_time: str | None = None, court: str | None = None) -> int:
        """
        Delete closures of a day, narrowed by hour and court.

        A single-court filter leaves all-courts rows in place; they still
        close the other court.
        """


class DjangoClosureRepository(ClosureRepository):
    model = CourtClosure

    def get(self, closure_id) -> Optional[CourtClosure]:
        return self.model.objects.filter(pk=closure_id).first()

    def queryset(self):
        return self.model.objects.order_by("start_time", "court")

    def find_by_slot(self, slot: SlotIdentity) -> Optional[CourtClosure]:
        return (
            self.model.objects.filter(
                date=slot.date,
                start_time=slot.start_time,
                court__in=[slot.court, BOTH_COURTS],
            )
            .order_by("created_at")
            .first()
        )

    def find_by_date(self, day: date) -> List[CourtClosure]:
        return list(self.model.objects.filter(date=day).order_by("start_time", "court"))

    def insert_batch(self, closures: Sequence[CourtClosure]) -> List[CourtClosure]:
        try:
            with transaction.atomic():
                return self.model.objects.bulk_create(list(closures))
        except IntegrityError as exc:
            taken = next((c.slot for c in closures if self.find_by_slot(c.slot)), None)
            raise DuplicateSlot(taken) from exc

    def insert_if_absent(self, closure: CourtClosure) -> Tuple[CourtClosure, bool]:
        existing = self.find_by_slot(closure.slot)
        if existing is not None:
            return existing, False
        try:
            with transaction.atomic():
                closure.save(force_insert=True)
        except IntegrityError:
            # Lost a race with another writer closing the same slot.
            return self.find_by_slot(closure.slot), False
        return closure, True

    def delete_by_id(self, closure_id) -> int:
        deleted, _ = self.model.objects.filter(pk=closure_id).delete()
        return deleted

    def delete_matching(self, day: date, start_time: str | None = None, court: str | None = None) -> int:
        qs = self.model.objects.filter(date=day)
        if start_time:
            qs = qs.filter(start_time=start_time)
        if court and court != BOTH_COURTS:
            qs = qs.filter(court=court)
        deleted, _ = qs.delete()
        return deleted


class InMemoryClosureRepository(ClosureRepository):
    def __init__(self):
        self.table = InMemoryTable(key=lambda closure: closure.slot)

    def get(self, closure_id) -> Optional[CourtClosure]:
        return self.table.get(closure_id)

    def find_by_slot(self, slot: SlotIdentity) -> Optional[CourtClosure]:
        return self.table.first(
            lambda c: c.date == slot.date and c.start_time == slot.start_time and c.covers(slot.court)
        )

    def find_by_date(self, day: date) -> List[CourtClosure]:
        rows = self.table.filter(lambda c: c.date == day)
        return sorted(rows, key=lambda c: (c.start_time, c.court))

    def insert_batch(self, closures: Sequence[CourtClosure]) -> List[CourtClosure]:
        for closure in closures:
            if self.find_by_slot(closure.slot) is not None:
                raise DuplicateSlot(closure.slot)
        return self.table.insert_batch(closures)

    def insert_if_absent(self, closure: CourtClosure) -> Tuple[CourtClosure, bool]:
        existing = self.find_by_slot(closure.slot)
        if existing is not None:
            return existing, False
        return self.table.insert(closure), True

    def delete_by_id(self, closure_id) -> int:
        closure = self.get(closure_id)
        if closure is None:
            return 0
        return self.table.delete_where(lambda c: c.pk == closure.pk)

    def delete_matching(self, day: date, start_time: str | None = None, court: str | None = None) -> int:
        def matches(closure):
            if closure.date != day:
                return False
            if start_time and closure.start_time != start_time:
                return False
            if court and court != BOTH_COURTS and closure.court != court:
                return False
            return True

        return self.table.delete_where(matches)
