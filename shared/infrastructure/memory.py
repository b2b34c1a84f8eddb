"""
In-memory persistence

Process-local stand-ins for the ORM used to drive the services without a
database. `InMemoryTable` holds unsaved model instances, assigns primary
keys and enforces one row per unique key, so the repositories built on it
keep the same insert-if-absent and all-or-nothing batch guarantees as the
database constraints.
"""

from __future__ import annotations

import itertools
from typing import Callable, Dict, Hashable, Iterable, List, Optional

from django.utils import timezone  # type: ignore

from shared.application.uow import AbstractUnitOfWork
from shared.domain.exceptions import DuplicateSlot


class InMemoryTable:
    def __init__(self, key: Optional[Callable[[object], Hashable]] = None):
        self._rows: Dict[int, object] = {}
        self._ids = itertools.count(1)
        self._key = key

    def __len__(self) -> int:
        return len(self._rows)

    def all(self) -> List:
        return list(self._rows.values())

    def get(self, pk) -> Optional[object]:
        try:
            return self._rows.get(int(pk))
        except (TypeError, ValueError):
            return None

    def filter(self, predicate: Callable[[object], bool]) -> List:
        return [row for row in self._rows.values() if predicate(row)]

    def first(self, predicate: Callable[[object], bool]) -> Optional[object]:
        return next((row for row in self._rows.values() if predicate(row)), None)

    def _conflict(self, rows: List) -> Optional[object]:
        """First row whose key is already stored or repeated within `rows`."""
        if self._key is None:
            return None
        seen = {self._key(row) for row in self._rows.values()}
        for row in rows:
            key = self._key(row)
            if key in seen:
                return row
            seen.add(key)
        return None

    def insert_batch(self, rows: Iterable) -> List:
        rows = list(rows)
        conflict = self._conflict(rows)
        if conflict is not None:
            raise DuplicateSlot(getattr(conflict, "slot", None))
        now = timezone.now()
        for row in rows:
            row.pk = next(self._ids)
            if hasattr(row, "created_at"):
                row.created_at = now
            if hasattr(row, "updated_at"):
                row.updated_at = now
            self._rows[row.pk] = row
        return rows

    def insert(self, row) -> object:
        return self.insert_batch([row])[0]

    def save(self, row) -> object:
        if row.pk is None or row.pk not in self._rows:
            return self.insert(row)
        if hasattr(row, "updated_at"):
            row.updated_at = timezone.now()
        return row

    def touch(self, row, **changes) -> None:
        for name, value in changes.items():
            setattr(row, name, value)
        if hasattr(row, "updated_at"):
            row.updated_at = timezone.now()

    def delete_where(self, predicate: Callable[[object], bool]) -> int:
        doomed = [pk for pk, row in self._rows.items() if predicate(row)]
        for pk in doomed:
            del self._rows[pk]
        return len(doomed)


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """Publishes collected events as soon as the block exits cleanly."""

    def __init__(self, bus=None):
        super().__init__(bus)
        self.committed = False

    def commit(self):
        self.committed = True
        events = self._drain_events()
        if events:
            self._publish_events(events)
