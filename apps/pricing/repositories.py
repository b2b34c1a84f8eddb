"""Price history persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, Tuple

from apps.pricing.models import CourtPricing
from shared.infrastructure.memory import InMemoryTable


class PriceRepository(ABC):
    @abstractmethod
    def get(self, record_id) -> Optional[CourtPricing]:
        ...

    @abstractmethod
    def effective_on(self, day: date) -> Optional[CourtPricing]:
        """Latest record with effective_date <= day; ties go to the latest update."""

    @abstractmethod
    def get_by_effective_date(self, day: date) -> Optional[CourtPricing]:
        ...

    @abstractmethod
    def history(self, limit: int) -> List[CourtPricing]:
        ...

    @abstractmethod
    def save(self, record: CourtPricing) -> CourtPricing:
        ...

    @abstractmethod
    def upsert(self, effective_date: date, **fields) -> Tuple[CourtPricing, bool]:
        """Write `fields` onto the record for `effective_date`, creating it if needed."""

    @abstractmethod
    def delete(self, record_id) -> int:
        ...


class DjangoPriceRepository(PriceRepository):
    model = CourtPricing

    def get(self, record_id) -> Optional[CourtPricing]:
        return self.model.objects.filter(pk=record_id).first()

    def effective_on(self, day: date) -> Optional[CourtPricing]:
        return (
            self.model.objects.filter(effective_date__lte=day)
            .order_by("-effective_date", "-updated_at")
            .first()
        )

    def get_by_effective_date(self, day: date) -> Optional[CourtPricing]:
        return self.model.objects.filter(effective_date=day).first()

    def history(self, limit: int) -> List[CourtPricing]:
        return list(self.model.objects.order_by("-effective_date", "-created_at")[:limit])

    def save(self, record: CourtPricing) -> CourtPricing:
        record.save()
        return record

    def upsert(self, effective_date: date, **fields) -> Tuple[CourtPricing, bool]:
        # update_or_create falls back to a get when a concurrent insert wins.
        return self.model.objects.update_or_create(effective_date=effective_date, defaults=fields)

    def delete(self, record_id) -> int:
        deleted, _ = self.model.objects.filter(pk=record_id).delete()
        return deleted


class InMemoryPriceRepository(PriceRepository):
    def __init__(self):
        self.table = InMemoryTable(key=lambda record: record.effective_date)

    def get(self, record_id) -> Optional[CourtPricing]:
        return self.table.get(record_id)

    def effective_on(self, day: date) -> Optional[CourtPricing]:
        candidates = self.table.filter(lambda r: r.effective_date <= day)
        if not candidates:
            return None
        return max(candidates, key=lambda r: (r.effective_date, r.updated_at))

    def get_by_effective_date(self, day: date) -> Optional[CourtPricing]:
        return self.table.first(lambda r: r.effective_date == day)

    def history(self, limit: int) -> List[CourtPricing]:
        rows = sorted(self.table.all(), key=lambda r: (r.effective_date, r.created_at), reverse=True)
        return rows[:limit]

    def save(self, record: CourtPricing) -> CourtPricing:
        return self.table.save(record)

    def upsert(self, effective_date: date, **fields) -> Tuple[CourtPricing, bool]:
        record = self.get_by_effective_date(effective_date)
        if record is None:
            return self.table.insert(CourtPricing(effective_date=effective_date, **fields)), True
        self.table.touch(record, **fields)
        return record, False

    def delete(self, record_id) -> int:
        record = self.get(record_id)
        if record is None:
            return 0
        return self.table.delete_where(lambda r: r.pk == record.pk)
