"""
Closure ledger

Closures are a blocking layer independent of bookings. Closing refuses a
slot that is already closed or already booked; closing a whole day skips
such slots instead of failing. Reopening only deletes closures.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List, Optional

from apps.bookings.domain import catalog
from apps.bookings.repositories import BookingRepository, DjangoBookingRepository
from apps.court_status.events import SlotsClosed, SlotsReopened
from apps.court_status.models import DEFAULT_DAY_REASON, DEFAULT_SLOT_REASON, CourtClosure
from apps.court_status.repositories import ClosureRepository, DjangoClosureRepository
from shared.application.uow import AbstractUnitOfWork, DjangoUnitOfWork
from shared.domain.exceptions import ClosureConflict, DuplicateSlot, InvalidRequest, NotFound, SlotUnavailable
from shared.domain.value_objects import SlotIdentity

logger = logging.getLogger(__name__)


@dataclass
class DayClosureResult:
    created: List[CourtClosure] = field(default_factory=list)
    already_closed: List[SlotIdentity] = field(default_factory=list)
    skipped: List[SlotIdentity] = field(default_factory=list)


def _check_kind(status: str) -> str:
    if status not in CourtClosure.Kind.values:
        raise InvalidRequest(
            f"Status must be one of: {', '.join(CourtClosure.Kind.values)}"
        )
    return status


class ClosureLedger:
    def __init__(
        self,
        closures: ClosureRepository,
        bookings: BookingRepository,
        uow_factory: Callable[[], AbstractUnitOfWork] = DjangoUnitOfWork,
    ):
        self.closures = closures
        self.bookings = bookings
        self.uow_factory = uow_factory

    def find(self, slot: SlotIdentity) -> Optional[CourtClosure]:
        return self.closures.find_by_slot(slot)

    def is_closed(self, slot: SlotIdentity) -> bool:
        return self.find(slot) is not None

    def for_date(self, day: date) -> List[CourtClosure]:
        return self.closures.find_by_date(day)

    def close(
        self,
        day: date,
        start_time: str,
        court_selection: str,
        *,
        status: str = CourtClosure.Kind.CLOSED,
        reason: str = "",
        closed_by: str = "admin",
    ) -> List[CourtClosure]:
        """Close one hour on one court, or on every court for "Both"."""
        _check_kind(status)
        catalog.expand_hours(start_time, 1)
        slots = [SlotIdentity(day, start_time, court) for court in catalog.expand_courts(court_selection)]

        for slot in slots:
            if self.closures.find_by_slot(slot) is not None:
                raise ClosureConflict(slot)
            if self.bookings.exists_for_slot(slot):
                raise SlotUnavailable(slot, reason="booked")

        reason = reason or DEFAULT_SLOT_REASON
        pending = [
            CourtClosure(
                date=slot.date,
                start_time=slot.start_time,
                court=slot.court,
                status=status,
                reason=reason,
                closed_by=closed_by,
            )
            for slot in slots
        ]

        with self.uow_factory() as uow:
            try:
                created = self.closures.insert_batch(pending)
            except DuplicateSlot as exc:
                raise ClosureConflict(exc.slot or slots[0]) from exc
            uow.add_event(SlotsClosed(
                date=day,
                slots=slots,
                status=status,
                reason=reason,
                closed_by=closed_by,
            ))

        logger.info("Closed %d slot(s) on %s at %s", len(created), day, start_time)
        return created

    def close_day(
        self,
        day: date,
        court_selection: str,
        *,
        status: str = CourtClosure.Kind.CLOSED,
        reason: str = "",
        closed_by: str = "admin",
    ) -> DayClosureResult:
        """
        Close every hour of the day. Safe to repeat: slots that are already
        closed are left alone, booked slots are reported as skipped.
        """
        _check_kind(status)
        courts = catalog.expand_courts(court_selection)
        reason = reason or DEFAULT_DAY_REASON
        result = DayClosureResult()

        with self.uow_factory() as uow:
            for start_time in catalog.time_slots():
                for court in courts:
                    slot = SlotIdentity(day, start_time, court)
                    if self.bookings.exists_for_slot(slot):
                        result.skipped.append(slot)
                        continue
                    closure, created = self.closures.insert_if_absent(CourtClosure(
                        date=day,
                        start_time=start_time,
                        court=court,
                        status=status,
                        reason=reason,
                        closed_by=closed_by,
                    ))
                    if created:
                        result.created.append(closure)
                    else:
                        result.already_closed.append(slot)
            if result.created:
                uow.add_event(SlotsClosed(
                    date=day,
                    slots=[closure.slot for closure in result.created],
                    status=status,
                    reason=reason,
                    closed_by=closed_by,
                    full_day=True,
                ))

        logger.info(
            "Closed day %s: %d created, %d already closed, %d booked",
            day,
            len(result.created),
            len(result.already_closed),
            len(result.skipped),
        )
        return result

    def reopen(self, closure_id) -> CourtClosure:
        with self.uow_factory() as uow:
            closure = self.closures.get(closure_id)
            if closure is None:
                raise NotFound("Court status not found")
            self.closures.delete_by_id(closure_id)
            uow.add_event(SlotsReopened(
                date=closure.date,
                deleted_count=1,
                start_time=closure.start_time,
                court=closure.court,
                closure_ids=[closure.pk],
            ))
        return closure

    def reopen_many(
        self,
        day: date,
        *,
        start_time: str | None = None,
        court: str | None = None,
    ) -> int:
        """Delete closures of a day, narrowed by hour and court when given."""
        if court:
            catalog.expand_courts(court)
        with self.uow_factory() as uow:
            deleted = self.closures.delete_matching(day, start_time=start_time, court=court)
            if deleted:
                uow.add_event(SlotsReopened(
                    date=day,
                    deleted_count=deleted,
                    start_time=start_time,
                    court=court,
                ))
        logger.info("Reopened %d slot(s) on %s", deleted, day)
        return deleted


def get_closure_ledger() -> ClosureLedger:
    return ClosureLedger(DjangoClosureRepository(), DjangoBookingRepository())
