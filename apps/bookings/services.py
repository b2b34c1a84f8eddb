"""Domain services for booking workflows."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Callable, Iterable, List, Optional, Tuple
from uuid import UUID

from apps.bookings.domain import catalog
from apps.bookings.events import BookingsDeleted, BookingsReserved, BookingStatusChanged
from apps.bookings.models import Booking
from apps.bookings.repositories import BookingRepository, DjangoBookingRepository
from apps.court_status.repositories import ClosureRepository, DjangoClosureRepository
from apps.pricing.services import PricingResolver, get_pricing_resolver
from shared.application.uow import AbstractUnitOfWork, DjangoUnitOfWork
from shared.domain.exceptions import DuplicateSlot, InvalidRequest, NotFound, SlotUnavailable

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


@dataclass
class ReservationRequest:
    date: date
    start_time: str
    hours: int
    court_selection: str
    customer_name: str
    mobile_number: str
    status: str = Booking.Status.PENDING


@dataclass
class ReservationResult:
    bookings: List[Booking]
    total_price: Decimal
    group_id: Optional[UUID] = None


class ReservationCoordinator:
    """
    Turns one reservation request into unit bookings, all or nothing.

    Strategy:
    1. Expand the court selection and the hour run into slots
       (court first, then time)
    2. Pre-check every slot against closures, then bookings, and report the
       first blocked one
    3. Resolve the price once, as of the booked date
    4. Insert every unit in one batch inside the unit of work; the unique
       slot constraint settles races the pre-check cannot see
    """

    def __init__(
        self,
        bookings: BookingRepository,
        closures: ClosureRepository,
        pricing: PricingResolver,
        uow_factory: Callable[[], AbstractUnitOfWork] = DjangoUnitOfWork,
    ):
        self.bookings = bookings
        self.closures = closures
        self.pricing = pricing
        self.uow_factory = uow_factory

    def reserve(self, request: ReservationRequest) -> ReservationResult:
        if request.status not in Booking.INITIAL_STATUSES:
            raise InvalidRequest(
                f"Status must be one of: {', '.join(Booking.INITIAL_STATUSES)}"
            )

        courts = catalog.expand_courts(request.court_selection)
        slots = catalog.expand_request(
            request.date, request.start_time, request.hours, request.court_selection
        )

        for slot in slots:
            if self.closures.find_by_slot(slot) is not None:
                raise SlotUnavailable(slot, reason="closed")
            if self.bookings.exists_for_slot(slot):
                raise SlotUnavailable(slot, reason="booked")

        total_price = self.pricing.resolve_total(request.date, len(courts), request.hours)
        unit_price = (total_price / len(slots)).quantize(CENT)
        group_id = uuid.uuid4() if len(slots) > 1 else None

        pending = [
            Booking(
                date=slot.date,
                start_time=slot.start_time,
                court=slot.court,
                customer_name=request.customer_name,
                mobile_number=request.mobile_number,
                status=request.status,
                price=unit_price,
                group_id=group_id,
            )
            for slot in slots
        ]

        with self.uow_factory() as uow:
            try:
                created = self.bookings.insert_batch(pending)
            except DuplicateSlot as exc:
                logger.warning("Lost slot race for %s", exc.slot or slots[0])
                raise SlotUnavailable(exc.slot or slots[0], reason="booked") from exc
            uow.add_event(BookingsReserved(
                booking_ids=[booking.pk for booking in created],
                date=request.date,
                slots=slots,
                group_id=group_id,
                customer_name=request.customer_name,
                total_price=total_price,
            ))

        logger.info(
            "Reserved %d slot(s) on %s from %s for %s",
            len(created),
            request.date,
            request.start_time,
            request.court_selection,
        )
        return ReservationResult(bookings=list(created), total_price=total_price, group_id=group_id)


class GroupMutationService:
    """
    Status changes and deletions that follow the booking group.

    Status cascades to every unit sharing the group id; customer details
    only change on the addressed unit. `bulk_delete` never cascades.
    """

    def __init__(
        self,
        bookings: BookingRepository,
        uow_factory: Callable[[], AbstractUnitOfWork] = DjangoUnitOfWork,
    ):
        self.bookings = bookings
        self.uow_factory = uow_factory

    def get(self, booking_id) -> Booking:
        booking = self.bookings.get(booking_id)
        if booking is None:
            raise NotFound("Booking not found")
        return booking

    def group_of(self, booking: Booking) -> List[Booking]:
        if booking.group_id is None:
            return [booking]
        return self.bookings.find_by_group(booking.group_id)

    def update_booking(
        self,
        booking_id,
        *,
        status: str | None = None,
        customer_name: str | None = None,
        mobile_number: str | None = None,
    ) -> Tuple[Booking, int]:
        """Returns the refreshed booking and how many units changed status."""
        booking = self.get(booking_id)
        previous_status = booking.status
        status_changes = bool(status) and status != previous_status

        if status_changes:
            if status not in Booking.Status.values:
                raise InvalidRequest(
                    f"Status must be one of: {', '.join(Booking.Status.values)}"
                )
            if previous_status in Booking.TERMINAL_STATUSES:
                raise InvalidRequest(
                    f"Booking is already {previous_status.lower()}; its status can no longer change"
                )

        updated = 0
        with self.uow_factory() as uow:
            if customer_name or mobile_number:
                self.bookings.update_contact(
                    booking.pk, customer_name=customer_name, mobile_number=mobile_number
                )
            if status_changes:
                if booking.group_id is not None:
                    affected = [member.pk for member in self.group_of(booking)]
                    updated = self.bookings.update_group_status(booking.group_id, status)
                else:
                    affected = [booking.pk]
                    updated = self.bookings.update_status(booking.pk, status)
                uow.add_event(BookingStatusChanged(
                    booking_ids=affected,
                    group_id=booking.group_id,
                    previous_status=previous_status,
                    status=status,
                ))

        return self.get(booking_id), updated

    def delete_booking(self, booking_id) -> int:
        """Delete the booking, or its whole group; returns the count removed."""
        with self.uow_factory() as uow:
            booking = self.get(booking_id)
            if booking.group_id is not None:
                removed = [member.pk for member in self.group_of(booking)]
                deleted = self.bookings.delete_by_group(booking.group_id)
            else:
                removed = [booking.pk]
                deleted = self.bookings.delete_by_id(booking.pk)
            uow.add_event(BookingsDeleted(
                booking_ids=removed,
                deleted_count=deleted,
                group_id=booking.group_id,
                cascaded=booking.group_id is not None,
            ))
        return deleted

    def bulk_delete(self, booking_ids: Iterable) -> int:
        booking_ids = list(booking_ids)
        if not booking_ids:
            raise InvalidRequest("Please provide an array of booking IDs to delete")
        with self.uow_factory() as uow:
            deleted = self.bookings.delete_by_ids(booking_ids)
            if deleted:
                uow.add_event(BookingsDeleted(booking_ids=booking_ids, deleted_count=deleted))
        return deleted


def get_reservation_coordinator() -> ReservationCoordinator:
    return ReservationCoordinator(
        DjangoBookingRepository(),
        DjangoClosureRepository(),
        get_pricing_resolver(),
    )


def get_group_mutation_service() -> GroupMutationService:
    return GroupMutationService(DjangoBookingRepository())
