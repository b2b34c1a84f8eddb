"""Tests for group-aware status changes and deletions."""

from __future__ import annotations

import pytest

from apps.bookings.models import Booking
from shared.domain.exceptions import InvalidRequest, NotFound


@pytest.fixture
def group(coordinator, make_request):
    return coordinator.reserve(make_request("18:00", hours=2, court="Both")).bookings


def test_status_change_cascades_to_the_whole_group(mutations, booking_repo, group) -> None:
    booking, updated = mutations.update_booking(group[2].pk, status=Booking.Status.COMPLETED)

    assert updated == 4
    assert booking.status == Booking.Status.COMPLETED
    assert {b.status for b in booking_repo.find_by_group(group[0].group_id)} == {Booking.Status.COMPLETED}


def test_customer_details_change_only_the_addressed_unit(mutations, booking_repo, group) -> None:
    booking, updated = mutations.update_booking(
        group[0].pk,
        customer_name="Kamal Silva",
        mobile_number="0779999999",
    )

    assert updated == 0
    assert booking.customer_name == "Kamal Silva"
    others = [b for b in booking_repo.find_by_group(group[0].group_id) if b.pk != group[0].pk]
    assert {b.customer_name for b in others} == {"Nimal Perera"}
    assert {b.mobile_number for b in others} == {"0771234567"}


def test_ungrouped_status_change_touches_one_booking(coordinator, mutations, make_request) -> None:
    single = coordinator.reserve(make_request("07:00")).bookings[0]
    coordinator.reserve(make_request("08:00"))

    _, updated = mutations.update_booking(single.pk, status=Booking.Status.CANCELLED)

    assert updated == 1


def test_same_status_is_a_no_op(mutations, group) -> None:
    _, updated = mutations.update_booking(group[0].pk, status=group[0].status)

    assert updated == 0


def test_finished_booking_cannot_change_status(mutations, group) -> None:
    mutations.update_booking(group[0].pk, status=Booking.Status.CANCELLED)

    with pytest.raises(InvalidRequest):
        mutations.update_booking(group[1].pk, status=Booking.Status.BOOKED)


def test_unknown_booking_is_not_found(mutations) -> None:
    with pytest.raises(NotFound):
        mutations.update_booking(999, status=Booking.Status.COMPLETED)
    with pytest.raises(NotFound):
        mutations.delete_booking(999)


def test_deleting_one_unit_deletes_the_group(mutations, booking_repo, group) -> None:
    deleted = mutations.delete_booking(group[3].pk)

    assert deleted == 4
    assert len(booking_repo.table) == 0


def test_deleting_ungrouped_booking(coordinator, mutations, booking_repo, make_request) -> None:
    single = coordinator.reserve(make_request("07:00")).bookings[0]
    coordinator.reserve(make_request("08:00"))

    assert mutations.delete_booking(single.pk) == 1
    assert len(booking_repo.table) == 1


def test_bulk_delete_does_not_cascade(mutations, booking_repo, group) -> None:
    deleted = mutations.bulk_delete([group[0].pk, group[1].pk])

    assert deleted == 2
    remaining = booking_repo.find_by_group(group[0].group_id)
    assert [b.pk for b in remaining] == [group[2].pk, group[3].pk]


def test_bulk_delete_needs_ids(mutations) -> None:
    with pytest.raises(InvalidRequest):
        mutations.bulk_delete([])
