"""Tests for the purge_legacy_closures management command."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command

from apps.bookings.models import Booking

DAY = date(2030, 5, 10)


def _booking(start_time: str, name: str) -> Booking:
    return Booking.objects.create(
        date=DAY,
        start_time=start_time,
        court="Court 1",
        customer_name=name,
        mobile_number="0000000000",
        price=Decimal("0"),
    )


@pytest.mark.django_db
def test_purge_removes_only_closed_marker_bookings() -> None:
    _booking("09:00", "CLOSED")
    _booking("10:00", "CLOSED")
    _booking("11:00", "Nimal Perera")
    out = StringIO()

    call_command("purge_legacy_closures", stdout=out)

    assert list(Booking.objects.values_list("customer_name", flat=True)) == ["Nimal Perera"]
    assert "Deleted 2 legacy closure booking(s)" in out.getvalue()


@pytest.mark.django_db
def test_dry_run_keeps_everything() -> None:
    _booking("09:00", "CLOSED")
    out = StringIO()

    call_command("purge_legacy_closures", "--dry-run", stdout=out)

    assert Booking.objects.count() == 1
    assert "Found 1 legacy closure booking(s)" in out.getvalue()
