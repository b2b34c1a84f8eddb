"""Booking domain models.

A booking reserves exactly one court for exactly one hour. Multi-hour and
"Both courts" requests are stored as several unit bookings that share a
`group_id`.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator, RegexValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import SlotIdentity, format_hour, parse_hour

BOTH_COURTS = "Both"

mobile_number_validator = RegexValidator(
    regex=r"^[0-9]{10}$",
    message=_("Mobile number must be 10 digits"),
)


class Court(models.TextChoices):
    COURT_1 = "Court 1", _("Court 1")
    COURT_2 = "Court 2", _("Court 2")


class Booking(models.Model):
    """One court reserved for one hour by one customer."""

    class Status(models.TextChoices):
        PENDING = "Pending", _("Pending")
        BOOKED = "Booked", _("Booked")
        COMPLETED = "Completed", _("Completed")
        CANCELLED = "Cancelled", _("Cancelled")

    TERMINAL_STATUSES = (Status.COMPLETED, Status.CANCELLED)
    INITIAL_STATUSES = (Status.PENDING, Status.BOOKED)

    date = models.DateField()
    start_time = models.CharField(max_length=5)
    court = models.CharField(max_length=20, choices=Court.choices)
    customer_name = models.CharField(max_length=100)
    mobile_number = models.CharField(max_length=10, validators=[mobile_number_validator])
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
        help_text=_("Price per court per hour captured when the booking was made."),
    )
    group_id = models.UUIDField(
        null=True,
        blank=True,
        db_index=True,
        help_text=_("Shared by the unit bookings of one multi-hour or two-court request."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["date", "start_time", "court"]
        constraints = [
            models.UniqueConstraint(
                fields=["date", "start_time", "court"],
                name="booking_unique_slot",
            ),
        ]
        indexes = [
            models.Index(fields=["date"]),
        ]

    def __str__(self) -> str:
        return f"{self.customer_name}: {self.court} {self.date} {self.start_time}"

    @property
    def end_time(self) -> str:
        return format_hour(parse_hour(self.start_time) + 1)

    @property
    def slot(self) -> SlotIdentity:
        return SlotIdentity(self.date, self.start_time, self.court)
