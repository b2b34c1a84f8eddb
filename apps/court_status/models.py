"""Closure ledger models."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from apps.bookings.models import BOTH_COURTS, Court
from shared.domain.value_objects import SlotIdentity

DEFAULT_SLOT_REASON = "Court closed by admin"
DEFAULT_DAY_REASON = "Court closed for the day"


class CourtClosure(models.Model):
    """A court taken out of service for one hour."""

    class Kind(models.TextChoices):
        CLOSED = "Closed", _("Closed")
        MAINTENANCE = "Maintenance", _("Maintenance")

    # "Both" only appears on rows written before closures were expanded per
    # court; readers treat it as closing every court at that time.
    COURT_CHOICES = [*Court.choices, (BOTH_COURTS, _("Both courts"))]

    date = models.DateField()
    start_time = models.CharField(max_length=5)
    court = models.CharField(max_length=20, choices=COURT_CHOICES)
    status = models.CharField(max_length=20, choices=Kind.choices, default=Kind.CLOSED)
    reason = models.CharField(max_length=200, blank=True, default=DEFAULT_SLOT_REASON)
    closed_by = models.CharField(max_length=150, default="admin")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Court closure")
        verbose_name_plural = _("Court closures")
        ordering = ["date", "start_time", "court"]
        constraints = [
            models.UniqueConstraint(
                fields=["date", "start_time", "court"],
                name="closure_unique_slot",
            ),
        ]
        indexes = [
            models.Index(fields=["date"]),
        ]

    def __str__(self) -> str:
        return f"{self.court} {self.date} {self.start_time} ({self.status})"

    @property
    def slot(self) -> SlotIdentity:
        return SlotIdentity(self.date, self.start_time, self.court)

    @property
    def covers_all_courts(self) -> bool:
        return self.court == BOTH_COURTS

    def covers(self, court: str) -> bool:
        return self.covers_all_courts or self.court == court
