"""Price history models."""

from __future__ import annotations

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class CourtPricing(models.Model):
    """Price per court per hour, effective from `effective_date` onward."""

    price_per_court_per_hour = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
    )
    effective_date = models.DateField(unique=True)
    changed_by = models.CharField(max_length=150, default="admin")
    reason = models.CharField(
        max_length=500,
        blank=True,
        help_text=_("Why the price changed; shown in the pricing history."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Court price")
        verbose_name_plural = _("Court prices")
        ordering = ["-effective_date", "-created_at"]

    def __str__(self) -> str:
        return f"{self.price_per_court_per_hour} from {self.effective_date}"
