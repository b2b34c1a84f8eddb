"""Admin registration for court pricing."""

from __future__ import annotations

from django.contrib import admin

from .models import CourtPricing


@admin.register(CourtPricing)
class CourtPricingAdmin(admin.ModelAdmin):
    list_display = ("effective_date", "price_per_court_per_hour", "changed_by", "reason", "updated_at")
    search_fields = ("reason", "changed_by")
    readonly_fields = ("created_at", "updated_at")
    date_hierarchy = "effective_date"
