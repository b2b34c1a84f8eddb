"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "date",
        "start_time",
        "court",
        "customer_name",
        "mobile_number",
        "status",
        "price",
        "group_id",
    )
    list_filter = ("status", "court", "date")
    search_fields = ("customer_name", "mobile_number", "group_id")
    readonly_fields = ("price", "group_id", "created_at", "updated_at")
    date_hierarchy = "date"
    ordering = ("-date", "start_time", "court")
