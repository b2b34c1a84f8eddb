"""Admin registration for court closures."""

from __future__ import annotations

from django.contrib import admin

from .models import CourtClosure


@admin.register(CourtClosure)
class CourtClosureAdmin(admin.ModelAdmin):
    list_display = ("date", "start_time", "court", "status", "reason", "closed_by", "created_at")
    list_filter = ("status", "court", "date")
    search_fields = ("reason", "closed_by")
    readonly_fields = ("created_at", "updated_at")
    date_hierarchy = "date"
