"""FilterSet for the closure listing."""

from __future__ import annotations

import django_filters  # type: ignore

from apps.bookings.models import BOTH_COURTS

from .models import CourtClosure


class CourtClosureFilterSet(django_filters.FilterSet):
    date = django_filters.DateFilter(
        field_name="date",
        required=True,
        input_formats=["%Y-%m-%d"],
        error_messages={
            "required": "Date parameter is required (format: YYYY-MM-DD)",
            "invalid": "Invalid date format. Use YYYY-MM-DD",
        },
    )
    courtId = django_filters.CharFilter(method="filter_court")
    status = django_filters.ChoiceFilter(field_name="status", choices=CourtClosure.Kind.choices)

    class Meta:
        model = CourtClosure
        fields = ["date", "status"]

    def filter_court(self, queryset, name, value):  # type: ignore
        # An all-courts row closes each court too.
        if not value or value == BOTH_COURTS:
            return queryset
        return queryset.filter(court__in=[value, BOTH_COURTS])
