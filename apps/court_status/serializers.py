"""Serializers for court closures."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.bookings.domain import catalog
from apps.bookings.serializers import DATE_ERRORS, HOUR_ERRORS, HOUR_PATTERN

from .models import CourtClosure


class CourtClosureSerializer(serializers.ModelSerializer):
    startTime = serializers.CharField(source="start_time", read_only=True)
    endTime = serializers.CharField(source="slot.end_time", read_only=True)
    courtId = serializers.CharField(source="court", read_only=True)
    closedBy = serializers.CharField(source="closed_by", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = CourtClosure
        fields = [
            "id",
            "date",
            "startTime",
            "endTime",
            "courtId",
            "status",
            "reason",
            "closedBy",
            "createdAt",
        ]


class SlotQuerySerializer(serializers.Serializer):
    date = serializers.DateField(input_formats=["%Y-%m-%d"], error_messages=DATE_ERRORS)
    startTime = serializers.RegexField(HOUR_PATTERN, source="start_time", error_messages=HOUR_ERRORS)
    courtId = serializers.ChoiceField(choices=catalog.courts(), source="court")


class CloseSlotSerializer(serializers.Serializer):
    """Close one hour, or the whole day when `closeFullDay` is set."""

    date = serializers.DateField(input_formats=["%Y-%m-%d"], error_messages=DATE_ERRORS)
    startTime = serializers.RegexField(
        HOUR_PATTERN,
        source="start_time",
        required=False,
        error_messages=HOUR_ERRORS,
    )
    courtId = serializers.ChoiceField(choices=catalog.court_selections(), source="court_selection")
    status = serializers.ChoiceField(choices=CourtClosure.Kind.choices, default=CourtClosure.Kind.CLOSED)
    reason = serializers.CharField(max_length=200, required=False, allow_blank=True, default="")
    closeFullDay = serializers.BooleanField(source="close_full_day", required=False, default=False)

    def validate(self, attrs):  # type: ignore
        if not attrs["close_full_day"] and not attrs.get("start_time"):
            raise serializers.ValidationError(
                {"startTime": ["Please provide date, startTime, and courtId"]}
            )
        return attrs


class CloseDaySerializer(serializers.Serializer):
    date = serializers.DateField(input_formats=["%Y-%m-%d"], error_messages=DATE_ERRORS)
    courtId = serializers.ChoiceField(choices=catalog.court_selections(), source="court_selection")
    status = serializers.ChoiceField(choices=CourtClosure.Kind.choices, default=CourtClosure.Kind.CLOSED)
    reason = serializers.CharField(max_length=200, required=False, allow_blank=True, default="")


class ReopenSerializer(serializers.Serializer):
    date = serializers.DateField(input_formats=["%Y-%m-%d"], error_messages=DATE_ERRORS)
    startTime = serializers.RegexField(
        HOUR_PATTERN,
        source="start_time",
        required=False,
        error_messages=HOUR_ERRORS,
    )
    courtId = serializers.ChoiceField(
        choices=catalog.court_selections(),
        source="court",
        required=False,
    )
    reopenFullDay = serializers.BooleanField(source="reopen_full_day", required=False, default=False)
