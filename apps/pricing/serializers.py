"""Serializers for the price history."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.bookings.serializers import DATE_ERRORS

from .models import CourtPricing


class CourtPricingSerializer(serializers.ModelSerializer):
    pricePerCourtPerHour = serializers.DecimalField(
        source="price_per_court_per_hour",
        max_digits=10,
        decimal_places=2,
        read_only=True,
    )
    effectiveDate = serializers.DateField(source="effective_date", read_only=True)
    changedBy = serializers.CharField(source="changed_by", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = CourtPricing
        fields = [
            "id",
            "pricePerCourtPerHour",
            "effectiveDate",
            "reason",
            "changedBy",
            "createdAt",
            "updatedAt",
        ]


class CurrentPriceSerializer(serializers.Serializer):
    id = serializers.IntegerField(allow_null=True)
    pricePerCourtPerHour = serializers.DecimalField(
        source="price_per_court_per_hour",
        max_digits=10,
        decimal_places=2,
    )
    effectiveDate = serializers.DateField(source="effective_date")
    reason = serializers.CharField(allow_blank=True)
    isDefault = serializers.BooleanField(source="is_default")


class PriceScheduleSerializer(serializers.Serializer):
    pricePerCourtPerHour = serializers.DecimalField(
        source="price_per_court_per_hour",
        max_digits=10,
        decimal_places=2,
        min_value=0,
        error_messages={
            "required": "Price and effective date are required",
            "min_value": "Price cannot be negative",
        },
    )
    effectiveDate = serializers.DateField(
        source="effective_date",
        input_formats=["%Y-%m-%d"],
        error_messages={**DATE_ERRORS, "required": "Price and effective date are required"},
    )
    reason = serializers.CharField(max_length=500, required=False, allow_blank=True, default="")


class HistoryQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(min_value=1, max_value=100, required=False)
