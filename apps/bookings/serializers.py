"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from shared.domain.value_objects import HourRange, parse_hour

from .domain import catalog
from .models import Booking
from .services import ReservationRequest

HOUR_PATTERN = r"^\d{2}:00$"
DATE_ERRORS = {
    "required": "Date parameter is required (format: YYYY-MM-DD)",
    "null": "Date parameter is required (format: YYYY-MM-DD)",
    "invalid": "Invalid date format. Use YYYY-MM-DD",
}
MOBILE_ERRORS = {"invalid": "Mobile number must be 10 digits"}
HOUR_ERRORS = {"invalid": "Time must be a whole hour in HH:00 format"}


class BookingSerializer(serializers.ModelSerializer):
    """One court for one hour."""

    startTime = serializers.CharField(source="start_time", read_only=True)
    endTime = serializers.CharField(source="end_time", read_only=True)
    courtId = serializers.CharField(source="court", read_only=True)
    customerName = serializers.CharField(source="customer_name", read_only=True)
    mobileNumber = serializers.CharField(source="mobile_number", read_only=True)
    groupId = serializers.UUIDField(source="group_id", read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "date",
            "startTime",
            "endTime",
            "courtId",
            "customerName",
            "mobileNumber",
            "status",
            "price",
            "groupId",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields


class SlotViewSerializer(serializers.Serializer):
    """Read-only entry of the day grid."""

    date = serializers.DateField(source="slot.date")
    startTime = serializers.CharField(source="slot.start_time")
    endTime = serializers.CharField(source="slot.end_time")
    courtId = serializers.CharField(source="slot.court")
    isAvailable = serializers.BooleanField(source="is_available")
    isClosed = serializers.BooleanField(source="is_closed")
    booking = BookingSerializer(allow_null=True)
    closedReason = serializers.CharField(source="closed_reason", allow_null=True)
    closureStatus = serializers.CharField(source="closure_status", allow_null=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2)


class DateQuerySerializer(serializers.Serializer):
    date = serializers.DateField(input_formats=["%Y-%m-%d"], error_messages=DATE_ERRORS)


class BookingCreateSerializer(serializers.Serializer):
    """
    Reservation request as sent by the admin panel.

    The hour run is given as start and end time; the end is exclusive, so
    09:00-12:00 books three slots per court.
    """

    date = serializers.DateField(input_formats=["%Y-%m-%d"], error_messages=DATE_ERRORS)
    startTime = serializers.RegexField(HOUR_PATTERN, source="start_time", error_messages=HOUR_ERRORS)
    endTime = serializers.RegexField(HOUR_PATTERN, source="end_time", error_messages=HOUR_ERRORS)
    courtId = serializers.ChoiceField(choices=catalog.court_selections(), source="court_selection")
    customerName = serializers.CharField(max_length=100, source="customer_name")
    mobileNumber = serializers.RegexField(
        r"^[0-9]{10}$",
        source="mobile_number",
        error_messages=MOBILE_ERRORS,
    )
    status = serializers.ChoiceField(
        choices=Booking.INITIAL_STATUSES,
        default=Booking.Status.BOOKED,
    )

    def validate(self, attrs):  # type: ignore
        for field, source in (("startTime", "start_time"), ("endTime", "end_time")):
            try:
                parse_hour(attrs[source])
            except ValueError as exc:
                raise serializers.ValidationError({field: [str(exc)]}) from exc
        try:
            run = HourRange.from_times(attrs["start_time"], attrs["end_time"])
        except ValueError as exc:
            raise serializers.ValidationError({"endTime": ["End time must be after start time"]}) from exc
        attrs["hours"] = len(run)
        return attrs

    def to_request(self) -> ReservationRequest:
        data = self.validated_data
        return ReservationRequest(
            date=data["date"],
            start_time=data["start_time"],
            hours=data["hours"],
            court_selection=data["court_selection"],
            customer_name=data["customer_name"],
            mobile_number=data["mobile_number"],
            status=data["status"],
        )


class BookingUpdateSerializer(serializers.Serializer):
    customerName = serializers.CharField(max_length=100, source="customer_name", required=False)
    mobileNumber = serializers.RegexField(
        r"^[0-9]{10}$",
        source="mobile_number",
        required=False,
        error_messages=MOBILE_ERRORS,
    )
    status = serializers.ChoiceField(choices=Booking.Status.choices, required=False)


class BulkDeleteSerializer(serializers.Serializer):
    bookingIds = serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        source="booking_ids",
        allow_empty=False,
        error_messages={
            "required": "Please provide an array of booking IDs to delete",
            "empty": "Please provide an array of booking IDs to delete",
            "not_a_list": "Please provide an array of booking IDs to delete",
        },
    )
