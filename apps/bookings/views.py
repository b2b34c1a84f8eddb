"""API views for the booking domain."""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema  # type: ignore
from rest_framework import permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore

from shared.api.responses import created, ok

from .availability import get_availability_builder
from .serializers import (
    BookingCreateSerializer,
    BookingSerializer,
    BookingUpdateSerializer,
    BulkDeleteSerializer,
    DateQuerySerializer,
    SlotViewSerializer,
)
from .services import get_group_mutation_service, get_reservation_coordinator


class BookingViewSet(viewsets.ViewSet):
    """Day grid, reservations and group-aware updates of bookings."""

    def get_permissions(self):  # type: ignore
        if self.action == "list":
            return [permissions.AllowAny()]
        return [permissions.IsAdminUser()]

    @extend_schema(
        parameters=[OpenApiParameter("date", str, required=True, description="YYYY-MM-DD")],
        responses=SlotViewSerializer(many=True),
    )
    def list(self, request):  # type: ignore
        query = DateQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        slots = get_availability_builder().build_day_slots(query.validated_data["date"])
        return ok(SlotViewSerializer(slots, many=True).data, count=len(slots))

    @extend_schema(request=BookingCreateSerializer, responses=BookingSerializer(many=True))
    def create(self, request):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = get_reservation_coordinator().reserve(serializer.to_request())

        if len(result.bookings) > 1:
            data = BookingSerializer(result.bookings, many=True).data
        else:
            data = BookingSerializer(result.bookings[0]).data
        return created(
            data,
            message="Booking created successfully",
            totalPrice=result.total_price,
        )

    @extend_schema(responses=BookingSerializer)
    def retrieve(self, request, pk=None):  # type: ignore
        booking = get_group_mutation_service().get(pk)
        return ok(BookingSerializer(booking).data)

    @extend_schema(request=BookingUpdateSerializer, responses=BookingSerializer)
    def update(self, request, pk=None):  # type: ignore
        serializer = BookingUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking, updated = get_group_mutation_service().update_booking(pk, **serializer.validated_data)
        return ok(
            BookingSerializer(booking).data,
            message="Booking updated successfully",
            updatedCount=updated,
        )

    def partial_update(self, request, pk=None):  # type: ignore
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):  # type: ignore
        deleted = get_group_mutation_service().delete_booking(pk)
        if deleted > 1:
            message = f"Deleted {deleted} related bookings"
        else:
            message = "Booking deleted successfully"
        return ok(message=message, deletedCount=deleted)

    @extend_schema(request=BulkDeleteSerializer)
    @action(detail=False, methods=["post"], url_path="bulk-delete")
    def bulk_delete(self, request):  # type: ignore
        serializer = BulkDeleteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        deleted = get_group_mutation_service().bulk_delete(serializer.validated_data["booking_ids"])
        return ok(message=f"{deleted} booking(s) deleted successfully", deletedCount=deleted)
