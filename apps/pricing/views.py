"""API views for court pricing."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore

from shared.api.responses import created, ok

from .serializers import (
    CourtPricingSerializer,
    CurrentPriceSerializer,
    HistoryQuerySerializer,
    PriceScheduleSerializer,
)
from .services import get_pricing_service


class PricingViewSet(viewsets.ViewSet):
    """Price per court per hour and its history. Admin only."""

    @extend_schema(responses=CurrentPriceSerializer)
    @action(detail=False, methods=["get"])
    def current(self, request):  # type: ignore
        current = get_pricing_service().current()
        return ok(CurrentPriceSerializer(current).data)

    @extend_schema(parameters=[HistoryQuerySerializer], responses=CourtPricingSerializer(many=True))
    @action(detail=False, methods=["get"])
    def history(self, request):  # type: ignore
        query = HistoryQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        records = get_pricing_service().history(query.validated_data.get("limit"))
        return ok(CourtPricingSerializer(records, many=True).data, count=len(records))

    @extend_schema(request=PriceScheduleSerializer, responses=CourtPricingSerializer)
    def create(self, request):  # type: ignore
        serializer = PriceScheduleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        record, is_new = get_pricing_service().schedule(
            data["price_per_court_per_hour"],
            data["effective_date"],
            reason=data["reason"],
            changed_by=request.user.get_username(),
        )
        payload = CourtPricingSerializer(record).data
        if is_new:
            return created(payload, message="Pricing created successfully")
        return ok(payload, message="Pricing updated successfully")

    def destroy(self, request, pk=None):  # type: ignore
        get_pricing_service().delete(pk)
        return ok(message="Pricing deleted successfully")
