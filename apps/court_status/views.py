"""API views for court closures."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.exceptions import ValidationError  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.bookings.models import BOTH_COURTS
from shared.api.responses import created, ok
from shared.domain.value_objects import SlotIdentity

from .filters import CourtClosureFilterSet
from .repositories import DjangoClosureRepository
from .serializers import (
    CloseDaySerializer,
    CloseSlotSerializer,
    CourtClosureSerializer,
    ReopenSerializer,
    SlotQuerySerializer,
)
from .services import get_closure_ledger


def _court_label(selection: str) -> str:
    return "Both courts" if selection == BOTH_COURTS else selection


class CourtStatusViewSet(viewsets.ViewSet):
    """Closing and reopening court slots. Admin only."""

    @extend_schema(responses=CourtClosureSerializer(many=True))
    def list(self, request):  # type: ignore
        filterset = CourtClosureFilterSet(
            request.query_params,
            queryset=DjangoClosureRepository().queryset(),
        )
        if not filterset.is_valid():
            raise ValidationError(filterset.errors)
        closures = list(filterset.qs)
        return ok(CourtClosureSerializer(closures, many=True).data, count=len(closures))

    @extend_schema(parameters=[SlotQuerySerializer], responses=CourtClosureSerializer)
    @action(detail=False, methods=["get"])
    def check(self, request):  # type: ignore
        query = SlotQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        data = query.validated_data
        closure = get_closure_ledger().find(SlotIdentity(data["date"], data["start_time"], data["court"]))
        return Response({
            "success": True,
            "isClosed": closure is not None,
            "data": CourtClosureSerializer(closure).data if closure else None,
        })

    @extend_schema(request=CloseSlotSerializer, responses=CourtClosureSerializer(many=True))
    @action(detail=False, methods=["post"])
    def close(self, request):  # type: ignore
        serializer = CloseSlotSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        if data["close_full_day"]:
            return self._close_day(request, data)

        closures = get_closure_ledger().close(
            data["date"],
            data["start_time"],
            data["court_selection"],
            status=data["status"],
            reason=data["reason"],
            closed_by=request.user.get_username(),
        )
        payload = CourtClosureSerializer(closures, many=True).data
        return created(
            payload if len(closures) > 1 else payload[0],
            message=f"{_court_label(data['court_selection'])} closed successfully",
        )

    @extend_schema(request=CloseDaySerializer, responses=CourtClosureSerializer(many=True))
    @action(detail=False, methods=["post"], url_path="close-day")
    def close_day(self, request):  # type: ignore
        serializer = CloseDaySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self._close_day(request, serializer.validated_data)

    def _close_day(self, request, data):
        result = get_closure_ledger().close_day(
            data["date"],
            data["court_selection"],
            status=data["status"],
            reason=data["reason"],
            closed_by=request.user.get_username(),
        )
        return created(
            CourtClosureSerializer(result.created, many=True).data,
            message=f"{_court_label(data['court_selection'])} closed for entire day",
            count=len(result.created),
            alreadyClosed=len(result.already_closed),
            skipped=[{"startTime": slot.start_time, "courtId": slot.court} for slot in result.skipped],
        )

    @extend_schema(request=ReopenSerializer)
    @action(detail=False, methods=["post"])
    def reopen(self, request):  # type: ignore
        serializer = ReopenSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        start_time = None if data["reopen_full_day"] else data.get("start_time")
        deleted = get_closure_ledger().reopen_many(
            data["date"],
            start_time=start_time,
            court=data.get("court"),
        )
        return ok(message="Slots reopened successfully", deletedCount=deleted)

    def destroy(self, request, pk=None):  # type: ignore
        closure = get_closure_ledger().reopen(pk)
        return ok({}, message=f"{closure.court} reopened successfully")
