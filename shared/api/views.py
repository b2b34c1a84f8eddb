"""Service-level endpoints: API index and health check."""

from __future__ import annotations

import logging

from django.db import DatabaseError, connection  # type: ignore
from django.utils import timezone  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.decorators import api_view, permission_classes  # type: ignore
from rest_framework.permissions import AllowAny  # type: ignore
from rest_framework.response import Response  # type: ignore

logger = logging.getLogger(__name__)


@api_view(["GET"])
@permission_classes([AllowAny])
def api_index(request):  # type: ignore
    return Response({
        "success": True,
        "message": "Court Booking API",
        "endpoints": {
            "admin": "/api/admin/",
            "bookings": "/api/bookings/",
            "courtStatus": "/api/court-status/",
            "pricing": "/api/pricing/",
            "health": "/api/health/",
            "docs": "/api/docs/",
        },
    })


@api_view(["GET"])
@permission_classes([AllowAny])
def health(request):  # type: ignore
    try:
        connection.ensure_connection()
    except DatabaseError:
        logger.error("Health check could not reach the database", exc_info=True)
        return Response(
            {"success": False, "status": "ERROR", "message": "Database unavailable"},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return Response({
        "success": True,
        "status": "OK",
        "message": "Server is running",
        "timestamp": timezone.now().isoformat(),
    })
