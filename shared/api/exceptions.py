"""
Centralized error handling for the REST API.

Every error leaves the API as `{"success": false, "message": ...}` so the
frontend can show `message` without knowing which layer failed.
"""

from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from shared.domain.exceptions import DomainError

logger = logging.getLogger(__name__)

MSG_SERVER_ERROR = "Server error. Please try again later."


def _first_message(detail) -> str:
    """Dig the first human readable message out of DRF's nested error data."""
    if isinstance(detail, dict):
        for field, value in detail.items():
            message = _first_message(value)
            if field in ("non_field_errors", "detail"):
                return message
            return f"{field}: {message}"
        return "Invalid request"
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else "Invalid request"
    return str(detail)


def api_exception_handler(exc, context):
    """
    Map an exception raised by a view into the API error envelope.

    Domain errors carry their own status code, DRF errors keep theirs, and
    anything else is logged and reported as a generic 500.
    """
    if isinstance(exc, DomainError):
        return Response({"success": False, **exc.to_payload()}, status=exc.status_code)

    response = drf_exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.error(
            "Unhandled error in %s",
            view.__class__.__name__ if view else "view",
            exc_info=exc,
        )
        return Response(
            {"success": False, "message": MSG_SERVER_ERROR},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    payload = {"success": False, "message": _first_message(response.data)}
    if isinstance(exc, ValidationError):
        payload["errors"] = response.data
    response.data = payload
    return response
