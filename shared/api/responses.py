"""Success envelope shared by all endpoints."""

from __future__ import annotations

from rest_framework import status as http_status
from rest_framework.response import Response


def ok(data=None, *, status: int = http_status.HTTP_200_OK, **extra) -> Response:
    body = {"success": True, **extra}
    if data is not None:
        body["data"] = data
    return Response(body, status=status)


def created(data=None, **extra) -> Response:
    return ok(data, status=http_status.HTTP_201_CREATED, **extra)
