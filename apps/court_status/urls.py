"""URL routing for court closures."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import CourtStatusViewSet

urlpatterns = [
    path("", CourtStatusViewSet.as_view({"get": "list"}), name="court-status-list"),
    path("check/", CourtStatusViewSet.as_view({"get": "check"}), name="court-status-check"),
    path("close/", CourtStatusViewSet.as_view({"post": "close"}), name="court-status-close"),
    path("close-day/", CourtStatusViewSet.as_view({"post": "close_day"}), name="court-status-close-day"),
    path("reopen/", CourtStatusViewSet.as_view({"post": "reopen"}), name="court-status-reopen"),
    path("<int:pk>/", CourtStatusViewSet.as_view({"delete": "destroy"}), name="court-status-detail"),
]
