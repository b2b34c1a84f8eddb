"""URL routing for the booking domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import BookingViewSet

booking_list = BookingViewSet.as_view({"get": "list", "post": "create"})
booking_detail = BookingViewSet.as_view(
    {"get": "retrieve", "put": "update", "patch": "partial_update", "delete": "destroy"}
)
booking_bulk_delete = BookingViewSet.as_view({"post": "bulk_delete"})

urlpatterns = [
    path("", booking_list, name="booking-list"),
    path("bulk-delete/", booking_bulk_delete, name="booking-bulk-delete"),
    path("<int:pk>/", booking_detail, name="booking-detail"),
]
