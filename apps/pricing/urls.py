"""URL routing for court pricing."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import PricingViewSet

urlpatterns = [
    path("", PricingViewSet.as_view({"post": "create"}), name="pricing-list"),
    path("current/", PricingViewSet.as_view({"get": "current"}), name="pricing-current"),
    path("history/", PricingViewSet.as_view({"get": "history"}), name="pricing-history"),
    path("<int:pk>/", PricingViewSet.as_view({"delete": "destroy"}), name="pricing-detail"),
]
