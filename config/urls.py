"""URL configuration for the court booking service.

Every API route lives under `/api/`; the Django admin stays at `/admin/`.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

from shared.api.views import api_index, health

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', api_index, name='api-index'),
    path('api/health/', health, name='health'),
    # Application URLs
    path('api/admin/', include('apps.accounts.urls', namespace='accounts')),
    path('api/bookings/', include('apps.bookings.urls')),
    path('api/court-status/', include('apps.court_status.urls')),
    path('api/pricing/', include('apps.pricing.urls')),
    # OpenAPI schema and docs
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
