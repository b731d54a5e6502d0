"""URL configuration for the Pan Logistics API.

Routes carry no trailing slash, matching the paths the website calls.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

from apps.core.views import HealthView

urlpatterns = [
    path('admin/', admin.site.urls),
    # Application URLs
    path('api/auth/', include('apps.users.auth_urls')),
    path('api/', include('apps.bookings.urls')),
    path('api/tracking/', include('apps.tracking.urls')),
    path('api/', include('apps.contact.urls')),
    path('api/health', HealthView.as_view(), name='health'),
    path('api/schema', SpectacularAPIView.as_view(), name='schema'),
]

handler404 = 'apps.core.views.not_found'
handler500 = 'apps.core.views.server_error'
