"""URL configuration for SpotBnB project.

The `urlpatterns` list routes URLs to views. It includes the Django admin,
the session endpoints, every domain app under `api/` and the OpenAPI schema.
"""
from django.contrib import admin  # type: ignore
from django.urls import include, path  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
    # Application URLs
    path('api/session/', include(('apps.users.auth_urls', 'auth'), namespace='auth')),
    path('api/', include('apps.spots.urls')),
    path('api/', include('apps.reviews.urls')),
    path('api/', include('apps.bookings.urls')),
    # API schema
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
]

handler404 = 'config.views.not_found'
handler500 = 'config.views.server_error'
