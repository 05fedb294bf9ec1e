"""URL routing for the spots domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import CurrentUserSpotsView, SpotDetailView, SpotImageListView, SpotListView

urlpatterns = [
    path("spots", SpotListView.as_view(), name="spot-list"),
    path("spots/current", CurrentUserSpotsView.as_view(), name="spot-current"),
    path("spots/<str:spot_id>", SpotDetailView.as_view(), name="spot-detail"),
    path("spots/<str:spot_id>/images", SpotImageListView.as_view(), name="spot-image-list"),
]
