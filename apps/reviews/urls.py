"""URL routing for the reviews domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import SpotReviewListView

urlpatterns = [
    path('spots/<str:spot_id>/reviews', SpotReviewListView.as_view(), name='spot-review-list'),
]
