"""URL routing for the booking domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import CurrentUserBookingsView, SpotBookingListView

urlpatterns = [
    path("spots/<str:spot_id>/bookings", SpotBookingListView.as_view(), name="spot-booking-list"),
    path("bookings/current", CurrentUserBookingsView.as_view(), name="booking-current"),
]
