"""API views for the booking domain."""

from __future__ import annotations

import logging

from rest_framework import permissions  # type: ignore
from rest_framework.request import Request  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.spots.lookups import get_spot_or_404, parse_spot_id
from apps.spots.stores import DjangoSpotStore

from .application.command_handlers import ProposeBookingCommand, ProposeBookingHandler
from .models import Booking
from .serializers import (
    BookingRequestSerializer,
    BookingSerializer,
    GuestBookingSerializer,
    OwnerBookingSerializer,
    PublicBookingSerializer,
)
from .stores import DjangoBookingStore

logger = logging.getLogger(__name__)


class SpotBookingListView(APIView):
    """Handler for GET / POST /api/spots/{spot_id}/bookings"""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request: Request, spot_id: str) -> Response:
        spot = get_spot_or_404(spot_id)
        bookings = Booking.objects.filter(spot=spot)
        if spot.owner_id == request.user.id:
            data = OwnerBookingSerializer(bookings.select_related("user"), many=True).data
        else:
            data = PublicBookingSerializer(bookings, many=True).data
        return Response({"Bookings": data})

    def post(self, request: Request, spot_id: str) -> Response:
        spot_pk = parse_spot_id(spot_id)
        serializer = BookingRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        command = ProposeBookingCommand(
            spot_id=spot_pk,
            guest_id=request.user.id,
            start_date=serializer.validated_data["startDate"],
            end_date=serializer.validated_data["endDate"],
        )
        booking = ProposeBookingHandler(DjangoBookingStore()).handle(command)
        return Response(BookingSerializer(booking).data)


class CurrentUserBookingsView(APIView):
    """Handler for GET /api/bookings/current"""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request: Request) -> Response:
        bookings = DjangoBookingStore().list_bookings_for_guest(request.user.id)
        spot_ids = {b.spot_id for b in bookings}
        spot_store = DjangoSpotStore()
        context = {
            "spots": spot_store.find_spots_by_ids(spot_ids),
            "previews": spot_store.preview_images_for_spots(spot_ids),
        }
        serializer = GuestBookingSerializer(bookings, many=True, context=context)
        return Response({"Bookings": serializer.data})
