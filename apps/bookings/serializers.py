"""Serializers for the booking domain.

Responses use the camelCase keys of the public API.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.spots.domain.enrichment import preview_url
from apps.users.serializers import UserSummarySerializer

from .models import Booking


class BookingRequestSerializer(serializers.Serializer):
    """Dates of a booking proposal, as ``YYYY-MM-DD``."""

    startDate = serializers.DateField(
        error_messages={
            "required": "startDate is required",
            "null": "startDate is required",
            "invalid": "startDate must be a date",
        }
    )
    endDate = serializers.DateField(
        error_messages={
            "required": "endDate is required",
            "null": "endDate is required",
            "invalid": "endDate must be a date",
        }
    )


class BookingSerializer(serializers.Serializer):
    """Serializer for a committed Booking domain model."""

    id = serializers.IntegerField()
    spotId = serializers.IntegerField(source="spot_id")
    userId = serializers.IntegerField(source="guest_id")
    startDate = serializers.DateField(source="start_date")
    endDate = serializers.DateField(source="end_date")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class PublicBookingSerializer(serializers.ModelSerializer):
    """What anyone but the spot owner may see of a booking."""

    spotId = serializers.ReadOnlyField(source="spot_id")
    startDate = serializers.DateField(source="start_date", read_only=True)
    endDate = serializers.DateField(source="end_date", read_only=True)

    class Meta:
        model = Booking
        fields = ["spotId", "startDate", "endDate"]


class OwnerBookingSerializer(serializers.ModelSerializer):
    """Full booking details, with the guest, for the spot owner."""

    User = UserSummarySerializer(source="user", read_only=True)
    spotId = serializers.ReadOnlyField(source="spot_id")
    userId = serializers.ReadOnlyField(source="user_id")
    startDate = serializers.DateField(source="start_date", read_only=True)
    endDate = serializers.DateField(source="end_date", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Booking
        fields = ["User", "id", "spotId", "userId", "startDate", "endDate", "createdAt", "updatedAt"]


class BookedSpotSerializer(serializers.Serializer):
    """Spot summary nested in the guest's booking list.

    Expects ``previews`` (spot id -> SpotImage) in the serializer context.
    """

    id = serializers.IntegerField()
    ownerId = serializers.IntegerField(source="owner_id")
    address = serializers.CharField()
    city = serializers.CharField()
    state = serializers.CharField()
    country = serializers.CharField()
    lat = serializers.DecimalField(max_digits=9, decimal_places=6, coerce_to_string=False)
    lng = serializers.DecimalField(max_digits=9, decimal_places=6, coerce_to_string=False)
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False)
    previewImage = serializers.SerializerMethodField()

    def get_previewImage(self, obj) -> str:  # type: ignore
        return preview_url(self.context.get("previews", {}).get(obj.id))


class GuestBookingSerializer(BookingSerializer):
    """A Booking domain model of the current user, with the booked spot.

    Expects ``spots`` (spot id -> Spot) in the serializer context.
    """

    Spot = serializers.SerializerMethodField()

    def get_Spot(self, obj) -> dict | None:  # type: ignore
        spot = self.context.get("spots", {}).get(obj.spot_id)
        if spot is None:
            return None
        return BookedSpotSerializer(spot, context=self.context).data
