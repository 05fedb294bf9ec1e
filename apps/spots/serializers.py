"""Serializers for the spots domain.

Responses use the camelCase keys of the public API.
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore

from .models import Spot, SpotImage


def _messages(message: str) -> dict[str, str]:
    """Use one message for every way a field can fail."""

    keys = (
        "required",
        "null",
        "blank",
        "invalid",
        "max_length",
        "min_length",
        "min_value",
        "max_value",
        "max_digits",
        "max_decimal_places",
        "max_whole_digits",
        "max_string_length",
    )
    return {key: message for key in keys}


class SpotWriteSerializer(serializers.ModelSerializer):
    """Create / edit a spot; every failing field is reported at once."""

    address = serializers.CharField(max_length=255, error_messages=_messages("Street address is required"))
    city = serializers.CharField(max_length=100, error_messages=_messages("City is required"))
    state = serializers.CharField(max_length=100, error_messages=_messages("State is required"))
    country = serializers.CharField(max_length=100, error_messages=_messages("Country is required"))
    lat = serializers.DecimalField(
        max_digits=None,
        decimal_places=None,
        min_value=Decimal("-90"),
        max_value=Decimal("90"),
        error_messages=_messages("Latitude is not valid"),
    )
    lng = serializers.DecimalField(
        max_digits=None,
        decimal_places=None,
        min_value=Decimal("-180"),
        max_value=Decimal("180"),
        error_messages=_messages("Longitude is not valid"),
    )
    name = serializers.CharField(max_length=50, error_messages=_messages("Name must be less than 50 characters"))
    description = serializers.CharField(error_messages=_messages("Description is required"))
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("1"),
        error_messages=_messages("Price per day is required"),
    )

    class Meta:
        model = Spot
        fields = ["address", "city", "state", "country", "lat", "lng", "name", "description", "price"]


class SpotSerializer(serializers.ModelSerializer):
    """Plain spot representation returned after writes."""

    ownerId = serializers.ReadOnlyField(source="owner_id")
    lat = serializers.DecimalField(max_digits=9, decimal_places=6, coerce_to_string=False, read_only=True)
    lng = serializers.DecimalField(max_digits=9, decimal_places=6, coerce_to_string=False, read_only=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False, read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Spot
        fields = [
            "id",
            "ownerId",
            "address",
            "city",
            "state",
            "country",
            "lat",
            "lng",
            "name",
            "description",
            "price",
            "createdAt",
            "updatedAt",
        ]


class EnrichedSpotSerializer(serializers.Serializer):
    """Serializer for the EnrichedSpot projection."""

    id = serializers.IntegerField(source="spot.id")
    ownerId = serializers.IntegerField(source="spot.owner_id")
    address = serializers.CharField(source="spot.address")
    city = serializers.CharField(source="spot.city")
    state = serializers.CharField(source="spot.state")
    country = serializers.CharField(source="spot.country")
    lat = serializers.DecimalField(source="spot.lat", max_digits=9, decimal_places=6, coerce_to_string=False)
    lng = serializers.DecimalField(source="spot.lng", max_digits=9, decimal_places=6, coerce_to_string=False)
    name = serializers.CharField(source="spot.name")
    description = serializers.CharField(source="spot.description")
    price = serializers.DecimalField(source="spot.price", max_digits=10, decimal_places=2, coerce_to_string=False)
    createdAt = serializers.DateTimeField(source="spot.created_at")
    updatedAt = serializers.DateTimeField(source="spot.updated_at")
    avgRating = serializers.SerializerMethodField()
    previewImage = serializers.CharField(source="preview_image")

    def get_avgRating(self, obj) -> float | str:  # type: ignore
        return obj.avg_rating


class SpotImageSerializer(serializers.Serializer):
    """Serializer for the SpotImage domain model."""

    id = serializers.IntegerField()
    url = serializers.CharField()
    preview = serializers.BooleanField()


class SpotImageCreateSerializer(serializers.ModelSerializer):
    preview = serializers.BooleanField(default=False)

    class Meta:
        model = SpotImage
        fields = ["id", "url", "preview"]
        read_only_fields = ["id"]
        extra_kwargs = {
            "url": {"error_messages": {"required": "Image url is required", "invalid": "Image url is not valid"}},
        }
