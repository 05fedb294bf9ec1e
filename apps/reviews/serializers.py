"""Serializers for reviews.

Provide both read and write serializers for the ``Review`` model.
The reviewing user and the spot come from the request in the view.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserSummarySerializer

from .models import Review, ReviewImage

STARS_INVALID = 'Stars must be an integer from 1 to 5'


class ReviewImageSerializer(serializers.ModelSerializer):
    """Serializer for review images."""

    class Meta:
        model = ReviewImage
        fields = ['id', 'url']


class ReviewCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating a new review."""

    review = serializers.CharField(
        error_messages={
            'required': 'Review text is required',
            'blank': 'Review text is required',
            'null': 'Review text is required',
        }
    )
    stars = serializers.IntegerField(
        min_value=1,
        max_value=5,
        error_messages={
            key: STARS_INVALID
            for key in ('required', 'null', 'invalid', 'min_value', 'max_value', 'max_string_length')
        },
    )

    class Meta:
        model = Review
        fields = ['review', 'stars']


class ReviewSerializer(serializers.ModelSerializer):
    """Read serializer for reviews, with author and images."""

    userId = serializers.ReadOnlyField(source='user_id')
    spotId = serializers.ReadOnlyField(source='spot_id')
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)
    User = UserSummarySerializer(source='user', read_only=True)
    ReviewImages = ReviewImageSerializer(source='images', many=True, read_only=True)

    class Meta:
        model = Review
        fields = [
            'id',
            'userId',
            'spotId',
            'review',
            'stars',
            'createdAt',
            'updatedAt',
            'User',
            'ReviewImages',
        ]
