"""Serializers for user-related API responses."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """The signed-in user."""

    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)

    class Meta:
        model = User
        fields = ["id", "firstName", "lastName", "email", "username"]
        read_only_fields = fields


class UserSummarySerializer(serializers.ModelSerializer):
    """Public name card embedded in reviews and bookings."""

    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)

    class Meta:
        model = User
        fields = ["id", "firstName", "lastName"]
        read_only_fields = fields
