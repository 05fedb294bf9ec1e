"""Serializers for authentication flows (register, login)."""

from __future__ import annotations

import logging
from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from django.db import transaction  # type: ignore
from rest_framework import serializers  # type: ignore

logger = logging.getLogger(__name__)

User = get_user_model()


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField(error_messages={"required": "Invalid email", "invalid": "Invalid email"})
    username = serializers.CharField(max_length=150, error_messages={"required": "Username is required"})
    firstName = serializers.CharField(source="first_name", max_length=150, error_messages={"required": "First Name is required"})
    lastName = serializers.CharField(source="last_name", max_length=150, error_messages={"required": "Last Name is required"})
    password = serializers.CharField(min_length=6, write_only=True)

    def validate_email(self, value: str) -> str:
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("User with that email already exists")
        return value

    def validate_username(self, value: str) -> str:
        if "@" in value:
            raise serializers.ValidationError("Username cannot be an email.")
        if User.objects.filter(username__iexact=value).exists():
            raise serializers.ValidationError("User with that username already exists")
        return value

    @transaction.atomic
    def create(self, validated_data: dict[str, Any]):  # type: ignore
        password = validated_data.pop("password")
        user = User.objects.create_user(password=password, **validated_data)
        logger.info(f"User {user.id} registered")
        return user


class LoginSerializer(serializers.Serializer):
    credential = serializers.CharField(error_messages={"required": "Email or username is required"})
    password = serializers.CharField(write_only=True, error_messages={"required": "Password is required"})

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        credential = attrs.get("credential", "")
        password = attrs.get("password", "")

        lookup = {"email__iexact": credential} if "@" in credential else {"username__iexact": credential}
        user = User.objects.filter(**lookup).first()
        if user is None:
            raise serializers.ValidationError({"credential": "Invalid credentials"})

        if user.is_locked:
            raise serializers.ValidationError({"credential": "Account is temporarily locked. Try again later."})

        if not user.check_password(password):
            user.register_failed_attempt(threshold=5)
            logger.warning(f"Failed login attempt for user {user.id}")
            raise serializers.ValidationError({"credential": "Invalid credentials"})

        if user.failed_login_attempts or user.locked_until:
            user.unlock()

        attrs["user"] = user
        return attrs
