"""API tests for session endpoints."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


class AuthAPITests(APITestCase):
    def test_register_returns_tokens(self) -> None:
        payload = {
            "email": "guest@example.com",
            "username": "guest",
            "firstName": "Guest",
            "lastName": "User",
            "password": "StrongPass123",
        }

        response = self.client.post(reverse("auth:register"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertIn("access", response.data["tokens"])
        self.assertEqual(response.data["user"]["email"], payload["email"])
        self.assertEqual(response.data["user"]["firstName"], "Guest")
        self.assertTrue(User.objects.filter(email=payload["email"]).exists())

    def test_register_rejects_taken_email_and_username(self) -> None:
        User.objects.create_user(email="taken@example.com", username="taken", password="Whatever123")

        response = self.client.post(
            reverse("auth:register"),
            {
                "email": "taken@example.com",
                "username": "taken",
                "firstName": "A",
                "lastName": "B",
                "password": "StrongPass123",
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(
            response.data["errors"],
            {
                "email": "User with that email already exists",
                "username": "User with that username already exists",
            },
        )

    def test_login_with_email_or_username(self) -> None:
        User.objects.create_user(email="host@example.com", username="host", password="CorrectPassword1")

        for credential in ["host@example.com", "host"]:
            response = self.client.post(
                reverse("auth:login"),
                {"credential": credential, "password": "CorrectPassword1"},
                format="json",
            )
            self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
            self.assertIn("refresh", response.data["tokens"])

    def test_login_limited_attempts(self) -> None:
        user = User.objects.create_user(email="lock@example.com", username="lock", password="CorrectPassword1")

        url = reverse("auth:login")
        wrong_payload = {"credential": user.email, "password": "wrong"}
        for _ in range(5):
            response = self.client.post(url, wrong_payload, format="json")

        user.refresh_from_db()
        self.assertTrue(user.is_locked)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        # After lock expires user can login again
        user.locked_until = timezone.now() - timedelta(minutes=1)
        user.save(update_fields=["locked_until"])
        response = self.client.post(url, {"credential": user.email, "password": "CorrectPassword1"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

    def test_session_returns_current_user(self) -> None:
        user = User.objects.create_user(email="me@example.com", username="me", password="MyPassword1")
        self.client.force_authenticate(user)

        response = self.client.get(reverse("auth:session"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["user"]["id"], user.id)

    def test_token_authenticates_requests(self) -> None:
        User.objects.create_user(email="jwt@example.com", username="jwt", password="JwtPassword1")
        login = self.client.post(
            reverse("auth:login"), {"credential": "jwt@example.com", "password": "JwtPassword1"}, format="json"
        )

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['tokens']['access']}")
        response = self.client.get(reverse("auth:session"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["user"]["email"], "jwt@example.com")
