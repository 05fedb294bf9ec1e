"""Integration tests for spot review endpoints."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.reviews.models import Review, ReviewImage
from apps.spots.models import Spot
from apps.users.models import User


class SpotReviewAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create_user(email="host@example.com", username="host", password="HostPass123")
        self.guest = User.objects.create_user(
            email="guest@example.com",
            username="guest",
            password="GuestPass123",
            first_name="Demo",
            last_name="Guest",
        )
        self.spot = Spot.objects.create(
            owner=self.owner,
            address="9 Hill St",
            city="Denver",
            state="Colorado",
            country="United States of America",
            lat=Decimal("39.739236"),
            lng=Decimal("-104.990251"),
            name="Mountain loft",
            description="Close to the trails",
            price=Decimal("95.00"),
        )
        self.url = reverse("spot-review-list", args=[self.spot.id])

    def test_list_reviews_with_author_and_images(self) -> None:
        review = Review.objects.create(user=self.guest, spot=self.spot, review="Loved it", stars=5)
        image = ReviewImage.objects.create(review=review, url="https://img.example.com/r.jpg")

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        entry = response.data["Reviews"][0]
        self.assertEqual(entry["id"], review.id)
        self.assertEqual(entry["userId"], self.guest.id)
        self.assertEqual(entry["spotId"], self.spot.id)
        self.assertEqual(entry["stars"], 5)
        self.assertEqual(entry["User"], {"id": self.guest.id, "firstName": "Demo", "lastName": "Guest"})
        self.assertEqual(entry["ReviewImages"], [{"id": image.id, "url": image.url}])

    def test_list_reviews_of_unknown_spot(self) -> None:
        response = self.client.get(reverse("spot-review-list", args=["nope"]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
        self.assertEqual(response.data, {"message": "Spot couldn't be found"})

    def test_create_review(self) -> None:
        self.client.force_authenticate(self.guest)

        response = self.client.post(self.url, {"review": "Great views", "stars": 4}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["stars"], 4)
        self.assertTrue(Review.objects.filter(spot=self.spot, user=self.guest).exists())

    def test_review_changes_spot_rating(self) -> None:
        Review.objects.create(user=self.owner, spot=self.spot, review="Fine", stars=3)
        self.client.force_authenticate(self.guest)
        self.client.post(self.url, {"review": "Great views", "stars": 4}, format="json")

        response = self.client.get(reverse("spot-detail", args=[self.spot.id]))

        self.assertEqual(response.data["avgRating"], 3.5)

    def test_invalid_review_reports_every_field(self) -> None:
        self.client.force_authenticate(self.guest)

        response = self.client.post(self.url, {"review": "", "stars": 6}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(
            response.data,
            {
                "message": "Bad Request",
                "errors": {
                    "review": "Review text is required",
                    "stars": "Stars must be an integer from 1 to 5",
                },
            },
        )

    def test_second_review_by_same_user_is_rejected(self) -> None:
        Review.objects.create(user=self.guest, spot=self.spot, review="First", stars=4)
        self.client.force_authenticate(self.guest)

        response = self.client.post(self.url, {"review": "Again", "stars": 2}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN, response.data)
        self.assertEqual(response.data, {"message": "User already has a review for this spot"})
        self.assertEqual(Review.objects.filter(spot=self.spot).count(), 1)

    def test_create_review_requires_auth(self) -> None:
        response = self.client.post(self.url, {"review": "Anonymous", "stars": 3}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED, response.data)
