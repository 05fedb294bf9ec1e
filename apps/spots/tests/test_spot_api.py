"""Integration tests for spot API endpoints."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.reviews.models import Review
from apps.spots.models import Spot, SpotImage
from apps.users.models import User


def create_spot(owner: User, name: str, lat: str = "37.0", lng: str = "-122.0", price: str = "100.00") -> Spot:
    return Spot.objects.create(
        owner=owner,
        address="123 Disney Lane",
        city="San Francisco",
        state="California",
        country="United States of America",
        lat=Decimal(lat),
        lng=Decimal(lng),
        name=name,
        description="Place where web developers are created",
        price=Decimal(price),
    )


class SpotSearchAPITests(APITestCase):
    """Covers search, pagination, filters and enrichment."""

    def setUp(self) -> None:
        self.owner = User.objects.create_user(email="host@example.com", username="host", password="HostPass123")
        self.guest = User.objects.create_user(email="guest@example.com", username="guest", password="GuestPass123")
        self.north = create_spot(self.owner, "North", lat="30.0", price="250.00")
        self.middle = create_spot(self.owner, "Middle", lat="20.0", price="150.00")
        self.south = create_spot(self.owner, "South", lat="10.0", price="50.00")
        self.url = reverse("spot-list")

    def test_search_without_parameters(self) -> None:
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["page"], 1)
        self.assertEqual(response.data["size"], 20)
        self.assertEqual(
            [spot["id"] for spot in response.data["Spots"]],
            [self.north.id, self.middle.id, self.south.id],
        )

    def test_size_is_clamped(self) -> None:
        response = self.client.get(self.url, {"size": 50})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["size"], 20)

    def test_pagination(self) -> None:
        response = self.client.get(self.url, {"page": 2, "size": 2})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([spot["id"] for spot in response.data["Spots"]], [self.south.id])

    def test_huge_page_is_a_bad_request(self) -> None:
        response = self.client.get(self.url, {"page": "99999999999999999999"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(
            response.data,
            {"message": "Bad Request", "errors": {"page": "Page must be greater than or equal to 1"}},
        )

    def test_far_page_within_range_is_empty(self) -> None:
        response = self.client.get(self.url, {"page": 2 ** 62, "size": 1})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["Spots"], [])

    def test_underscore_page_is_a_bad_request(self) -> None:
        response = self.client.get(self.url, {"page": "1_0"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["errors"], {"page": "Page must be greater than or equal to 1"})

    def test_invalid_parameters_are_reported_together(self) -> None:
        response = self.client.get(self.url, {"page": 0, "minLat": 10, "maxLat": 5, "minPrice": -1})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(
            response.data,
            {
                "message": "Bad Request",
                "errors": {
                    "page": "Page must be greater than or equal to 1",
                    "minLat": "Minimum latitude is invalid",
                    "maxLat": "Maximum latitude is invalid",
                    "minPrice": "Minimum price must be greater than or equal to 0",
                },
            },
        )

    def test_latitude_and_price_filters(self) -> None:
        response = self.client.get(self.url, {"minLat": 15})
        self.assertEqual([spot["name"] for spot in response.data["Spots"]], ["North", "Middle"])

        response = self.client.get(self.url, {"minLat": 15, "maxLat": 25})
        self.assertEqual([spot["name"] for spot in response.data["Spots"]], ["Middle"])

        response = self.client.get(self.url, {"minLat": 15, "maxPrice": 200})
        self.assertEqual([spot["name"] for spot in response.data["Spots"]], ["Middle"])

    def test_zero_minimum_price_keeps_every_spot(self) -> None:
        response = self.client.get(self.url, {"minPrice": 0})

        self.assertEqual(len(response.data["Spots"]), 3)

    def test_results_are_enriched(self) -> None:
        Review.objects.create(user=self.guest, spot=self.north, review="Great", stars=3)
        Review.objects.create(user=self.owner, spot=self.north, review="Lovely", stars=5)
        SpotImage.objects.create(spot=self.north, url="https://img.example.com/a.jpg", preview=True)
        SpotImage.objects.create(spot=self.north, url="https://img.example.com/b.jpg", preview=True)
        SpotImage.objects.create(spot=self.middle, url="https://img.example.com/c.jpg", preview=False)

        response = self.client.get(self.url)

        by_name = {spot["name"]: spot for spot in response.data["Spots"]}
        self.assertEqual(by_name["North"]["avgRating"], 4.0)
        self.assertEqual(by_name["North"]["previewImage"], "https://img.example.com/a.jpg")
        self.assertEqual(by_name["Middle"]["avgRating"], "This spot has not been rated yet")
        self.assertEqual(by_name["Middle"]["previewImage"], "This preview image may have been removed")

    def test_enrichment_query_count_does_not_grow_with_page(self) -> None:
        for index in range(5):
            create_spot(self.owner, f"Extra {index}")

        # spots, rating aggregate, preview images
        with self.assertNumQueries(3):
            response = self.client.get(self.url)

        self.assertEqual(len(response.data["Spots"]), 8)

    def test_current_user_spots(self) -> None:
        create_spot(self.guest, "Guest house")
        self.client.force_authenticate(self.guest)

        response = self.client.get(reverse("spot-current"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([spot["name"] for spot in response.data["Spots"]], ["Guest house"])

    def test_current_user_spots_requires_auth(self) -> None:
        response = self.client.get(reverse("spot-current"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED, response.data)


class SpotDetailAPITests(APITestCase):
    """Covers reading, creating, editing and deleting single spots."""

    def setUp(self) -> None:
        self.owner = User.objects.create_user(email="host@example.com", username="host", password="HostPass123")
        self.other = User.objects.create_user(email="other@example.com", username="other", password="OtherPass123")
        self.spot = create_spot(self.owner, "App Academy")

    def _payload(self, **overrides) -> dict:
        payload = {
            "address": "123 Disney Lane",
            "city": "San Francisco",
            "state": "California",
            "country": "United States of America",
            "lat": 37.7645358,
            "lng": -122.4730327,
            "name": "App Academy",
            "description": "Place where web developers are created",
            "price": 123,
        }
        payload.update(overrides)
        return payload

    def test_get_spot_with_images(self) -> None:
        image = SpotImage.objects.create(spot=self.spot, url="https://img.example.com/a.jpg", preview=True)

        response = self.client.get(reverse("spot-detail", args=[self.spot.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["ownerId"], self.owner.id)
        self.assertEqual(response.data["previewImage"], image.url)
        self.assertEqual(response.data["SpotImages"], [{"id": image.id, "url": image.url, "preview": True}])

    def test_get_spot_without_images(self) -> None:
        response = self.client.get(reverse("spot-detail", args=[self.spot.id]))

        self.assertEqual(response.data["SpotImages"], "This spot doesn't have any images yet.")
        self.assertEqual(response.data["avgRating"], "This spot has not been rated yet")

    def test_unknown_or_malformed_spot_id(self) -> None:
        for spot_id in [self.spot.id + 100, "abc", 0]:
            response = self.client.get(reverse("spot-detail", args=[spot_id]))
            self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
            self.assertEqual(response.data, {"message": "Spot couldn't be found"})

    def test_create_spot(self) -> None:
        self.client.force_authenticate(self.other)

        response = self.client.post(reverse("spot-list"), self._payload(name="Beach hut"), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["ownerId"], self.other.id)
        self.assertEqual(response.data["name"], "Beach hut")
        self.assertTrue(Spot.objects.filter(owner=self.other, name="Beach hut").exists())

    def test_create_spot_reports_every_invalid_field(self) -> None:
        self.client.force_authenticate(self.other)

        response = self.client.post(
            reverse("spot-list"),
            self._payload(address="", lat=91, name="x" * 51, price=0),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["message"], "Bad Request")
        self.assertEqual(
            response.data["errors"],
            {
                "address": "Street address is required",
                "lat": "Latitude is not valid",
                "name": "Name must be less than 50 characters",
                "price": "Price per day is required",
            },
        )

    def test_create_spot_requires_auth(self) -> None:
        response = self.client.post(reverse("spot-list"), self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED, response.data)

    def test_owner_can_edit_spot(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.put(
            reverse("spot-detail", args=[self.spot.id]), self._payload(name="Renamed"), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.spot.refresh_from_db()
        self.assertEqual(self.spot.name, "Renamed")

    def test_non_owner_cannot_edit_spot(self) -> None:
        self.client.force_authenticate(self.other)

        response = self.client.put(reverse("spot-detail", args=[self.spot.id]), self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN, response.data)
        self.assertEqual(response.data, {"message": "Forbidden"})

    def test_edit_unknown_spot(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.put(reverse("spot-detail", args=[self.spot.id + 100]), self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)

    def test_owner_can_delete_spot(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.delete(reverse("spot-detail", args=[self.spot.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data, {"message": "Successfully deleted"})
        self.assertFalse(Spot.objects.filter(pk=self.spot.pk).exists())

    def test_non_owner_cannot_delete_spot(self) -> None:
        self.client.force_authenticate(self.other)

        response = self.client.delete(reverse("spot-detail", args=[self.spot.id]))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN, response.data)
        self.assertTrue(Spot.objects.filter(pk=self.spot.pk).exists())

    def test_owner_can_add_image(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(
            reverse("spot-image-list", args=[self.spot.id]),
            {"url": "https://img.example.com/new.jpg", "preview": True},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["url"], "https://img.example.com/new.jpg")
        self.assertTrue(response.data["preview"])
        self.assertEqual(self.spot.images.count(), 1)

    def test_non_owner_cannot_add_image(self) -> None:
        self.client.force_authenticate(self.other)

        response = self.client.post(
            reverse("spot-image-list", args=[self.spot.id]),
            {"url": "https://img.example.com/new.jpg"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN, response.data)
        self.assertEqual(self.spot.images.count(), 0)
