"""Unit tests for spot enrichment and the spot discovery service."""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, List

from django.test import SimpleTestCase

from apps.spots.domain.enrichment import NO_PREVIEW_IMAGE, NOT_RATED, average_rating, enrich_spots
from apps.spots.domain.entities import RatingStats, Spot, SpotImage
from apps.spots.domain.search import SpotFilter
from apps.spots.services import SpotService
from apps.spots.stores import SpotStore
from shared.domain.errors import SpotNotFoundError, ValidationError


def make_spot(spot_id: int, owner_id: int = 1, lat: str = "10", price: str = "100") -> Spot:
    return Spot(
        id=spot_id,
        owner_id=owner_id,
        address=f"{spot_id} Main St",
        city="Springfield",
        state="Oregon",
        country="United States",
        lat=Decimal(lat),
        lng=Decimal("-120"),
        name=f"Spot {spot_id}",
        description="A quiet place",
        price=Decimal(price),
    )


class InMemorySpotStore(SpotStore):
    """SpotStore over plain lists; counts bulk lookups."""

    def __init__(self, spots: Iterable[Spot] = (), stars: Dict[int, List[int]] | None = None,
                 images: Iterable[SpotImage] = ()) -> None:
        self.spots = list(spots)
        self.stars = stars or {}
        self.images = list(images)
        self.bulk_calls = {"ratings": 0, "previews": 0}

    def find_spot_by_id(self, spot_id: int) -> Spot | None:
        return next((s for s in self.spots if s.id == spot_id), None)

    def count_reviews_for_spot(self, spot_id: int) -> int:
        return len(self.stars.get(spot_id, []))

    def sum_stars_for_spot(self, spot_id: int) -> int:
        return sum(self.stars.get(spot_id, []))

    def find_preview_image_for_spot(self, spot_id: int) -> SpotImage | None:
        previews = [i for i in self.images if i.spot_id == spot_id and i.preview]
        return min(previews, key=lambda i: i.id) if previews else None

    def list_images_for_spot(self, spot_id: int) -> List[SpotImage]:
        return [i for i in self.images if i.spot_id == spot_id]

    def query_spots(self, spot_filter: SpotFilter, limit: int, offset: int) -> List[Spot]:
        matching = [s for s in sorted(self.spots, key=lambda s: s.id) if spot_filter.matches(s)]
        return matching[offset:offset + limit]

    def list_spots_for_owner(self, owner_id: int) -> List[Spot]:
        return [s for s in self.spots if s.owner_id == owner_id]

    def rating_stats_for_spots(self, spot_ids):
        self.bulk_calls["ratings"] += 1
        return super().rating_stats_for_spots(spot_ids)

    def preview_images_for_spots(self, spot_ids):
        self.bulk_calls["previews"] += 1
        return super().preview_images_for_spots(spot_ids)


class AverageRatingTests(SimpleTestCase):
    def test_unrated_spot_gets_sentinel(self) -> None:
        self.assertEqual(average_rating(None), NOT_RATED)
        self.assertEqual(average_rating(RatingStats(count=0, total=0)), NOT_RATED)

    def test_mean_of_stars(self) -> None:
        self.assertEqual(average_rating(RatingStats(count=2, total=8)), 4.0)

    def test_rounds_half_up_to_one_decimal(self) -> None:
        self.assertEqual(average_rating(RatingStats(count=4, total=17)), 4.3)
        self.assertEqual(average_rating(RatingStats(count=3, total=11)), 3.7)
        self.assertEqual(average_rating(RatingStats(count=3, total=13)), 4.3)


class EnrichSpotsTests(SimpleTestCase):
    def test_rating_and_preview_are_derived(self) -> None:
        store = InMemorySpotStore(
            spots=[make_spot(1), make_spot(2)],
            stars={1: [3, 5]},
            images=[
                SpotImage(id=7, spot_id=1, url="https://img.example.com/late.jpg", preview=True),
                SpotImage(id=3, spot_id=1, url="https://img.example.com/first.jpg", preview=True),
                SpotImage(id=4, spot_id=2, url="https://img.example.com/gallery.jpg", preview=False),
            ],
        )

        first, second = enrich_spots(store.spots, store)

        self.assertEqual(first.avg_rating, 4.0)
        self.assertEqual(first.preview_image, "https://img.example.com/first.jpg")
        self.assertEqual(second.avg_rating, NOT_RATED)
        self.assertEqual(second.preview_image, NO_PREVIEW_IMAGE)

    def test_lookups_are_batched(self) -> None:
        store = InMemorySpotStore(spots=[make_spot(i) for i in range(1, 11)])

        enriched = enrich_spots(store.spots, store)

        self.assertEqual(len(enriched), 10)
        self.assertEqual(store.bulk_calls, {"ratings": 1, "previews": 1})

    def test_empty_batch_skips_lookups(self) -> None:
        store = InMemorySpotStore()

        self.assertEqual(enrich_spots([], store), [])
        self.assertEqual(store.bulk_calls, {"ratings": 0, "previews": 0})

    def test_enrichment_keeps_spot_untouched(self) -> None:
        spot = make_spot(1)
        store = InMemorySpotStore(spots=[spot], stars={1: [4]})

        enriched = enrich_spots([spot], store)[0]

        self.assertIs(enriched.spot, spot)
        self.assertFalse(hasattr(spot, "avg_rating"))


class SpotServiceTests(SimpleTestCase):
    def setUp(self) -> None:
        self.store = InMemorySpotStore(
            spots=[
                make_spot(1, lat="10", price="50"),
                make_spot(2, lat="20", price="150"),
                make_spot(3, lat="30", price="250", owner_id=2),
            ],
            stars={2: [5, 4]},
        )
        self.service = SpotService(self.store)

    def test_search_filters_and_paginates(self) -> None:
        page = self.service.search_spots({"minLat": "15", "size": "1", "page": "2"})

        self.assertEqual([e.spot.id for e in page.spots], [3])
        self.assertEqual((page.page, page.size), (2, 1))

    def test_search_enriches_results(self) -> None:
        page = self.service.search_spots({"maxPrice": "200"})

        self.assertEqual([e.spot.id for e in page.spots], [1, 2])
        self.assertEqual([e.avg_rating for e in page.spots], [NOT_RATED, 4.5])

    def test_invalid_search_raises_before_querying(self) -> None:
        with self.assertRaises(ValidationError):
            self.service.search_spots({"page": "0"})
        self.assertEqual(self.store.bulk_calls["ratings"], 0)

    def test_list_spots_for_owner(self) -> None:
        spots = self.service.list_spots_for_owner(2)

        self.assertEqual([e.spot.id for e in spots], [3])

    def test_get_spot(self) -> None:
        enriched, images = self.service.get_spot(2)

        self.assertEqual(enriched.avg_rating, 4.5)
        self.assertEqual(images, [])

    def test_get_missing_spot(self) -> None:
        with self.assertRaises(SpotNotFoundError) as ctx:
            self.service.get_spot(99)
        self.assertEqual(ctx.exception.message, "Spot couldn't be found")


class SpotStoreLookupTests(SimpleTestCase):
    def test_find_spots_by_ids_skips_unknown_ids(self) -> None:
        store = InMemorySpotStore(spots=[make_spot(1), make_spot(2)])

        spots = store.find_spots_by_ids({2, 7})

        self.assertEqual(spots, {2: make_spot(2)})
