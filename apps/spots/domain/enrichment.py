"""
Spot Enrichment

Derives the fields that are never stored on a spot: the average review
rating and the preview image URL. The derivations are pure functions of
what the store returns; enrich_spots batches the lookups so one page of
results costs two extra queries, not two per spot.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Mapping, Union

from apps.spots.domain.entities import EnrichedSpot, RatingStats, Spot, SpotImage

NOT_RATED = "This spot has not been rated yet"
NO_PREVIEW_IMAGE = "This preview image may have been removed"

_ONE_DECIMAL = Decimal("0.1")


def average_rating(stats: RatingStats | None) -> Union[float, str]:
    """Mean star rating rounded half-up to one decimal, or NOT_RATED."""
    if stats is None or not stats.count:
        return NOT_RATED
    mean = Decimal(stats.total) / Decimal(stats.count)
    return float(mean.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def preview_url(image: SpotImage | None) -> str:
    if image is None:
        return NO_PREVIEW_IMAGE
    return image.url


def enrich(spot: Spot, stats: RatingStats | None, image: SpotImage | None) -> EnrichedSpot:
    return EnrichedSpot(
        spot=spot,
        avg_rating=average_rating(stats),
        preview_image=preview_url(image),
    )


def enrich_spots(spots: Iterable[Spot], store) -> List[EnrichedSpot]:
    """
    Enrich a batch of spots

    Args:
        spots: Spots to enrich, in the order they should be returned
        store: A SpotStore; its bulk lookups are called once per batch

    Returns:
        EnrichedSpot projections in input order
    """
    spots = list(spots)
    if not spots:
        return []

    spot_ids = [spot.id for spot in spots]
    stats: Mapping[int, RatingStats] = store.rating_stats_for_spots(spot_ids)
    previews: Mapping[int, SpotImage] = store.preview_images_for_spots(spot_ids)

    return [enrich(spot, stats.get(spot.id), previews.get(spot.id)) for spot in spots]
