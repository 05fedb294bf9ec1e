"""
Spot Domain Entities

Immutable views of persisted spot state and the read-time projections
built on top of them:
- Spot: A rentable listing owned by a host
- SpotImage: An image attached to a spot
- RatingStats: Review count and star total of one spot
- EnrichedSpot: A spot plus its derived avgRating / previewImage
- SpotPage: One page of enriched search results
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Tuple, Union


@dataclass(frozen=True)
class Spot:
    """Domain representation of a Spot."""

    id: int
    owner_id: int
    address: str
    city: str
    state: str
    country: str
    lat: Decimal
    lng: Decimal
    name: str
    description: str
    price: Decimal
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class SpotImage:
    """Domain representation of a SpotImage."""

    id: int
    spot_id: int
    url: str
    preview: bool


@dataclass(frozen=True)
class RatingStats:
    """Aggregate of the reviews left for one spot."""

    count: int = 0
    total: int = 0


@dataclass(frozen=True)
class EnrichedSpot:
    """
    Spot projection with fields computed at read time

    avg_rating is either the rounded mean of the review stars or the
    "not rated yet" sentinel; preview_image is either a URL or the
    "no preview" sentinel.
    """

    spot: Spot
    avg_rating: Union[float, str]
    preview_image: str


@dataclass(frozen=True)
class SpotPage:
    """One page of search results."""

    spots: Tuple[EnrichedSpot, ...]
    page: int
    size: int
