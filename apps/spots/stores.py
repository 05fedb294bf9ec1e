"""Spot store interface (repository pattern) and its Django ORM implementation.

Stores are swappable and return domain models, never ORM instances.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List

from django.db.models import Count, Q, Sum  # type: ignore

from apps.reviews.models import Review as ReviewModel
from apps.spots.domain.entities import RatingStats, Spot, SpotImage
from apps.spots.domain.search import SpotFilter

from .models import Spot as SpotModel
from .models import SpotImage as SpotImageModel


def spot_from_model(model: SpotModel) -> Spot:
    return Spot(
        id=model.id,
        owner_id=model.owner_id,
        address=model.address,
        city=model.city,
        state=model.state,
        country=model.country,
        lat=model.lat,
        lng=model.lng,
        name=model.name,
        description=model.description,
        price=model.price,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def image_from_model(model: SpotImageModel) -> SpotImage:
    return SpotImage(id=model.id, spot_id=model.spot_id, url=model.url, preview=model.preview)


class SpotStore(ABC):
    """Interface for spot read operations used by the discovery engine."""

    @abstractmethod
    def find_spot_by_id(self, spot_id: int) -> Spot | None:
        """Return a spot by ID, or None if not found."""
        ...

    @abstractmethod
    def count_reviews_for_spot(self, spot_id: int) -> int:
        ...

    @abstractmethod
    def sum_stars_for_spot(self, spot_id: int) -> int:
        """Sum of review stars for the spot, 0 when it has no reviews."""
        ...

    @abstractmethod
    def find_preview_image_for_spot(self, spot_id: int) -> SpotImage | None:
        """Return the first image flagged as preview, or None."""
        ...

    @abstractmethod
    def list_images_for_spot(self, spot_id: int) -> List[SpotImage]:
        ...

    @abstractmethod
    def query_spots(self, spot_filter: SpotFilter, limit: int, offset: int) -> List[Spot]:
        """Return spots matching every constraint of the filter, ordered by id."""
        ...

    @abstractmethod
    def list_spots_for_owner(self, owner_id: int) -> List[Spot]:
        ...

    def rating_stats_for_spots(self, spot_ids: Iterable[int]) -> Dict[int, RatingStats]:
        """Rating stats keyed by spot id; spots without reviews may be absent."""
        stats = {}
        for spot_id in spot_ids:
            count = self.count_reviews_for_spot(spot_id)
            if count:
                stats[spot_id] = RatingStats(count=count, total=self.sum_stars_for_spot(spot_id))
        return stats

    def preview_images_for_spots(self, spot_ids: Iterable[int]) -> Dict[int, SpotImage]:
        """Preview images keyed by spot id; spots without one are absent."""
        previews = {}
        for spot_id in spot_ids:
            image = self.find_preview_image_for_spot(spot_id)
            if image is not None:
                previews[spot_id] = image
        return previews

    def find_spots_by_ids(self, spot_ids: Iterable[int]) -> Dict[int, Spot]:
        """Spots keyed by id; unknown ids are absent."""
        spots = {}
        for spot_id in spot_ids:
            spot = self.find_spot_by_id(spot_id)
            if spot is not None:
                spots[spot_id] = spot
        return spots


class DjangoSpotStore(SpotStore):
    """Database-backed spot store using the Django ORM."""

    def find_spot_by_id(self, spot_id: int) -> Spot | None:
        model = SpotModel.objects.filter(pk=spot_id).first()
        return spot_from_model(model) if model else None

    def count_reviews_for_spot(self, spot_id: int) -> int:
        return ReviewModel.objects.filter(spot_id=spot_id).count()

    def sum_stars_for_spot(self, spot_id: int) -> int:
        total = ReviewModel.objects.filter(spot_id=spot_id).aggregate(total=Sum("stars"))["total"]
        return total or 0

    def find_preview_image_for_spot(self, spot_id: int) -> SpotImage | None:
        model = SpotImageModel.objects.filter(spot_id=spot_id, preview=True).order_by("id").first()
        return image_from_model(model) if model else None

    def list_images_for_spot(self, spot_id: int) -> List[SpotImage]:
        return [image_from_model(m) for m in SpotImageModel.objects.filter(spot_id=spot_id).order_by("id")]

    def query_spots(self, spot_filter: SpotFilter, limit: int, offset: int) -> List[Spot]:
        condition = Q()
        for field_name, value_range in spot_filter.constraints():
            if value_range.is_closed:
                condition &= Q(**{f"{field_name}__range": (value_range.lower, value_range.upper)})
            elif value_range.lower is not None:
                condition &= Q(**{f"{field_name}__gte": value_range.lower})
            else:
                condition &= Q(**{f"{field_name}__lte": value_range.upper})

        queryset = SpotModel.objects.filter(condition).order_by("id")[offset:offset + limit]
        return [spot_from_model(m) for m in queryset]

    def list_spots_for_owner(self, owner_id: int) -> List[Spot]:
        return [spot_from_model(m) for m in SpotModel.objects.filter(owner_id=owner_id).order_by("id")]

    def find_spots_by_ids(self, spot_ids: Iterable[int]) -> Dict[int, Spot]:
        return {m.id: spot_from_model(m) for m in SpotModel.objects.filter(pk__in=list(spot_ids))}

    def rating_stats_for_spots(self, spot_ids: Iterable[int]) -> Dict[int, RatingStats]:
        rows = (
            ReviewModel.objects.filter(spot_id__in=list(spot_ids))
            .values("spot_id")
            .annotate(count=Count("id"), total=Sum("stars"))
            .order_by()
        )
        return {row["spot_id"]: RatingStats(count=row["count"], total=row["total"] or 0) for row in rows}

    def preview_images_for_spots(self, spot_ids: Iterable[int]) -> Dict[int, SpotImage]:
        previews: Dict[int, SpotImage] = {}
        images = SpotImageModel.objects.filter(spot_id__in=list(spot_ids), preview=True).order_by("spot_id", "id")
        for model in images:
            previews.setdefault(model.spot_id, image_from_model(model))
        return previews
