"""Domain services for review workflows."""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction  # type: ignore

from shared.domain.errors import ConflictError

from .models import Review
from .serializers import ReviewCreateSerializer

logger = logging.getLogger(__name__)


class ReviewExistsError(ConflictError):
    """Raised when a user reviews a spot they already reviewed."""

    def __init__(self) -> None:
        super().__init__(message="User already has a review for this spot")


def create_review(spot, user, data) -> Review:
    """Create the user's review of a spot.

    The one-review-per-user rule is checked before the payload, so a
    repeated review is rejected even when its body is invalid.
    """

    if Review.objects.filter(spot=spot, user=user).exists():
        raise ReviewExistsError()

    serializer = ReviewCreateSerializer(data=data)
    serializer.is_valid(raise_exception=True)

    try:
        with transaction.atomic():
            review = serializer.save(spot=spot, user=user)
    except IntegrityError:
        # Lost a race with a concurrent review by the same user.
        raise ReviewExistsError()

    logger.info(f"Review {review.id} created for spot {spot.id} by user {user.id}")
    return review
