"""Spot lookups shared by the spot, review and booking views."""

from __future__ import annotations

from shared.domain.errors import ForbiddenError, SpotNotFoundError

from .models import Spot


def parse_spot_id(raw) -> int:
    """Spot ids in URLs are positive integers; anything else is an unknown spot."""

    try:
        spot_id = int(str(raw))
    except (TypeError, ValueError):
        raise SpotNotFoundError(raw)
    if spot_id < 1:
        raise SpotNotFoundError(raw)
    return spot_id


def get_spot_or_404(raw_spot_id) -> Spot:
    spot_id = parse_spot_id(raw_spot_id)
    spot = Spot.objects.filter(pk=spot_id).first()
    if spot is None:
        raise SpotNotFoundError(spot_id)
    return spot


def ensure_spot_owner(spot: Spot, user) -> None:
    if spot.owner_id != user.id:
        raise ForbiddenError()
