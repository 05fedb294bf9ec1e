"""Spot discovery service.

Depends only on the SpotStore interface: compiles search parameters,
runs the query and enriches every returned spot.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Tuple

from shared.domain.errors import SpotNotFoundError

from apps.spots.domain.enrichment import enrich_spots
from apps.spots.domain.entities import EnrichedSpot, SpotImage, SpotPage
from apps.spots.domain.search import SpotSearchCompiler
from apps.spots.stores import SpotStore

logger = logging.getLogger(__name__)


class SpotService:
    """Read operations over spots, always returning enriched projections."""

    def __init__(self, store: SpotStore, compiler: SpotSearchCompiler | None = None) -> None:
        self._store = store
        self._compiler = compiler or SpotSearchCompiler()

    def search_spots(self, params: Mapping[str, Any]) -> SpotPage:
        """Return one page of spots matching the search parameters.

        Raises:
            ValidationError: With every invalid parameter.
        """
        query = self._compiler.compile(params)
        spots = self._store.query_spots(query.spot_filter, query.limit, query.offset)
        logger.debug(
            "Spot search page=%s size=%s constraints=%s returned %s spots",
            query.page,
            query.size,
            query.spot_filter.constraints(),
            len(spots),
        )
        return SpotPage(spots=tuple(enrich_spots(spots, self._store)), page=query.page, size=query.size)

    def list_spots_for_owner(self, owner_id: int) -> List[EnrichedSpot]:
        return enrich_spots(self._store.list_spots_for_owner(owner_id), self._store)

    def get_spot(self, spot_id: int) -> Tuple[EnrichedSpot, List[SpotImage]]:
        """Return one enriched spot together with all of its images.

        Raises:
            SpotNotFoundError: If the spot does not exist.
        """
        spot = self._store.find_spot_by_id(spot_id)
        if spot is None:
            raise SpotNotFoundError(spot_id)
        enriched = enrich_spots([spot], self._store)[0]
        return enriched, self._store.list_images_for_spot(spot_id)
