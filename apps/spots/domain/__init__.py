from apps.spots.domain.entities import EnrichedSpot, RatingStats, Spot, SpotImage, SpotPage
from apps.spots.domain.search import SpotFilter, SpotQuery, SpotSearchCompiler

__all__ = [
    "Spot",
    "SpotImage",
    "RatingStats",
    "EnrichedSpot",
    "SpotPage",
    "SpotFilter",
    "SpotQuery",
    "SpotSearchCompiler",
]
