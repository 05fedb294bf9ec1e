"""API views for spot reviews."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore
from rest_framework.request import Request  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.spots.lookups import get_spot_or_404

from .models import Review
from .serializers import ReviewSerializer
from .services import create_review


class SpotReviewListView(APIView):
    """Handler for GET / POST /api/spots/{spot_id}/reviews"""

    permission_classes = [permissions.IsAuthenticatedOrReadOnly]

    def get(self, request: Request, spot_id: str) -> Response:
        spot = get_spot_or_404(spot_id)
        reviews = (
            Review.objects.filter(spot=spot)
            .select_related('user')
            .prefetch_related('images')
        )
        return Response({'Reviews': ReviewSerializer(reviews, many=True).data})

    def post(self, request: Request, spot_id: str) -> Response:
        spot = get_spot_or_404(spot_id)
        review = create_review(spot, request.user, request.data)
        return Response(ReviewSerializer(review).data)
