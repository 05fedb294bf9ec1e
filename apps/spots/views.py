"""Spot API views.

Views parse requests, call the discovery service or the ORM for plain
CRUD, and leave error rendering to the domain exception handler.
"""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from rest_framework import permissions, status  # type: ignore
from rest_framework.request import Request  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from shared.domain.errors import SpotNotFoundError

from .domain.search import SpotSearchCompiler
from .lookups import ensure_spot_owner, get_spot_or_404, parse_spot_id
from .models import Spot
from .serializers import (
    EnrichedSpotSerializer,
    SpotImageCreateSerializer,
    SpotImageSerializer,
    SpotSerializer,
    SpotWriteSerializer,
)
from .services import SpotService
from .stores import DjangoSpotStore

logger = logging.getLogger(__name__)

NO_SPOT_IMAGES = "This spot doesn't have any images yet."


def spot_service() -> SpotService:
    compiler = SpotSearchCompiler(max_size=settings.SPOTS_MAX_PAGE_SIZE)
    return SpotService(DjangoSpotStore(), compiler)


class SpotListView(APIView):
    """Handler for GET /api/spots (search) and POST /api/spots (create)."""

    permission_classes = [permissions.IsAuthenticatedOrReadOnly]

    def get(self, request: Request) -> Response:
        page = spot_service().search_spots(request.query_params)
        return Response(
            {
                "Spots": EnrichedSpotSerializer(page.spots, many=True).data,
                "page": page.page,
                "size": page.size,
            }
        )

    def post(self, request: Request) -> Response:
        serializer = SpotWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        spot = serializer.save(owner=request.user)
        logger.info(f"Spot {spot.id} created by user {request.user.id}")
        return Response(SpotSerializer(spot).data, status=status.HTTP_201_CREATED)


class CurrentUserSpotsView(APIView):
    """Handler for GET /api/spots/current"""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request: Request) -> Response:
        spots = spot_service().list_spots_for_owner(request.user.id)
        return Response({"Spots": EnrichedSpotSerializer(spots, many=True).data})


class SpotDetailView(APIView):
    """Handler for GET / PUT / DELETE /api/spots/{spot_id}"""

    permission_classes = [permissions.IsAuthenticatedOrReadOnly]

    def get(self, request: Request, spot_id: str) -> Response:
        enriched, images = spot_service().get_spot(parse_spot_id(spot_id))
        data = dict(EnrichedSpotSerializer(enriched).data)
        data["SpotImages"] = SpotImageSerializer(images, many=True).data if images else NO_SPOT_IMAGES
        return Response(data)

    def put(self, request: Request, spot_id: str) -> Response:
        spot_pk = parse_spot_id(spot_id)
        serializer = SpotWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        spot = Spot.objects.filter(pk=spot_pk).first()
        if spot is None:
            raise SpotNotFoundError(spot_pk)
        ensure_spot_owner(spot, request.user)

        for field_name, value in serializer.validated_data.items():
            setattr(spot, field_name, value)
        spot.save()
        logger.info(f"Spot {spot.id} updated by user {request.user.id}")
        return Response(SpotSerializer(spot).data, status=status.HTTP_200_OK)

    def delete(self, request: Request, spot_id: str) -> Response:
        spot = get_spot_or_404(spot_id)
        ensure_spot_owner(spot, request.user)
        spot.delete()
        logger.info(f"Spot {spot_id} deleted by user {request.user.id}")
        return Response({"message": "Successfully deleted"})


class SpotImageListView(APIView):
    """Handler for POST /api/spots/{spot_id}/images"""

    permission_classes = [permissions.IsAuthenticated]

    def post(self, request: Request, spot_id: str) -> Response:
        spot = get_spot_or_404(spot_id)
        ensure_spot_owner(spot, request.user)
        serializer = SpotImageCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        image = serializer.save(spot=spot)
        return Response(SpotImageCreateSerializer(image).data)
