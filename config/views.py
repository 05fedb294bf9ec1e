"""JSON fallbacks for requests that never reach an API view."""

import logging

from django.http import JsonResponse  # type: ignore

logger = logging.getLogger(__name__)


def not_found(request, exception=None):
    return JsonResponse({'message': "The requested resource couldn't be found."}, status=404)


def server_error(request):
    logger.error(f"Unhandled error on {request.method} {request.path}")
    return JsonResponse({'message': 'Internal Server Error'}, status=500)
