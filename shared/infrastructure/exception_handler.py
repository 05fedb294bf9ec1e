"""DRF exception handler rendering errors as ``{"message", "errors"}`` payloads."""

from __future__ import annotations

import logging
from typing import Any

from rest_framework import exceptions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

# Booking conflicts keep the 403 status clients already rely on.
STATUS_BY_CODE = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.CONFLICT: status.HTTP_403_FORBIDDEN,
}


def _first_message(detail: Any) -> str:
    if isinstance(detail, dict):
        return _first_message(next(iter(detail.values()), ""))
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def flatten_validation_detail(detail: Any) -> dict[str, str]:
    """Reduce DRF's ``{field: [messages]}`` detail to one message per field."""

    if isinstance(detail, dict):
        return {str(key): _first_message(value) for key, value in detail.items()}
    return {"non_field_errors": _first_message(detail)}


def domain_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Map domain errors and DRF errors to the API error payload."""

    if isinstance(exc, DomainError):
        payload: dict[str, Any] = {"message": exc.message}
        if exc.errors:
            payload["errors"] = dict(exc.errors)
        response_status = STATUS_BY_CODE[exc.code]
        logger.info("Request rejected with %s: %s", response_status, exc)
        return Response(payload, status=response_status)

    response = exception_handler(exc, context)
    if response is None:
        # Unhandled errors propagate to Django and end up as a 500.
        return None

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            "message": "Bad Request",
            "errors": flatten_validation_detail(exc.detail),
        }
    elif isinstance(exc, exceptions.APIException):
        response.data = {"message": _first_message(exc.detail)}
    return response
