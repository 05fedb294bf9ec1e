"""
Domain Errors

Errors raised by services and command handlers. Each carries a code and a
user-safe message; validation and conflict errors also carry the field
violations that were collected for the request.

HTTP status mapping lives in shared.infrastructure.exception_handler.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Type


class ErrorCode(Enum):
    """Domain error codes."""

    NOT_FOUND = "NOT_FOUND"
    VALIDATION = "VALIDATION"
    FORBIDDEN = "FORBIDDEN"
    CONFLICT = "CONFLICT"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code, user-safe message and field errors."""

    code: ErrorCode
    message: str
    errors: Dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        if self.errors:
            return f"{self.code.value}: {self.message} {self.errors}"
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """Raised when a referenced resource does not exist."""

    def __init__(self, message: str = "The requested resource couldn't be found.") -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=message)


class SpotNotFoundError(NotFoundError):
    """Raised when a spot is not found."""

    def __init__(self, spot_id=None) -> None:
        super().__init__(message="Spot couldn't be found")
        self.spot_id = spot_id


class ForbiddenError(DomainError):
    """Raised when the caller may not act on the resource."""

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(code=ErrorCode.FORBIDDEN, message=message)


class ValidationError(DomainError):
    """Raised with every field violation found in one request."""

    def __init__(self, errors: Dict[str, str], message: str = "Bad Request") -> None:
        super().__init__(code=ErrorCode.VALIDATION, message=message, errors=dict(errors))


class ConflictError(DomainError):
    """Raised when the request collides with existing state."""

    def __init__(self, message: str, errors: Dict[str, str] | None = None) -> None:
        super().__init__(code=ErrorCode.CONFLICT, message=message, errors=dict(errors or {}))


class FieldErrors:
    """
    Mutable accumulator of field-level violations

    Validation steps add to it instead of raising, so one response can
    report every failing field.

    Usage:
        errors = FieldErrors()
        if page < 1:
            errors.add('page', 'Page must be greater than or equal to 1')
        errors.raise_if_any()
    """

    def __init__(self) -> None:
        self._errors: Dict[str, str] = {}

    def add(self, field_name: str, message: str) -> None:
        self._errors[field_name] = message

    def as_dict(self) -> Dict[str, str]:
        return dict(self._errors)

    def raise_if_any(self, error_class: Type[DomainError] = ValidationError, **kwargs) -> None:
        if self._errors:
            raise error_class(errors=self.as_dict(), **kwargs)

    def __contains__(self, field_name: str) -> bool:
        return field_name in self._errors

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"FieldErrors({self._errors!r})"
