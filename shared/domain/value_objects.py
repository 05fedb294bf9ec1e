"""
Common Value Objects

Value objects used across multiple domains:
- DateRange: A reserved stay (start date to end date)
- ValueRange: An optional lower/upper bound pair used by search filters
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from shared.domain.base import ValueObject


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a stay from start_date (inclusive) to end_date (exclusive).
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.start_date >= self.end_date:
            raise ValueError(f"Start date ({self.start_date}) must be before end date ({self.end_date})")

    def touches(self, day: date) -> bool:
        """
        Check if a day falls inside this range or on either of its endpoints

        Both endpoints count, so a stay starting on another stay's
        end date touches it.

        Examples:
            - DateRange(1, 10).touches(10) -> True
            - DateRange(1, 10).touches(11) -> False
        """
        return self.start_date <= day <= self.end_date

    def encloses(self, other: 'DateRange') -> bool:
        """Check if this range strictly surrounds another one"""
        if not isinstance(other, DateRange):
            raise TypeError("Can only check enclosure of another DateRange")
        return self.start_date < other.start_date and other.end_date < self.end_date

    def __len__(self) -> int:
        """Number of nights in this range"""
        return (self.end_date - self.start_date).days

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"


@dataclass(frozen=True)
class ValueRange(ValueObject):
    """
    Optional numeric bounds

    Either bound may be missing, which leaves that side open.
    At least one bound must be given.
    """
    lower: Decimal | None = None
    upper: Decimal | None = None

    def __post_init__(self):
        if self.lower is None and self.upper is None:
            raise ValueError("ValueRange needs at least one bound")

    @property
    def is_closed(self) -> bool:
        return self.lower is not None and self.upper is not None

    def contains(self, value) -> bool:
        if self.lower is not None and value < self.lower:
            return False
        if self.upper is not None and value > self.upper:
            return False
        return True

    def __str__(self):
        lower = '-inf' if self.lower is None else self.lower
        upper = '+inf' if self.upper is None else self.upper
        return f"[{lower}, {upper}]"
