"""
Booking Domain Entities

- Booking: A committed reservation of a spot for a date range
"""

from dataclasses import dataclass
from datetime import datetime

from shared.domain.value_objects import DateRange


@dataclass(frozen=True)
class Booking:
    """
    Booking entity

    A reservation of spot_id by guest_id for dates [start, end).
    Bookings are never rescheduled; a new stay is a new booking.
    """

    id: int
    spot_id: int
    guest_id: int
    dates: DateRange
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def start_date(self):
        return self.dates.start_date

    @property
    def end_date(self):
        return self.dates.end_date

    @property
    def nights(self) -> int:
        return len(self.dates)
