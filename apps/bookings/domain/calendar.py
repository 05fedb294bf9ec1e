"""
Spot Calendar Aggregate

The consistency boundary for booking a spot: every new booking for a
spot must be checked against the spot's calendar before it is written.

Conflict rule, for each existing booking [e_start, e_end):
- e_start <= start <= e_end           -> the start date conflicts
- e_start <= end <= e_end             -> the end date conflicts
- start < e_start and e_end < end     -> the new stay swallows the
                                         existing one; both conflict

Endpoints are inclusive, so a stay starting on the day another one ends
is a conflict (no back-to-back bookings).

Strategy:
1. Domain validation: find_conflicts() scans every existing booking
2. Pessimistic locking: the spot row is locked (SELECT FOR UPDATE)
   for the whole check-then-create transaction
"""

from dataclasses import dataclass, field
from typing import Dict, List

from shared.domain.base import Aggregate
from shared.domain.errors import ConflictError, FieldErrors
from shared.domain.value_objects import DateRange

from apps.bookings.domain.entities import Booking
from apps.bookings.domain.events import BookingCreated

START_DATE_CONFLICT = "Start date conflicts with an existing booking"
END_DATE_CONFLICT = "End date conflicts with an existing booking"


class BookingConflictError(ConflictError):
    """Raised when requested dates collide with existing bookings."""

    def __init__(self, errors: Dict[str, str]) -> None:
        super().__init__(
            message="Sorry, this spot is already booked for the specified dates",
            errors=errors,
        )


@dataclass
class SpotCalendar(Aggregate):
    """
    Spot Calendar Aggregate Root

    Holds the committed bookings of one spot.

    Usage:
        calendar = SpotCalendar(spot_id, store.list_bookings_for_spot(spot_id))
        calendar.ensure_available(dates)
        calendar.record(store.create_booking(spot_id, guest_id, dates))
    """

    spot_id: int
    bookings: List[Booking] = field(default_factory=list)

    def find_conflicts(self, dates: DateRange) -> FieldErrors:
        """
        Collect every conflict of the dates with the existing bookings

        The whole calendar is scanned; the result carries a startDate
        and/or endDate message, or is empty when the dates are free.
        """
        errors = FieldErrors()
        for booking in self.bookings:
            existing = booking.dates
            if existing.touches(dates.start_date):
                errors.add('startDate', START_DATE_CONFLICT)
            if existing.touches(dates.end_date):
                errors.add('endDate', END_DATE_CONFLICT)
            if dates.encloses(existing):
                errors.add('startDate', START_DATE_CONFLICT)
                errors.add('endDate', END_DATE_CONFLICT)
        return errors

    def can_allocate(self, dates: DateRange) -> bool:
        return not self.find_conflicts(dates)

    def ensure_available(self, dates: DateRange) -> None:
        """
        Raises:
            BookingConflictError: With every conflicting field
        """
        self.find_conflicts(dates).raise_if_any(BookingConflictError)

    def record(self, booking: Booking) -> None:
        """Add a committed booking to the calendar and emit BookingCreated"""
        if booking.spot_id != self.spot_id:
            raise ValueError(f"Booking {booking.id} belongs to spot {booking.spot_id}, not {self.spot_id}")

        self.bookings.append(booking)
        self.add_event(BookingCreated(
            booking_id=booking.id,
            spot_id=booking.spot_id,
            guest_id=booking.guest_id,
            dates=booking.dates,
        ))

    def __str__(self):
        return f"SpotCalendar(spot={self.spot_id}, bookings={len(self.bookings)})"
