"""
Booking Command Handlers

These are the use cases for the booking domain.
They orchestrate domain operations within transactions.

Commands:
- ProposeBookingCommand: Reserve a spot for a date range
"""

from dataclasses import dataclass
from datetime import date
import logging

from shared.application.uow import DjangoUnitOfWork
from shared.domain.errors import ForbiddenError, SpotNotFoundError, ValidationError
from shared.domain.value_objects import DateRange
from apps.bookings.domain.calendar import BookingConflictError, SpotCalendar
from apps.bookings.domain.entities import Booking

logger = logging.getLogger(__name__)

INVALID_END_DATE = "endDate cannot be on or before startDate"


# ===== Commands =====

@dataclass
class ProposeBookingCommand:
    """
    Command to reserve a spot

    This is the only entry point for creating bookings.
    """
    spot_id: int
    guest_id: int
    start_date: date
    end_date: date


# ===== Command Handlers =====

class ProposeBookingHandler:
    """
    Handler for ProposeBooking command

    This implements the double booking prevention.

    Strategy:
    1. Start database transaction (atomic)
    2. Load the spot with SELECT FOR UPDATE (pessimistic lock)
    3. Reject the owner and inverted date ranges
    4. Load the SpotCalendar aggregate and check availability in domain
    5. Create the booking and record it in the calendar
    6. Collect events, commit, publish events (after commit)
    """

    def __init__(self, store, uow_factory=DjangoUnitOfWork):
        self.store = store
        self.uow_factory = uow_factory

    def handle(self, command: ProposeBookingCommand) -> Booking:
        """
        Handle a booking proposal

        Returns: The created Booking, with its id

        Raises:
            SpotNotFoundError: The spot does not exist
            ForbiddenError: The guest owns the spot
            ValidationError: endDate is not after startDate
            BookingConflictError: The dates collide with existing bookings
        """
        logger.info(
            f"Booking proposed for spot {command.spot_id} by user {command.guest_id}, "
            f"dates {command.start_date} - {command.end_date}"
        )

        with self.uow_factory() as uow:
            spot = self.store.find_spot_by_id(command.spot_id, lock=True)
            if spot is None:
                raise SpotNotFoundError(command.spot_id)

            if spot.owner_id == command.guest_id:
                raise ForbiddenError()

            if command.end_date <= command.start_date:
                raise ValidationError({'endDate': INVALID_END_DATE})

            dates = DateRange(command.start_date, command.end_date)
            calendar = SpotCalendar(spot.id, self.store.list_bookings_for_spot(spot.id))

            try:
                calendar.ensure_available(dates)
            except BookingConflictError as e:
                logger.info(f"Booking conflict on spot {spot.id} for {dates}: {e.errors}")
                raise

            booking = self.store.create_booking(spot.id, command.guest_id, dates)
            calendar.record(booking)
            uow.collect_events(calendar)

        logger.info(f"Booking {booking.id} created for spot {spot.id} ({booking.nights} nights)")

        return booking
