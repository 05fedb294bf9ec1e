"""
Booking Event Handlers

Reactions to booking domain events. They run after the transaction that
produced the event has committed.
"""

import logging

from shared.application.message_bus import message_bus
from apps.bookings.domain.events import BookingCreated

logger = logging.getLogger(__name__)


def log_booking_created(event: BookingCreated) -> None:
    logger.info(
        f"Spot {event.spot_id} booked by user {event.guest_id} "
        f"for {event.dates} (booking {event.booking_id})"
    )


def register_handlers(bus=message_bus) -> None:
    bus.register_event_handler(BookingCreated, log_booking_created)
