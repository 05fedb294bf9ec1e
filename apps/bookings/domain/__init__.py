from .calendar import BookingConflictError, SpotCalendar
from .entities import Booking
from .events import BookingCreated

__all__ = ["Booking", "BookingConflictError", "BookingCreated", "SpotCalendar"]
