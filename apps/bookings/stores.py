"""Booking store interface (repository pattern) and its Django ORM implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from django.db import NotSupportedError, transaction  # type: ignore

from apps.bookings.domain.entities import Booking
from apps.spots.domain.entities import Spot
from apps.spots.models import Spot as SpotModel
from apps.spots.stores import spot_from_model
from shared.domain.value_objects import DateRange

from .models import Booking as BookingModel


def booking_from_model(model: BookingModel) -> Booking:
    return Booking(
        id=model.id,
        spot_id=model.spot_id,
        guest_id=model.user_id,
        dates=DateRange(model.start_date, model.end_date),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


class BookingStore(ABC):
    """Interface for the persistence the booking handler needs."""

    @abstractmethod
    def find_spot_by_id(self, spot_id: int, lock: bool = False) -> Spot | None:
        """
        Return a spot by ID, or None if not found.

        With lock=True the spot row stays locked until the surrounding
        transaction ends, so concurrent proposals for it run one at a time.
        """
        ...

    @abstractmethod
    def list_bookings_for_spot(self, spot_id: int) -> List[Booking]:
        ...

    @abstractmethod
    def create_booking(self, spot_id: int, guest_id: int, dates: DateRange) -> Booking:
        """Persist a new booking and return it with its assigned id."""
        ...

    @abstractmethod
    def list_bookings_for_guest(self, guest_id: int) -> List[Booking]:
        ...


class DjangoBookingStore(BookingStore):
    """Database-backed booking store using the Django ORM."""

    def find_spot_by_id(self, spot_id: int, lock: bool = False) -> Spot | None:
        queryset = SpotModel.objects.filter(pk=spot_id)
        if lock:
            queryset = _lock_queryset_if_possible(queryset)
        model = queryset.first()
        return spot_from_model(model) if model else None

    def list_bookings_for_spot(self, spot_id: int) -> List[Booking]:
        return [booking_from_model(m) for m in BookingModel.objects.filter(spot_id=spot_id)]

    def create_booking(self, spot_id: int, guest_id: int, dates: DateRange) -> Booking:
        model = BookingModel.objects.create(
            spot_id=spot_id,
            user_id=guest_id,
            start_date=dates.start_date,
            end_date=dates.end_date,
        )
        return booking_from_model(model)

    def list_bookings_for_guest(self, guest_id: int) -> List[Booking]:
        return [booking_from_model(m) for m in BookingModel.objects.filter(user_id=guest_id)]
