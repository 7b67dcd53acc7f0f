"""Seat Allocation Value Objects"""

from src.service.seat_allocation.domain.value_object.booking_record import BookingRecord
from src.service.seat_allocation.domain.value_object.seat_state import SeatState

__all__ = ['BookingRecord', 'SeatState']
