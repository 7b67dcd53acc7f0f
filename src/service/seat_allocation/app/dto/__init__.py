"""Seat Allocation Application DTOs"""

from src.service.seat_allocation.app.dto.reservation_dto import (
    BookSeatRequest,
    CancelSeatRequest,
    ReservationOutcome,
)


__all__ = [
    'BookSeatRequest',
    'CancelSeatRequest',
    'ReservationOutcome',
]
