"""Seat Status Enum"""

from enum import StrEnum


class SeatStatus(StrEnum):
    AVAILABLE = 'Available'
    BOOKED = 'Booked'
