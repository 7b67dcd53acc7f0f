"""
Booking Record Value Object

One durable ledger line: `passenger_name,seat_number` with a 1-based seat number.
"""

import re

import attrs

from src.service.seat_allocation.domain.seat_allocation_error import (
    InvalidPassengerError,
    MalformedRecordError,
)


_FORBIDDEN_NAME_CHARS = (',', '\n', '\r')
_SEAT_NUMBER = re.compile(r'[0-9]+')  # ASCII digits only, no sign or separators


def validate_passenger_name(passenger_name: str) -> str:
    """Reject names the ledger line format cannot represent"""
    name = passenger_name.strip()
    if not name or any(char in name for char in _FORBIDDEN_NAME_CHARS):
        raise InvalidPassengerError(passenger_name)
    return name


@attrs.define(frozen=True)
class BookingRecord:
    """Booking Record (Value Object)"""

    passenger_name: str
    seat_index: int

    @property
    def seat_number(self) -> int:
        return self.seat_index + 1

    def to_line(self) -> str:
        return f'{self.passenger_name},{self.seat_number}\n'

    def display(self) -> str:
        return f'{self.passenger_name},{self.seat_number}'

    @classmethod
    def from_line(cls, line: str) -> 'BookingRecord':
        """Parse one newline-stripped ledger line"""
        parts = line.split(',')
        if len(parts) != 2 or not parts[0]:
            raise MalformedRecordError(line)
        if not _SEAT_NUMBER.fullmatch(parts[1]):
            raise MalformedRecordError(line)
        seat_number = int(parts[1])
        if seat_number < 1:
            raise MalformedRecordError(line)
        return cls(passenger_name=parts[0], seat_index=seat_number - 1)
