"""Seat allocation domain errors - converted to typed outcomes at the engine boundary"""

from src.platform.exception.exceptions import DomainError
from src.service.seat_allocation.domain.enum import OutcomeKind


class InvalidSeatError(DomainError):
    outcome_kind = OutcomeKind.INVALID_SEAT

    def __init__(self, seat_index: int, total_seats: int) -> None:
        super().__init__(
            f'Invalid seat number {seat_index + 1}: must be between 1 and {total_seats}',
            'invalid_seat',
        )
        self.seat_index = seat_index


class InvalidPassengerError(DomainError):
    outcome_kind = OutcomeKind.INVALID_PASSENGER

    def __init__(self, passenger_name: str) -> None:
        super().__init__(
            f'Invalid passenger name {passenger_name!r}: must be non-empty, '
            'without commas or line breaks',
            'invalid_passenger',
        )


class MalformedRecordError(DomainError):
    def __init__(self, line: str) -> None:
        super().__init__(f'Malformed ledger line: {line!r}', 'malformed_record')
