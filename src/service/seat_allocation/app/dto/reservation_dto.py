"""
Reservation DTOs

Request/Outcome DTOs for book and cancel operations.
Seat indices are 0-based here; the driving adapters convert from 1-based seat numbers.
"""

import attrs

from src.service.seat_allocation.domain.enum import OutcomeKind


@attrs.define(frozen=True)
class BookSeatRequest:
    passenger_name: str
    seat_index: int
    amount: float


@attrs.define(frozen=True)
class CancelSeatRequest:
    passenger_name: str
    seat_index: int


@attrs.define(frozen=True)
class ReservationOutcome:
    """Typed terminal result - no book/cancel failure escapes the engine as an exception"""

    kind: OutcomeKind
    passenger_name: str
    seat_index: int
    detail: str = ''
    integrity_warning: bool = False  # Compensation itself failed; reconcile out-of-band

    @property
    def succeeded(self) -> bool:
        return self.kind.succeeded

    @property
    def seat_number(self) -> int:
        return self.seat_index + 1

    def describe(self) -> str:
        """One human-readable line per outcome"""
        seat = self.seat_number
        match self.kind:
            case OutcomeKind.BOOKED:
                line = f'{self.passenger_name} successfully booked seat {seat}'
            case OutcomeKind.CANCELLED:
                line = f'{self.passenger_name} successfully cancelled seat {seat}'
            case OutcomeKind.INVALID_SEAT:
                line = f'Invalid seat number {seat}!'
            case OutcomeKind.INVALID_PASSENGER:
                line = f'Invalid passenger name {self.passenger_name!r}'
            case OutcomeKind.PAYMENT_DECLINED:
                line = f'Payment failed for {self.passenger_name}'
            case OutcomeKind.SEAT_UNAVAILABLE:
                line = f'Seat {seat} already booked!'
            case OutcomeKind.NOT_BOOKED:
                line = f'{self.passenger_name} failed to cancel seat {seat}: seat is not booked'
            case OutcomeKind.PERSISTENCE_FAILURE:
                line = f'Could not save change to seat {seat}, please retry'
        if self.integrity_warning:
            line += ' (INTEGRITY WARNING: seat state needs operator reconciliation)'
        return line
