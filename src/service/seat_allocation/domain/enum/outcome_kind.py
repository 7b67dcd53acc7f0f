"""Reservation Outcome Enum"""

from enum import StrEnum


class OutcomeKind(StrEnum):
    """Terminal result of a single book / cancel request"""

    BOOKED = 'booked'
    CANCELLED = 'cancelled'
    INVALID_SEAT = 'invalid_seat'
    INVALID_PASSENGER = 'invalid_passenger'
    PAYMENT_DECLINED = 'payment_declined'
    SEAT_UNAVAILABLE = 'seat_unavailable'
    NOT_BOOKED = 'not_booked'
    PERSISTENCE_FAILURE = 'persistence_failure'

    @property
    def succeeded(self) -> bool:
        return self in (OutcomeKind.BOOKED, OutcomeKind.CANCELLED)
