"""Seat Allocation Enums"""

from src.service.seat_allocation.domain.enum.outcome_kind import OutcomeKind
from src.service.seat_allocation.domain.enum.seat_status import SeatStatus

__all__ = ['OutcomeKind', 'SeatStatus']
