"""Seat State Value Object"""

from typing import Optional

import attrs

from src.service.seat_allocation.domain.enum import SeatStatus


@attrs.define(frozen=True)
class SeatState:
    """One seat at one instant: free when passenger_name is None"""

    index: int
    passenger_name: Optional[str] = None

    @property
    def is_held(self) -> bool:
        return self.passenger_name is not None

    @property
    def status(self) -> SeatStatus:
        return SeatStatus.BOOKED if self.is_held else SeatStatus.AVAILABLE

    @property
    def seat_number(self) -> int:
        """1-based number shown to passengers"""
        return self.index + 1
