"""
Seat Table Interface

In-memory authority for "is this seat currently held".
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.service.seat_allocation.domain.value_object import SeatState


class ISeatTable(ABC):
    """
    Seat Table Interface

    Every operation is atomic with respect to every other operation on the table.
    Out-of-range indices and "already in the requested state" both yield False.
    """

    @property
    @abstractmethod
    def total_seats(self) -> int:
        pass

    def contains_index(self, seat_index: int) -> bool:
        return 0 <= seat_index < self.total_seats

    @abstractmethod
    def reserve(self, seat_index: int, passenger_name: str) -> bool:
        """Free → Held(passenger_name)"""
        pass

    @abstractmethod
    def release(self, seat_index: int) -> bool:
        """Held → Free"""
        pass

    @abstractmethod
    def is_held(self, seat_index: int) -> bool:
        pass

    @abstractmethod
    def holder(self, seat_index: int) -> Optional[str]:
        pass

    @abstractmethod
    def snapshot(self) -> tuple[SeatState, ...]:
        """All seats in index order, copied at a single instant"""
        pass
