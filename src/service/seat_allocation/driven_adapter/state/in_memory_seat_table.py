"""
In-Memory Seat Table

Single source of truth for "is this seat currently held" during the process lifetime.
"""

from threading import Lock
from typing import Optional

from src.platform.logging.loguru_io import Logger
from src.service.seat_allocation.app.interface import ISeatTable
from src.service.seat_allocation.domain.value_object import SeatState


class InMemorySeatTable(ISeatTable):
    """
    Fixed-size seat array guarded by one lock.

    The lock covers exactly one status check plus one status flip (or one snapshot copy);
    nothing else ever runs while it is held.
    """

    def __init__(self, total_seats: int) -> None:
        if total_seats < 1:
            raise ValueError(f'total_seats must be positive, got {total_seats}')
        self._holders: list[Optional[str]] = [None] * total_seats
        self._lock = Lock()

    @property
    def total_seats(self) -> int:
        return len(self._holders)

    def reserve(self, seat_index: int, passenger_name: str) -> bool:
        if not self.contains_index(seat_index):
            return False
        with self._lock:
            if self._holders[seat_index] is not None:
                return False
            self._holders[seat_index] = passenger_name
        Logger.base.debug(f'🔒 [SEAT-TABLE] Seat {seat_index + 1} held for {passenger_name}')
        return True

    def release(self, seat_index: int) -> bool:
        if not self.contains_index(seat_index):
            return False
        with self._lock:
            if self._holders[seat_index] is None:
                return False
            self._holders[seat_index] = None
        Logger.base.debug(f'🔓 [SEAT-TABLE] Seat {seat_index + 1} freed')
        return True

    def is_held(self, seat_index: int) -> bool:
        return self.holder(seat_index) is not None

    def holder(self, seat_index: int) -> Optional[str]:
        if not self.contains_index(seat_index):
            return None
        with self._lock:
            return self._holders[seat_index]

    def snapshot(self) -> tuple[SeatState, ...]:
        with self._lock:
            holders = tuple(self._holders)
        return tuple(
            SeatState(index=index, passenger_name=name) for index, name in enumerate(holders)
        )
