"""
Ledger Interface

Durable key-value store: seat index → passenger name, with atomic put and atomic remove.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from src.service.seat_allocation.domain.value_object import BookingRecord


class ILedger(ABC):
    """
    Ledger Interface

    Crash guarantees:
    - put never leaves a half-written record behind
    - remove never loses unrelated records
    """

    @abstractmethod
    def put(self, seat_index: int, passenger_name: str) -> None:
        """
        Durably record a booking.

        Raises:
            PersistenceError: durable medium unavailable
        """
        pass

    @abstractmethod
    def remove(self, seat_index: int) -> bool:
        """
        Durably delete the record for seat_index.

        Returns:
            False when no record existed (no-op)

        Raises:
            PersistenceError: durable medium unavailable
        """
        pass

    @abstractmethod
    def contains(self, seat_index: int) -> bool:
        pass

    @abstractmethod
    def owner(self, seat_index: int) -> Optional[str]:
        pass

    @abstractmethod
    def scan(self) -> Iterator[BookingRecord]:
        """Lazy pass over all current records in insertion order - each call starts over"""
        pass

    @abstractmethod
    def load(self) -> list[BookingRecord]:
        """Rebuild the record set from durable storage"""
        pass
