"""Read-only views for the seat status and bookings listings"""

from src.service.seat_allocation.app.interface import ILedger, ISeatTable
from src.service.seat_allocation.domain.value_object import BookingRecord, SeatState


class ListSeatsUseCase:
    def __init__(self, seat_table: ISeatTable) -> None:
        self.seat_table = seat_table

    def execute(self) -> tuple[SeatState, ...]:
        return self.seat_table.snapshot()


class ListBookingsUseCase:
    def __init__(self, ledger: ILedger) -> None:
        self.ledger = ledger

    def execute(self) -> list[BookingRecord]:
        return list(self.ledger.scan())
