"""
Restore Seat Table Use Case

Replays the durable ledger into a freshly created seat table at process startup.
"""

from src.platform.logging.loguru_io import Logger
from src.service.seat_allocation.app.interface import ILedger, ISeatTable


class RestoreSeatTableUseCase:
    def __init__(self, seat_table: ISeatTable, ledger: ILedger) -> None:
        self.seat_table = seat_table
        self.ledger = ledger

    @Logger.io
    def execute(self) -> int:
        """
        Hold every seat recorded in the ledger.

        Records for seats outside this train, or for a seat already held, are logged and
        left in the ledger untouched.

        Returns:
            Number of seats restored
        """
        restored = 0
        for record in self.ledger.scan():
            if self.seat_table.reserve(record.seat_index, record.passenger_name):
                restored += 1
                continue
            Logger.base.warning(
                f'⚠️ [RESTORE] Ignoring ledger record {record.display()}: '
                f'seat is out of range (1-{self.seat_table.total_seats}) or already held'
            )

        Logger.base.info(f'📥 [RESTORE] {restored} seat(s) restored from ledger')
        return restored
