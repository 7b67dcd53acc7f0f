"""Unit tests for RestoreSeatTableUseCase"""

from unittest.mock import MagicMock

import pytest

from src.service.seat_allocation.app.command.restore_seat_table_use_case import (
    RestoreSeatTableUseCase,
)
from src.service.seat_allocation.app.interface import ILedger
from src.service.seat_allocation.domain.value_object import BookingRecord
from src.service.seat_allocation.driven_adapter.state.in_memory_seat_table import (
    InMemorySeatTable,
)
from test.constants import ALICE, BOB, CARL, TOTAL_SEATS


@pytest.fixture
def mock_ledger() -> MagicMock:
    return MagicMock(spec=ILedger)


class TestRestoreSeatTable:
    def test_holds_every_recorded_seat(
        self, seat_table: InMemorySeatTable, mock_ledger: MagicMock
    ) -> None:
        mock_ledger.scan.return_value = iter(
            [
                BookingRecord(passenger_name=ALICE, seat_index=0),
                BookingRecord(passenger_name=BOB, seat_index=6),
            ]
        )

        restored = RestoreSeatTableUseCase(seat_table, mock_ledger).execute()

        assert restored == 2
        assert seat_table.holder(0) == ALICE
        assert seat_table.holder(6) == BOB
        assert sum(seat.is_held for seat in seat_table.snapshot()) == 2

    def test_empty_ledger_restores_nothing(
        self, seat_table: InMemorySeatTable, mock_ledger: MagicMock
    ) -> None:
        mock_ledger.scan.return_value = iter([])

        assert RestoreSeatTableUseCase(seat_table, mock_ledger).execute() == 0

    def test_out_of_range_record_is_skipped(
        self, seat_table: InMemorySeatTable, mock_ledger: MagicMock
    ) -> None:
        mock_ledger.scan.return_value = iter(
            [
                BookingRecord(passenger_name=CARL, seat_index=TOTAL_SEATS + 4),
                BookingRecord(passenger_name=ALICE, seat_index=1),
            ]
        )

        restored = RestoreSeatTableUseCase(seat_table, mock_ledger).execute()

        assert restored == 1
        assert seat_table.holder(1) == ALICE
        mock_ledger.remove.assert_not_called()
