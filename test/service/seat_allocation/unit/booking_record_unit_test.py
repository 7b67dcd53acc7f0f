"""Unit tests for the ledger line value object and passenger name rules"""

import pytest

from src.service.seat_allocation.domain.seat_allocation_error import (
    InvalidPassengerError,
    MalformedRecordError,
)
from src.service.seat_allocation.domain.value_object import BookingRecord
from src.service.seat_allocation.domain.value_object.booking_record import (
    validate_passenger_name,
)


class TestLineFormat:
    def test_seat_number_is_one_based_on_disk(self) -> None:
        record = BookingRecord(passenger_name='Bob', seat_index=0)

        assert record.to_line() == 'Bob,1\n'
        assert BookingRecord.from_line('Bob,1') == record

    @pytest.mark.parametrize(
        'line',
        [
            '', 'Bob', 'Bob,', ',3', 'Bob,x', 'Bob,0', 'Bob,-2', 'Bob,1,2', 'Bob;1',
            'Bob,1_0', 'Bob, 3', 'Bob,3 ', 'Bob,+3', 'Bob,\u0663',
        ],
    )
    def test_rejects_malformed_lines(self, line: str) -> None:
        with pytest.raises(MalformedRecordError):
            BookingRecord.from_line(line)


class TestPassengerName:
    def test_surrounding_whitespace_is_trimmed(self) -> None:
        assert validate_passenger_name('  Dana ') == 'Dana'

    @pytest.mark.parametrize('name', ['', ' ', 'A,B', 'A\nB', 'A\rB'])
    def test_rejects_names_the_ledger_cannot_store(self, name: str) -> None:
        with pytest.raises(InvalidPassengerError):
            validate_passenger_name(name)
