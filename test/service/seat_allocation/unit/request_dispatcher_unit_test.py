"""Unit tests for RequestDispatcher (seat numbering boundary and lifecycle)"""

from collections.abc import Generator
from unittest.mock import MagicMock

import pytest

from src.service.seat_allocation.app.dto import (
    BookSeatRequest,
    CancelSeatRequest,
    ReservationOutcome,
)
from src.service.seat_allocation.domain.enum import OutcomeKind
from src.service.seat_allocation.domain.value_object import BookingRecord, SeatState
from src.service.seat_allocation.driving_adapter.request_dispatcher import RequestDispatcher
from test.constants import ALICE, BOB, VALID_AMOUNT


@pytest.fixture
def mock_engine() -> MagicMock:
    engine = MagicMock()
    engine.handle.side_effect = lambda request: ReservationOutcome(
        kind=OutcomeKind.BOOKED,
        passenger_name=request.passenger_name,
        seat_index=request.seat_index,
    )
    return engine


@pytest.fixture
def mock_dispatcher(mock_engine: MagicMock) -> Generator[RequestDispatcher, None, None]:
    list_seats_use_case = MagicMock()
    list_seats_use_case.execute.return_value = (SeatState(index=0, passenger_name=BOB),)
    list_bookings_use_case = MagicMock()
    list_bookings_use_case.execute.return_value = [BookingRecord(passenger_name=BOB, seat_index=0)]

    dispatcher = RequestDispatcher(
        engine=mock_engine,
        list_seats_use_case=list_seats_use_case,
        list_bookings_use_case=list_bookings_use_case,
        max_workers=2,
    )
    yield dispatcher
    dispatcher.shutdown()


class TestSeatNumbering:
    def test_book_converts_seat_number_to_index(
        self, mock_dispatcher: RequestDispatcher, mock_engine: MagicMock
    ) -> None:
        outcome = mock_dispatcher.book(ALICE, 3, VALID_AMOUNT)

        mock_engine.handle.assert_called_once_with(
            BookSeatRequest(passenger_name=ALICE, seat_index=2, amount=VALID_AMOUNT)
        )
        assert outcome.seat_number == 3

    def test_cancel_converts_seat_number_to_index(
        self, mock_dispatcher: RequestDispatcher, mock_engine: MagicMock
    ) -> None:
        mock_dispatcher.cancel(BOB, 1)

        mock_engine.handle.assert_called_once_with(
            CancelSeatRequest(passenger_name=BOB, seat_index=0)
        )

    def test_seat_number_zero_reaches_engine_as_negative_index(
        self, mock_dispatcher: RequestDispatcher, mock_engine: MagicMock
    ) -> None:
        mock_dispatcher.submit_book(ALICE, 0, VALID_AMOUNT).result()

        request = mock_engine.handle.call_args.args[0]
        assert request.seat_index == -1


class TestQueries:
    def test_list_seats(self, mock_dispatcher: RequestDispatcher) -> None:
        assert mock_dispatcher.list_seats() == (SeatState(index=0, passenger_name=BOB),)

    def test_list_bookings(self, mock_dispatcher: RequestDispatcher) -> None:
        assert [r.display() for r in mock_dispatcher.list_bookings()] == [f'{BOB},1']


class TestLifecycle:
    def test_submit_after_shutdown_is_rejected(self, mock_dispatcher: RequestDispatcher) -> None:
        mock_dispatcher.shutdown()

        with pytest.raises(RuntimeError):
            mock_dispatcher.submit_book(ALICE, 1, VALID_AMOUNT)

    def test_shutdown_is_idempotent(self, mock_dispatcher: RequestDispatcher) -> None:
        mock_dispatcher.shutdown()
        mock_dispatcher.shutdown()

        assert mock_dispatcher.running is False

    def test_context_manager_drains_pending_requests(self, mock_engine: MagicMock) -> None:
        with RequestDispatcher(
            engine=mock_engine,
            list_seats_use_case=MagicMock(),
            list_bookings_use_case=MagicMock(),
        ) as dispatcher:
            futures = [dispatcher.submit_book(ALICE, n, VALID_AMOUNT) for n in range(1, 6)]

        assert all(future.done() for future in futures)
        assert dispatcher.max_workers == RequestDispatcher.MAX_WORKERS
