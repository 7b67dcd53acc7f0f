"""
Request Dispatcher

Boundary between passenger-facing seat numbers (1-based) and the engine (0-based indices).
Every book / cancel runs on a bounded thread pool so independent requests execute in
parallel against the single shared ReservationEngine.
"""

from concurrent.futures import Future, ThreadPoolExecutor
from types import TracebackType
from typing import Optional, Self

from src.platform.logging.loguru_io import Logger
from src.service.seat_allocation.app.command.reservation_engine import ReservationEngine
from src.service.seat_allocation.app.dto import (
    BookSeatRequest,
    CancelSeatRequest,
    ReservationOutcome,
)
from src.service.seat_allocation.app.query.seat_status_query import (
    ListBookingsUseCase,
    ListSeatsUseCase,
)
from src.service.seat_allocation.domain.value_object import BookingRecord, SeatState


class RequestDispatcher:
    # MAX_WORKERS: ThreadPool concurrent worker count
    #   - Default: 4
    #   - One worker serves one passenger request at a time
    MAX_WORKERS: int = 4

    def __init__(
        self,
        *,
        engine: ReservationEngine,
        list_seats_use_case: ListSeatsUseCase,
        list_bookings_use_case: ListBookingsUseCase,
        max_workers: Optional[int] = None,
    ) -> None:
        self.engine = engine
        self.list_seats_use_case = list_seats_use_case
        self.list_bookings_use_case = list_bookings_use_case
        self.max_workers = max_workers or self.MAX_WORKERS
        self.executor = ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix='reservation-worker',
        )
        self.running = True

    # ========== Commands (run on the pool) ==========

    def submit_book(
        self, passenger_name: str, seat_number: int, amount: float
    ) -> Future[ReservationOutcome]:
        return self.submit(
            BookSeatRequest(
                passenger_name=passenger_name, seat_index=seat_number - 1, amount=amount
            )
        )

    def submit_cancel(self, passenger_name: str, seat_number: int) -> Future[ReservationOutcome]:
        return self.submit(
            CancelSeatRequest(passenger_name=passenger_name, seat_index=seat_number - 1)
        )

    def submit(self, request: BookSeatRequest | CancelSeatRequest) -> Future[ReservationOutcome]:
        if not self.running:
            raise RuntimeError('Dispatcher is shut down')
        return self.executor.submit(self.engine.handle, request)

    def book(self, passenger_name: str, seat_number: int, amount: float) -> ReservationOutcome:
        """Submit and wait - used by the interactive prompt"""
        return self.submit_book(passenger_name, seat_number, amount).result()

    def cancel(self, passenger_name: str, seat_number: int) -> ReservationOutcome:
        return self.submit_cancel(passenger_name, seat_number).result()

    # ========== Queries (caller thread) ==========

    def list_seats(self) -> tuple[SeatState, ...]:
        return self.list_seats_use_case.execute()

    def list_bookings(self) -> list[BookingRecord]:
        return self.list_bookings_use_case.execute()

    # ========== Lifecycle ==========

    def shutdown(self) -> None:
        """Stop accepting requests and wait for in-flight ones to finish"""
        if not self.running:
            return
        self.running = False
        Logger.base.info('[DISPATCHER] Waiting for in-flight requests')
        self.executor.shutdown(wait=True, cancel_futures=False)
        Logger.base.info('[DISPATCHER] Stopped')

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown()
