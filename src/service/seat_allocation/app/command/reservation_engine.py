"""
Reservation Engine - two-phase book / cancel over SeatTable + Ledger

book:   validate → payment → SeatTable.reserve → Ledger.put     (rollback: release)
cancel: validate → SeatTable.release → Ledger.remove            (rollback: re-reserve)
"""

from threading import Lock
from typing import Optional

from opentelemetry import trace

from src.platform.exception.exceptions import PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.seat_allocation.app.dto import (
    BookSeatRequest,
    CancelSeatRequest,
    ReservationOutcome,
)
from src.service.seat_allocation.app.interface import ILedger, IPaymentGate, ISeatTable
from src.service.seat_allocation.domain.enum import OutcomeKind
from src.service.seat_allocation.domain.seat_allocation_error import (
    InvalidPassengerError,
    InvalidSeatError,
)
from src.service.seat_allocation.domain.value_object.booking_record import (
    validate_passenger_name,
)


class ReservationEngine:
    """
    Reservation Engine

    Invariant: once book/cancel returns, SeatTable.is_held(s) == Ledger.contains(s).

    Locking:
    - SeatTable lock: one status flip, owned by the seat table
    - Ledger lock: one append or rewrite, owned by the ledger
    - Per-seat guard (here): spans both phases of one request so a concurrent book and
      cancel of the same seat cannot interleave their ledger writes

    Dependencies:
    - seat_table: in-memory authority
    - ledger: durable record
    - payment_gate: approval for bookings
    """

    def __init__(
        self,
        seat_table: ISeatTable,
        ledger: ILedger,
        payment_gate: IPaymentGate,
    ) -> None:
        self.seat_table = seat_table
        self.ledger = ledger
        self.payment_gate = payment_gate
        self._seat_guards = [Lock() for _ in range(seat_table.total_seats)]
        self.tracer = trace.get_tracer(__name__)

    @property
    def total_seats(self) -> int:
        return self.seat_table.total_seats

    def handle(self, request: BookSeatRequest | CancelSeatRequest) -> ReservationOutcome:
        if isinstance(request, BookSeatRequest):
            return self.book(
                passenger_name=request.passenger_name,
                seat_index=request.seat_index,
                amount=request.amount,
            )
        return self.cancel(passenger_name=request.passenger_name, seat_index=request.seat_index)

    @Logger.io
    def book(self, *, passenger_name: str, seat_index: int, amount: float) -> ReservationOutcome:
        with self.tracer.start_as_current_span(
            'engine.book',
            attributes={'seat.index': seat_index, 'passenger.name': passenger_name},
        ) as span:
            try:
                self._validate_seat(seat_index)
                passenger_name = validate_passenger_name(passenger_name)
            except (InvalidSeatError, InvalidPassengerError) as e:
                Logger.base.warning(f'⚠️ [BOOK] {e}')
                return self._outcome(e.outcome_kind, passenger_name, seat_index, str(e))

            if not self.payment_gate.approve(passenger_name, amount):
                return self._outcome(
                    OutcomeKind.PAYMENT_DECLINED,
                    passenger_name,
                    seat_index,
                    f'Payment of {amount} declined',
                )

            with self._seat_guards[seat_index]:
                # ========== Phase 1: in-memory reserve ==========
                if not self.seat_table.reserve(seat_index, passenger_name):
                    Logger.base.info(
                        f'⏳ [BOOK] Seat {seat_index + 1} already held, {passenger_name} rejected'
                    )
                    return self._outcome(OutcomeKind.SEAT_UNAVAILABLE, passenger_name, seat_index)

                # ========== Phase 2: durable record ==========
                try:
                    self.ledger.put(seat_index, passenger_name)
                except Exception as e:
                    # Rollback: a held seat must always have a ledger line
                    self.seat_table.release(seat_index)
                    self._log_persistence_failure('BOOK', seat_index, e)
                    span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))
                    return self._outcome(
                        OutcomeKind.PERSISTENCE_FAILURE, passenger_name, seat_index, str(e)
                    )

            Logger.base.info(f'✅ [BOOK] {passenger_name} booked seat {seat_index + 1}')
            return self._outcome(OutcomeKind.BOOKED, passenger_name, seat_index)

    @Logger.io
    def cancel(self, *, passenger_name: str, seat_index: int) -> ReservationOutcome:
        # NOTE: passenger_name is not checked against the ledger owner; any caller may
        # cancel any held seat by index
        with self.tracer.start_as_current_span(
            'engine.cancel',
            attributes={'seat.index': seat_index, 'passenger.name': passenger_name},
        ) as span:
            try:
                self._validate_seat(seat_index)
            except InvalidSeatError as e:
                Logger.base.warning(f'⚠️ [CANCEL] {e}')
                return self._outcome(e.outcome_kind, passenger_name, seat_index, str(e))

            with self._seat_guards[seat_index]:
                holder = self.seat_table.holder(seat_index)

                # ========== Phase 1: in-memory release ==========
                if holder is None or not self.seat_table.release(seat_index):
                    Logger.base.info(
                        f'⏳ [CANCEL] Seat {seat_index + 1} not booked, nothing to cancel'
                    )
                    return self._outcome(OutcomeKind.NOT_BOOKED, passenger_name, seat_index)

                # ========== Phase 2: durable removal ==========
                try:
                    existed = self.ledger.remove(seat_index)
                except Exception as e:
                    self._log_persistence_failure('CANCEL', seat_index, e)
                    span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))
                    restored = self._restore_hold(seat_index, holder)
                    return self._outcome(
                        OutcomeKind.PERSISTENCE_FAILURE,
                        passenger_name,
                        seat_index,
                        str(e),
                        integrity_warning=not restored,
                    )

                if not existed:
                    Logger.base.warning(
                        f'⚠️ [CANCEL] Seat {seat_index + 1} was held without a ledger record'
                    )

            Logger.base.info(f'✅ [CANCEL] {passenger_name} cancelled seat {seat_index + 1}')
            return self._outcome(OutcomeKind.CANCELLED, passenger_name, seat_index)

    def _restore_hold(self, seat_index: int, holder: str) -> bool:
        """Put the seat back in memory after the ledger refused to forget it"""
        owner = self.ledger.owner(seat_index) or holder
        if self.seat_table.reserve(seat_index, owner):
            Logger.base.warning(f'↩️ [CANCEL] Seat {seat_index + 1} restored to {owner}')
            return True

        Logger.base.critical(
            f'🚨 [INTEGRITY] Seat {seat_index + 1} is free in memory but still recorded for '
            f'{owner} in the ledger - reconcile manually'
        )
        return False

    def _validate_seat(self, seat_index: int) -> None:
        if not self.seat_table.contains_index(seat_index):
            raise InvalidSeatError(seat_index, self.total_seats)

    @staticmethod
    def _log_persistence_failure(tag: str, seat_index: int, error: Exception) -> None:
        if isinstance(error, PersistenceError):
            Logger.base.error(f'❌ [{tag}] Seat {seat_index + 1} not persisted: {error}')
        else:
            Logger.base.exception(f'❌ [{tag}] Unexpected ledger error on seat {seat_index + 1}')

    @staticmethod
    def _outcome(
        kind: OutcomeKind,
        passenger_name: str,
        seat_index: int,
        detail: Optional[str] = None,
        *,
        integrity_warning: bool = False,
    ) -> ReservationOutcome:
        return ReservationOutcome(
            kind=kind,
            passenger_name=passenger_name,
            seat_index=seat_index,
            detail=detail or '',
            integrity_warning=integrity_warning,
        )
