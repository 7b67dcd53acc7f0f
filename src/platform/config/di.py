"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.seat_allocation.app.command.reservation_engine import ReservationEngine
from src.service.seat_allocation.app.command.restore_seat_table_use_case import (
    RestoreSeatTableUseCase,
)
from src.service.seat_allocation.app.query.seat_status_query import (
    ListBookingsUseCase,
    ListSeatsUseCase,
)
from src.service.seat_allocation.driven_adapter.payment.amount_payment_gate import (
    AmountPaymentGate,
)
from src.service.seat_allocation.driven_adapter.repo.file_ledger import FileLedger
from src.service.seat_allocation.driven_adapter.state.in_memory_seat_table import (
    InMemorySeatTable,
)
from src.service.seat_allocation.driving_adapter.request_dispatcher import RequestDispatcher


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # State (one train per process)
    seat_table = providers.Singleton(
        InMemorySeatTable,
        total_seats=config_service.provided.TOTAL_SEATS,
    )

    # Durable ledger - opened explicitly at startup, fails fast if the medium is unusable
    ledger = providers.Singleton(
        FileLedger.open,
        path=config_service.provided.LEDGER_PATH,
    )

    payment_gate = providers.Singleton(AmountPaymentGate)

    # Use cases
    reservation_engine = providers.Singleton(
        ReservationEngine,
        seat_table=seat_table,
        ledger=ledger,
        payment_gate=payment_gate,
    )
    restore_seat_table_use_case = providers.Factory(
        RestoreSeatTableUseCase,
        seat_table=seat_table,
        ledger=ledger,
    )
    list_seats_use_case = providers.Factory(ListSeatsUseCase, seat_table=seat_table)
    list_bookings_use_case = providers.Factory(ListBookingsUseCase, ledger=ledger)

    # Driving adapter
    request_dispatcher = providers.Singleton(
        RequestDispatcher,
        engine=reservation_engine,
        list_seats_use_case=list_seats_use_case,
        list_bookings_use_case=list_bookings_use_case,
        max_workers=config_service.provided.MAX_WORKERS,
    )


container = Container()


def setup() -> None:
    container.config_service()
    container.ledger()


def cleanup() -> None:
    container.reset_singletons()
