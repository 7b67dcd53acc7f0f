"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application module reads settings at import time
- Per-test ledger files under pytest's tmp_path (parallel-safe with pytest-xdist)
- Seat table / ledger / engine / dispatcher fixtures wired like the DI container

Architecture:
- Unit tests (test/**/unit/): Real seat table, mocked ledger where failures are injected
- Integration tests: Real FileLedger on disk plus the threaded RequestDispatcher
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# src.platform.config.core_setting builds `settings` at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('DEBUG', 'true')
    os.environ.setdefault('SERVICE_NAME', 'railway-reservation-test')
    os.environ['TOTAL_SEATS'] = '10'


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402

from src.service.seat_allocation.app.command.reservation_engine import (  # noqa: E402
    ReservationEngine,
)
from src.service.seat_allocation.app.query.seat_status_query import (  # noqa: E402
    ListBookingsUseCase,
    ListSeatsUseCase,
)
from src.service.seat_allocation.driven_adapter.payment.amount_payment_gate import (  # noqa: E402
    AmountPaymentGate,
)
from src.service.seat_allocation.driven_adapter.repo.file_ledger import FileLedger  # noqa: E402
from src.service.seat_allocation.driven_adapter.state.in_memory_seat_table import (  # noqa: E402
    InMemorySeatTable,
)
from src.service.seat_allocation.driving_adapter.request_dispatcher import (  # noqa: E402
    RequestDispatcher,
)
from test.constants import TOTAL_SEATS  # noqa: E402


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        path = str(item.fspath)
        if '/unit/' in path or '\\unit\\' in path:
            item.add_marker(pytest.mark.unit)
        elif '/integration/' in path or '\\integration\\' in path:
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def ledger_path(tmp_path: Path) -> Path:
    return tmp_path / 'data' / 'bookings.txt'


@pytest.fixture
def ledger(ledger_path: Path) -> FileLedger:
    return FileLedger.open(ledger_path)


@pytest.fixture
def seat_table() -> InMemorySeatTable:
    return InMemorySeatTable(TOTAL_SEATS)


@pytest.fixture
def payment_gate() -> AmountPaymentGate:
    return AmountPaymentGate()


@pytest.fixture
def engine(
    seat_table: InMemorySeatTable, ledger: FileLedger, payment_gate: AmountPaymentGate
) -> ReservationEngine:
    return ReservationEngine(seat_table=seat_table, ledger=ledger, payment_gate=payment_gate)


@pytest.fixture
def dispatcher(
    engine: ReservationEngine, seat_table: InMemorySeatTable, ledger: FileLedger
) -> Generator[RequestDispatcher, None, None]:
    dispatcher = RequestDispatcher(
        engine=engine,
        list_seats_use_case=ListSeatsUseCase(seat_table),
        list_bookings_use_case=ListBookingsUseCase(ledger),
        max_workers=8,
    )
    yield dispatcher
    dispatcher.shutdown()
