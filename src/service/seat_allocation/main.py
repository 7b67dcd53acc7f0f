"""
Railway Reservation System - Main Entry

Startup order:
1. Open the ledger (abort if the medium is unusable)
2. Restore held seats from the ledger
3. Serve the interactive prompt until exit, then drain in-flight requests
"""

import sys

from src.platform.config.di import cleanup, container, setup
from src.platform.exception.exceptions import LedgerUnavailableError, PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.seat_allocation.driving_adapter.reservation_cli import run_cli


def main() -> int:
    try:
        setup()
    except LedgerUnavailableError as e:
        Logger.base.critical(f'🚨 [STARTUP] {e}')
        print(f'Cannot start: {e.message}', file=sys.stderr)
        return 1

    try:
        settings = container.config_service()
        container.restore_seat_table_use_case().execute()

        with container.request_dispatcher() as dispatcher:
            run_cli(dispatcher, total_seats=settings.TOTAL_SEATS)
    except PersistenceError as e:
        Logger.base.critical(f'🚨 [STARTUP] Restore failed: {e}')
        print(f'Cannot restore bookings: {e.message}', file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        Logger.base.info('[STARTUP] Interrupted')
    finally:
        cleanup()
    return 0


if __name__ == '__main__':
    sys.exit(main())
