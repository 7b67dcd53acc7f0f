"""
Reservation CLI - interactive menu over the RequestDispatcher

Collects structured requests, prints one result line per outcome.
"""

from enum import StrEnum
from typing import Callable, Optional

from src.platform.exception.exceptions import PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.seat_allocation.driving_adapter.request_dispatcher import RequestDispatcher


class MenuOption(StrEnum):
    BOOK = '1'
    CANCEL = '2'
    VIEW_SEATS = '3'
    VIEW_BOOKINGS = '4'
    EXIT = '5'


MENU = '\n'.join(
    (
        '',
        '========= Railway Reservation System =========',
        f'{MenuOption.BOOK}. Book Seat',
        f'{MenuOption.CANCEL}. Cancel Seat',
        f'{MenuOption.VIEW_SEATS}. View Seat Status',
        f'{MenuOption.VIEW_BOOKINGS}. View Bookings',
        f'{MenuOption.EXIT}. Exit',
    )
)


class ReservationCli:
    def __init__(
        self,
        dispatcher: RequestDispatcher,
        *,
        total_seats: int,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.dispatcher = dispatcher
        self.total_seats = total_seats
        self._read_line = read_line
        self._write = write

    def run(self) -> None:
        """Loop until `5` or end of input"""
        while True:
            self._write(MENU)
            choice = self._prompt('Choose an option: ')
            if choice is None or choice == MenuOption.EXIT:
                self._write('Exiting system. Bye!')
                return

            match choice:
                case MenuOption.BOOK:
                    self.book()
                case MenuOption.CANCEL:
                    self.cancel()
                case MenuOption.VIEW_SEATS:
                    self.show_seats()
                case MenuOption.VIEW_BOOKINGS:
                    self.show_bookings()
                case _:
                    self._write('Invalid option. Try again!')

    def book(self) -> None:
        name = self._prompt('Enter your name: ')
        seat_number = self._prompt_int(f'Enter seat number (1-{self.total_seats}): ')
        amount = self._prompt_float('Enter payment amount: ')
        if name is None or seat_number is None or amount is None:
            return
        self._write(self.dispatcher.book(name, seat_number, amount).describe())

    def cancel(self) -> None:
        name = self._prompt('Enter your name: ')
        seat_number = self._prompt_int(f'Enter seat number to cancel (1-{self.total_seats}): ')
        if name is None or seat_number is None:
            return
        self._write(self.dispatcher.cancel(name, seat_number).describe())

    def show_seats(self) -> None:
        self._write('\n===== Current Seat Status =====')
        for seat in self.dispatcher.list_seats():
            self._write(f'Seat {seat.seat_number}: {seat.status}')

    def show_bookings(self) -> None:
        self._write('\n===== All Bookings =====')
        try:
            bookings = self.dispatcher.list_bookings()
        except PersistenceError as e:
            self._write(f'Error reading bookings: {e.message}')
            return
        if not bookings:
            self._write('No bookings found.')
            return
        for record in bookings:
            self._write(f'- {record.display()}')

    # ========== Input helpers ==========

    def _prompt(self, message: str) -> Optional[str]:
        try:
            return self._read_line(message).strip()
        except EOFError:
            return None

    def _prompt_int(self, message: str) -> Optional[int]:
        while (raw := self._prompt(message)) is not None:
            try:
                return int(raw)
            except ValueError:
                self._write('Please enter a whole number.')
        return None

    def _prompt_float(self, message: str) -> Optional[float]:
        while (raw := self._prompt(message)) is not None:
            try:
                return float(raw)
            except ValueError:
                self._write('Please enter an amount, e.g. 100.0')
        return None


def run_cli(dispatcher: RequestDispatcher, *, total_seats: int) -> None:
    Logger.base.info(f'🚆 [CLI] Ready with {total_seats} seats')
    ReservationCli(dispatcher, total_seats=total_seats).run()
