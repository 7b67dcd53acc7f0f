"""
File Ledger - durable seat → passenger store

On-disk format: one `passenger_name,seat_number` line per booking (seat_number is 1-based),
newline terminated, insertion order.

Crash consistency:
- put appends one line and fsyncs; a failed append is truncated back to the previous size,
  or, if that fails too, the file is rewritten from the index before the next append
- remove writes the surviving records to a temp file in the same directory, fsyncs it,
  then os.replace()s it over the ledger, so readers see either the old or the new file
- load drops torn trailing lines and malformed lines, then rewrites the file so a torn
  line can never be glued onto the next append
"""

from contextlib import suppress
import os
from pathlib import Path
import tempfile
from threading import RLock
from typing import Iterator, Optional

from src.platform.exception.exceptions import LedgerUnavailableError, PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.seat_allocation.app.interface import ILedger
from src.service.seat_allocation.domain.seat_allocation_error import MalformedRecordError
from src.service.seat_allocation.domain.value_object import BookingRecord


_ENCODING = 'utf-8'


class FileLedger(ILedger):
    """
    Ledger backed by a single text file.

    All mutations are serialized by one re-entrant lock. Lookups are answered from an
    in-memory index that is only updated after the disk write succeeded.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._lock = RLock()
        self._records: dict[int, str] = {}  # seat_index -> passenger_name, insertion order
        # Set while the file may hold a line the index does not (failed append rollback)
        self._dirty = False

    @classmethod
    def open(cls, path: Path) -> 'FileLedger':
        """
        Open (creating if absent) and load the ledger at path.

        Raises:
            LedgerUnavailableError: the medium cannot be used at all
        """
        ledger = cls(path)
        try:
            ledger.path.parent.mkdir(parents=True, exist_ok=True)
            ledger.path.touch(exist_ok=True)
            if not os.access(ledger.path, os.R_OK | os.W_OK):
                raise PermissionError(f'{ledger.path} is not readable and writable')
            ledger.load()
        except (OSError, PersistenceError) as e:
            raise LedgerUnavailableError(f'Cannot open ledger at {ledger.path}: {e}') from e

        Logger.base.info(
            f'📒 [LEDGER] Opened {ledger.path} with {len(ledger._records)} booking(s)'
        )
        return ledger

    # ========== Queries ==========

    def contains(self, seat_index: int) -> bool:
        with self._lock:
            return seat_index in self._records

    def owner(self, seat_index: int) -> Optional[str]:
        with self._lock:
            return self._records.get(seat_index)

    @Logger.io
    def scan(self) -> Iterator[BookingRecord]:
        """
        Stream records straight from disk.

        Holds no lock: an open handle keeps reading the file it opened even if a
        concurrent remove replaces the path underneath it. While the file is known to be
        out of step with the index, the index is served instead.

        Raises:
            PersistenceError: the file cannot be read
        """
        if self._dirty:
            with self._lock:
                records = list(self._records.items())
            for seat, name in records:
                yield BookingRecord(passenger_name=name, seat_index=seat)
            return

        try:
            file = open(self.path, 'rb')
        except FileNotFoundError:
            return
        except OSError as e:
            Logger.base.error(f'❌ [LEDGER] Cannot open {self.path} for reading: {e}')
            raise PersistenceError(f'Cannot read ledger {self.path}: {e}') from e
        with file:
            try:
                for raw in file:
                    if not raw.endswith(b'\n'):
                        continue
                    try:
                        yield BookingRecord.from_line(raw.decode(_ENCODING).rstrip('\r\n'))
                    except (UnicodeDecodeError, MalformedRecordError):
                        continue
            except OSError as e:
                Logger.base.error(f'❌ [LEDGER] Read of {self.path} failed: {e}')
                raise PersistenceError(f'Cannot read ledger {self.path}: {e}') from e

    # ========== Startup ==========

    def load(self) -> list[BookingRecord]:
        with self._lock:
            try:
                data = self.path.read_bytes()
            except FileNotFoundError:
                data = b''
            except OSError as e:
                raise PersistenceError(f'Cannot read ledger {self.path}: {e}') from e

            records: dict[int, str] = {}
            dropped = 0
            for line_no, raw in enumerate(data.splitlines(keepends=True), start=1):
                if not raw.endswith(b'\n'):
                    Logger.base.warning(
                        f'⚠️ [LEDGER] Skipping torn trailing line {line_no}: {raw!r}'
                    )
                    dropped += 1
                    continue
                try:
                    record = BookingRecord.from_line(raw.decode(_ENCODING).rstrip('\r\n'))
                except (UnicodeDecodeError, MalformedRecordError):
                    Logger.base.warning(f'⚠️ [LEDGER] Skipping malformed line {line_no}: {raw!r}')
                    dropped += 1
                    continue
                if record.seat_index in records:
                    Logger.base.warning(
                        f'⚠️ [LEDGER] Skipping duplicate booking for seat {record.seat_number} '
                        f'on line {line_no}'
                    )
                    dropped += 1
                    continue
                records[record.seat_index] = record.passenger_name

            if dropped:
                self._rewrite(records)
                Logger.base.info(f'🧹 [LEDGER] Dropped {dropped} unusable line(s) from {self.path}')

            self._records = records
            return [
                BookingRecord(passenger_name=name, seat_index=seat)
                for seat, name in records.items()
            ]

    # ========== Mutations ==========

    def put(self, seat_index: int, passenger_name: str) -> None:
        record = BookingRecord(passenger_name=passenger_name, seat_index=seat_index)
        with self._lock:
            if self._dirty or seat_index in self._records:
                # One record per seat, and a stale line must not survive: rewrite everything
                updated = {k: v for k, v in self._records.items() if k != seat_index}
                updated[seat_index] = passenger_name
                self._rewrite(updated)
                self._records = updated
            else:
                self._append(record)
                self._records[seat_index] = passenger_name
        Logger.base.info(f'💾 [LEDGER] Recorded {record.display()}')

    def remove(self, seat_index: int) -> bool:
        with self._lock:
            if seat_index not in self._records:
                return False
            remaining = {k: v for k, v in self._records.items() if k != seat_index}
            self._rewrite(remaining)
            self._records = remaining
        Logger.base.info(f'🗑️ [LEDGER] Removed booking for seat {seat_index + 1}')
        return True

    # ========== Disk I/O ==========

    def _append(self, record: BookingRecord) -> None:
        offset: Optional[int] = None
        try:
            with open(self.path, 'ab') as file:
                offset = file.tell()
                file.write(record.to_line().encode(_ENCODING))
                file.flush()
                os.fsync(file.fileno())
        except OSError as e:
            if offset is not None:
                self._discard_tail(offset)
            raise PersistenceError(f'Cannot append to ledger {self.path}: {e}') from e

    def _discard_tail(self, offset: int) -> None:
        """Undo a failed append; the bytes may form a complete line even though fsync failed"""
        try:
            os.truncate(self.path, offset)
            return
        except OSError as e:
            Logger.base.error(f'❌ [LEDGER] Could not truncate failed append: {e}')

        try:
            self._rewrite(self._records)
        except PersistenceError as e:
            self._dirty = True
            Logger.base.error(
                f'❌ [LEDGER] {self.path} holds a record that was never booked; '
                f'the next successful write replaces the file: {e}'
            )

    def _rewrite(self, records: dict[int, str]) -> None:
        tmp_path: Optional[str] = None
        try:
            with tempfile.NamedTemporaryFile(
                'wb',
                dir=self.path.parent,
                prefix=f'.{self.path.name}.',
                suffix='.tmp',
                delete=False,
            ) as tmp:
                tmp_path = tmp.name
                for seat, name in records.items():
                    line = BookingRecord(passenger_name=name, seat_index=seat).to_line()
                    tmp.write(line.encode(_ENCODING))
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path is not None:
                with suppress(OSError):
                    os.unlink(tmp_path)
            raise PersistenceError(f'Cannot rewrite ledger {self.path}: {e}') from e

        self._dirty = False
        self._fsync_directory()

    def _fsync_directory(self) -> None:
        """Persist the rename itself (POSIX only)"""
        if os.name != 'posix':
            return
        try:
            fd = os.open(self.path.parent, os.O_RDONLY)
        except OSError:
            return
        try:
            os.fsync(fd)
        except OSError as e:
            Logger.base.warning(f'⚠️ [LEDGER] Directory fsync failed: {e}')
        finally:
            os.close(fd)
