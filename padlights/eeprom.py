"""EEPROM emulated on a block of flash, with debounced writes."""

from __future__ import annotations

import threading
from collections.abc import Callable

EEPROM_SIZE_BYTES = 0x2000
EEPROM_WRITE_WAIT_MS = 50


class FlashPROM:
    """An in-memory cache of a flash region that is written back lazily.

    Commits are debounced: each commit restarts a timer, and the cache is
    written to flash only once the timer runs out, so a burst of changes
    costs a single flash write.
    """

    def __init__(
        self,
        size: int = EEPROM_SIZE_BYTES,
        write_wait: float = EEPROM_WRITE_WAIT_MS / 1000,
        writer: Callable[[bytes], None] | None = None,
    ) -> None:
        self.size = size
        self.write_wait = write_wait
        self.writer = writer
        self.flash = b"\xff" * size
        self._cache = bytearray(size)
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        """True while a commit is waiting to be written."""
        with self._lock:
            return self._timer is not None

    def start(self, contents: bytes | None = None) -> None:
        """Load the cache from ``contents`` (or the current flash image).

        Erased flash (all 0xFF) is replaced by zeros and committed.
        """
        data = self.flash if contents is None else bytes(contents)
        if len(data) != self.size:
            raise ValueError(f"expected {self.size} bytes, got {len(data)}")
        with self._lock:
            self._cache[:] = data
        if all(byte == 0xFF for byte in data):
            self.reset()

    def commit(self) -> None:
        """Schedule the cache to be written after the write wait."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            timer = threading.Timer(self.write_wait, self._on_timer, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def flush(self) -> None:
        """Write the cache to flash now, cancelling any pending commit."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._generation += 1
            self._write_locked()

    def reset(self) -> None:
        """Zero the cache and commit it."""
        with self._lock:
            self._cache[:] = bytes(self.size)
        self.commit()

    def get(self, index: int, size: int) -> bytes:
        """Read ``size`` bytes starting at ``index``."""
        if index < 0 or size < 0 or index + size > self.size:
            raise IndexError(f"read of {size} bytes at {index} is outside the EEPROM")
        with self._lock:
            return bytes(self._cache[index:index + size])

    def set(self, index: int, data: bytes) -> None:
        """Write ``data`` into the cache at ``index``."""
        data = bytes(data)
        if index < 0 or index + len(data) > self.size:
            raise IndexError(f"write of {len(data)} bytes at {index} is outside the EEPROM")
        with self._lock:
            self._cache[index:index + len(data)] = data

    def _on_timer(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._timer is None:
                return
            self._timer = None
            self._write_locked()

    def _write_locked(self) -> None:
        data = bytes(self._cache)
        self.flash = data
        if self.writer is not None:
            self.writer(data)

    def __enter__(self) -> FlashPROM:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self.pending:
            self.flush()