"""A counting semaphore with non-blocking acquire and permit inspection."""

from __future__ import annotations

import threading
from types import TracebackType
from typing import Optional

__all__ = ["Semaphore"]


class Semaphore:
    """Limits how many holders may proceed at once."""

    def __init__(self, concurrency: int) -> None:
        if concurrency < 0:
            raise ValueError("concurrency must not be negative")
        self._size = concurrency
        self._held = 0
        self._cond = threading.Condition()

    def try_acquire(self) -> bool:
        """Take a permit if one is free; return whether it was taken."""
        with self._cond:
            if self._held < self._size:
                self._held += 1
                return True
            return False

    def acquire(self) -> None:
        """Take a permit, waiting until one is free."""
        with self._cond:
            self._cond.wait_for(lambda: self._held < self._size)
            self._held += 1

    def release(self) -> None:
        """Give back a permit."""
        with self._cond:
            if self._held == 0:
                raise ValueError("semaphore released more times than acquired")
            self._held -= 1
            self._cond.notify()

    def available_permits(self) -> int:
        """Return the number of free permits."""
        with self._cond:
            return self._size - self._held

    def __enter__(self) -> Semaphore:
        self.acquire()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.release()