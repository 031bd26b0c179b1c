"""A blocking rate limiter that spaces events evenly."""

from __future__ import annotations

import threading
import time
from typing import Iterator, Optional


class Limiter:
    """Allow at most ``limit`` events per second, evenly spaced."""

    def __init__(self, limit: int) -> None:
        if limit <= 0:
            raise ValueError(f"limit must be positive: {limit}")
        self._limit = limit
        self._interval = 1.0 / limit
        self._next: Optional[float] = None
        self._lock = threading.Lock()
        self._closed = threading.Event()

    def take(self) -> None:
        """Block until the next event is allowed."""
        with self._lock:
            now = time.monotonic()
            if self._next is None or self._next < now:
                self._next = now
            wait = self._next - now
            self._next += self._interval
        if wait > 0:
            time.sleep(wait)

    def limit(self) -> int:
        """Return the configured number of events per second."""
        return self._limit

    def ticks(self) -> Iterator[int]:
        """Yield a running tick number at the limited rate until :meth:`close`."""
        count = 0
        while not self._closed.is_set():
            self.take()
            if self._closed.is_set():
                return
            count += 1
            yield count

    def close(self) -> None:
        """Stop every running :meth:`ticks` iterator."""
        self._closed.set()