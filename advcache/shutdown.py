"""Graceful shutdown: wait for a stop request, then for workers to finish."""

from __future__ import annotations

import logging
import signal
import threading
import time
from datetime import timedelta
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 10.0
_POLL_INTERVAL = 0.1


class GracefulTimeoutError(TimeoutError):
    """Raised when workers did not finish within the graceful timeout."""


class Graceful:
    """Coordinate shutdown of worker threads around a shared stop event.

    ``stop_event`` plays the role of the application's cancellation signal:
    workers watch it, and it is set once shutdown begins.
    """

    def __init__(self, stop_event: threading.Event) -> None:
        self._stop_event = stop_event
        self._timeout = _DEFAULT_TIMEOUT
        self._cond = threading.Condition()
        self._count = 0
        self._signal_name: Optional[str] = None

    def add(self, n: int) -> None:
        """Register ``n`` more running workers (negative to unregister)."""
        with self._cond:
            if self._count + n < 0:
                raise ValueError("negative worker counter")
            self._count += n
            if self._count == 0:
                self._cond.notify_all()

    def done(self) -> None:
        """Mark one worker as finished."""
        self.add(-1)

    def set_graceful_timeout(self, timeout: Union[float, timedelta]) -> None:
        """Set how long to wait for workers once shutdown starts (seconds)."""
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        self._timeout = float(timeout)

    def listen_cancel_and_await(self) -> None:
        """Block until the stop event is set or SIGINT/SIGTERM arrives, then
        set the stop event and wait for all workers.

        Raises GracefulTimeoutError when workers outlive the graceful timeout.
        """
        previous = self._install_signal_handlers()
        try:
            while not self._stop_event.wait(_POLL_INTERVAL):
                pass
        finally:
            self._restore_signal_handlers(previous)

        if self._signal_name is None:
            logger.info("[graceful-shutdown] received a stop request, starting cancellation")
        else:
            logger.info(
                "[graceful-shutdown] received a %s signal, starting cancellation",
                self._signal_name,
            )
        self._cancel_and_await()

    def _cancel_and_await(self) -> None:
        self._stop_event.set()
        deadline = time.monotonic() + self._timeout
        with self._cond:
            while self._count > 0:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    logger.info(
                        "[graceful-shutdown] timeout error, not all workers were closed within %ss",
                        self._timeout,
                    )
                    raise GracefulTimeoutError(
                        f"not all workers were closed within {self._timeout}s"
                    )
                self._cond.wait(remaining)
        logger.info("[graceful-shutdown] service was gracefully shut down")

    def _on_signal(self, signum: int, _frame: object) -> None:
        self._signal_name = signal.Signals(signum).name
        self._stop_event.set()

    def _install_signal_handlers(self) -> Dict[int, object]:
        if threading.current_thread() is not threading.main_thread():
            return {}
        previous: Dict[int, object] = {}
        for sig in (signal.SIGINT, signal.SIGTERM):
            previous[sig] = signal.signal(sig, self._on_signal)
        return previous

    @staticmethod
    def _restore_signal_handlers(previous: Dict[int, object]) -> None:
        for sig, handler in previous.items():
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)