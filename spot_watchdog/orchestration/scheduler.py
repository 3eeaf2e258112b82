"""
Periodic scheduling for the spot instance watchdog.
"""

import threading
from collections.abc import Callable
from typing import Any

from ..utils.logging import get_logger

logger = get_logger(__name__)


class PeriodicScheduler:
    """Runs a single handler at a fixed interval on a worker thread.

    Ticks never overlap. The first tick fires one interval after start. A
    handler exception stops the scheduler and is kept in ``error``.
    """

    def __init__(self, handler: Callable[[], Any], interval: float) -> None:
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")
        self.handler = handler
        self.interval = interval
        self.running = False
        self.error: BaseException | None = None
        self.tick_count = 0
        self.worker_thread: threading.Thread | None = None
        self._stop_event = threading.Event()
        self._finished = threading.Event()

    def start_scheduler(self) -> None:
        """Start the scheduler."""
        if self.running:
            logger.warning("Scheduler is already running")
            return

        self.running = True
        self.error = None
        self._stop_event.clear()
        self._finished.clear()
        self.worker_thread = threading.Thread(
            target=self._worker_loop, name="watchdog-scheduler", daemon=True
        )
        self.worker_thread.start()

        logger.info("✅ Scheduler started")

    def stop_scheduler(self, timeout: float | None = 5) -> None:
        """Stop the scheduler; an in-flight tick is allowed to finish."""
        self._stop_event.set()

        if self.worker_thread and self.worker_thread is not threading.current_thread():
            self.worker_thread.join(timeout=timeout)

        self.running = False
        logger.info("✅ Scheduler stopped")

    def wait(self, timeout: float | None = None) -> bool:
        """Wait until the worker loop has finished. Returns True if it has."""
        return self._finished.wait(timeout)

    @property
    def failed(self) -> bool:
        return self.error is not None

    def _worker_loop(self) -> None:
        """Worker loop invoking the handler once per interval."""
        logger.debug("Scheduler worker loop started")

        try:
            while not self._stop_event.wait(self.interval):
                self.tick_count += 1
                try:
                    self.handler()
                except Exception as e:
                    logger.error(f"Tick {self.tick_count} failed: {e}")
                    self.error = e
                    break
        finally:
            self.running = False
            self._finished.set()

        logger.debug("Scheduler worker loop stopped")
