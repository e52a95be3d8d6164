"""
Fixed-interval ticker driving the game loop.

The ticker does not own a thread: the front-end loop calls run_pending()
between input polls, so ticks and key events share one execution context.
"""

import logging
from typing import Callable, Optional

import schedule

logger = logging.getLogger(__name__)


class Ticker:
    """Runs a callback every `interval_seconds` on a private schedule.Scheduler."""

    def __init__(self, interval_seconds: float, scheduler: Optional[schedule.Scheduler] = None):
        if interval_seconds <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_seconds}")
        self.interval_seconds = interval_seconds
        self.scheduler = scheduler or schedule.Scheduler()
        self._job: Optional[schedule.Job] = None

    @property
    def running(self) -> bool:
        return self._job is not None

    def start(self, callback: Callable[[], None]):
        """Schedule `callback`; starting an already running ticker is a no-op."""
        if self._job is not None:
            logger.debug("Ticker already running")
            return
        self._job = self.scheduler.every(self.interval_seconds).seconds.do(callback)
        logger.info(f"Ticker started ({self.interval_seconds * 1000:.0f} ms interval)")

    def stop(self):
        if self._job is None:
            return
        self.scheduler.cancel_job(self._job)
        self._job = None
        logger.info("Ticker stopped")

    def run_pending(self):
        self.scheduler.run_pending()

    def idle_seconds(self) -> Optional[float]:
        """Seconds until the next tick is due, or None when stopped."""
        if self._job is None:
            return None
        return self.scheduler.idle_seconds
