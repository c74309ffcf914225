"""Periodic sweep of expired short URLs for long-running processes.

Lambda deployments schedule `clickshortener.lambdas.cleanup_expired` with an
EventBridge rule instead.

Classes:
    CleanupScheduler:
        Run ShortenerService.cleanup_expired() once at start and then on a
        fixed interval, never overlapping with itself.

Example:
    >>> scheduler = CleanupScheduler(service)
    >>> scheduler.start()
    >>> ...
    >>> scheduler.stop()
"""

import logging
import threading

from clickshortener.constants import Cleanup, LogCategory
from clickshortener.services.shortener import ShortenerService


logger = logging.getLogger(__name__)


class CleanupScheduler:
    """Recurring single-flight cleanup timer

    Attributes:
        service (ShortenerService):
            Service whose cleanup_expired() is invoked.
        interval (float):
            Seconds between two ticks. Defaults to 300.
    """

    def __init__(self, service: ShortenerService, interval: float = Cleanup.INTERVAL_SECONDS):
        if interval <= 0:
            raise ValueError(f'Interval must be positive (given value: {interval}).')

        self.service = service
        self.interval = interval
        self._lock = threading.Lock()
        self._timer_lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._stopped = threading.Event()

    @property
    def running(self) -> bool:
        return self._timer is not None and not self._stopped.is_set()

    def run_once(self) -> bool:
        """Run one cleanup unless another one is still in flight

        Returns:
            bool: True if cleanup ran, False if the tick was skipped.
        """
        if not self._lock.acquire(blocking=False):
            logger.warning('Skipped cleanup tick: previous cleanup still running.', extra={'category': LogCategory.CLEANUP})
            return False

        try:
            self.service.cleanup_expired()
        finally:
            self._lock.release()
        return True

    def start(self) -> None:
        """Clean up immediately, then every `interval` seconds until stop()."""
        if self.running:
            return

        self._stopped.clear()
        logger.info('Starting expired URL cleanup every %s seconds.', self.interval, extra={'category': LogCategory.CLEANUP})
        self.run_once()
        self._schedule()

    def stop(self) -> None:
        with self._timer_lock:
            self._stopped.set()
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        logger.info('Stopped expired URL cleanup.', extra={'category': LogCategory.CLEANUP})

    def _schedule(self) -> None:
        # stop() holds the same lock
        with self._timer_lock:
            if self._stopped.is_set():
                return
            self._timer = threading.Timer(self.interval, self._tick)
            self._timer.daemon = True
            self._timer.start()

    def _tick(self) -> None:
        if self._stopped.is_set():
            return
        try:
            self.run_once()
        finally:
            self._schedule()
