"""Process-wide admission gate for outbound crawls.

One worker thread drains a FIFO of crawl tasks. Before a task runs the worker
waits until ``interval`` seconds have passed since the previous dispatch
*started*, so slow fetches do not stretch the spacing and fast ones do not
shrink it. At most one crawl is in flight at any time.
"""

from __future__ import annotations

import concurrent.futures
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from core.logging import configure_logger

from ..common.constants import CRAWL_INTERVAL_SECONDS

logger = configure_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class QueueState:
    last_dispatch_at: Optional[float]
    in_flight: int
    pending: int


class RateLimitedQueue:
    def __init__(
        self,
        *,
        interval: float = CRAWL_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.interval = interval
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._last_dispatch_at: Optional[float] = None
        self._in_flight = 0
        self._pending = 0
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix="crawl-queue",
        )

    def submit(self, task: Callable[[], T]) -> "concurrent.futures.Future[T]":
        """Append ``task`` to the FIFO and return a future for its result."""
        with self._lock:
            self._pending += 1
        return self._executor.submit(self._dispatch, task)

    def state(self) -> QueueState:
        with self._lock:
            return QueueState(
                last_dispatch_at=self._last_dispatch_at,
                in_flight=self._in_flight,
                pending=self._pending,
            )

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def _wait_for_slot(self) -> None:
        while True:
            with self._lock:
                last = self._last_dispatch_at
            if last is None:
                return
            remaining = last + self.interval - self._clock()
            if remaining <= 0:
                return
            self._sleep(remaining)

    def _dispatch(self, task: Callable[[], T]) -> T:
        self._wait_for_slot()
        with self._lock:
            self._last_dispatch_at = self._clock()
            self._pending -= 1
            self._in_flight += 1
            pending = self._pending
        logger.debug("[Queue] dispatching crawl, %s still waiting", pending)
        try:
            return task()
        finally:
            with self._lock:
                self._in_flight -= 1
