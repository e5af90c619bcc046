"""
schedulers used by delay(). a scheduler runs a callable no earlier than a given
number of milliseconds from now. the threading scheduler is the default; the manual
scheduler keeps a virtual clock so tests can fast-forward deterministically.
"""
import heapq
import itertools
import logging
import threading
from typing import Any, Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)


def _check_wait(wait_ms: float) -> float:
    if wait_ms < 0:
        raise ValueError(f"wait must be non-negative, got {wait_ms}")
    return wait_ms


class ThreadingScheduler:
    """runs each task on its own daemon timer thread"""

    def __init__(self):
        self._pending = 0
        self._idle = threading.Condition()

    def schedule(self, wait_ms: float, fn: Callable[..., Any], *args: Any) -> None:
        timer = threading.Timer(_check_wait(wait_ms) / 1000.0, self._fire, args=(fn, args))
        timer.daemon = True
        with self._idle:
            self._pending += 1
        logger.debug(f"scheduled {getattr(fn, '__name__', fn)!r} in {wait_ms}ms")
        timer.start()

    def _fire(self, fn: Callable[..., Any], args: Tuple[Any, ...]) -> None:
        try:
            fn(*args)
        except Exception:
            # a timer thread has no caller to propagate to
            logger.error(f"delayed call to {getattr(fn, '__name__', fn)!r} failed", exc_info=True)
        finally:
            with self._idle:
                self._pending -= 1
                self._idle.notify_all()

    def pending(self) -> int:
        with self._idle:
            return self._pending

    def wait_idle(self, timeout: Optional[float] = None) -> bool:
        """block until every scheduled task has run. returns false on timeout"""
        with self._idle:
            return self._idle.wait_for(lambda: self._pending == 0, timeout)


class ManualScheduler:
    """
    virtual-clock scheduler. nothing runs until the clock is advanced; tasks then run
    synchronously on the caller's thread, ordered by deadline and, for equal
    deadlines, by submission order. exceptions propagate to the caller of advance().
    """

    def __init__(self, start_ms: float = 0.0):
        self.now = start_ms
        self._queue: List[Tuple[float, int, Callable[..., Any], Tuple[Any, ...]]] = []
        self._counter = itertools.count()

    def schedule(self, wait_ms: float, fn: Callable[..., Any], *args: Any) -> None:
        deadline = self.now + _check_wait(wait_ms)
        heapq.heappush(self._queue, (deadline, next(self._counter), fn, args))

    def advance(self, ms: float) -> int:
        """move the clock forward by ms, running every task that falls due. returns the number run"""
        if ms < 0:
            raise ValueError(f"cannot move the clock backwards by {ms}ms")
        target = self.now + ms
        fired = 0
        # tasks scheduled by a running task are picked up if they fall due before target
        while self._queue and self._queue[0][0] <= target:
            deadline, _, fn, args = heapq.heappop(self._queue)
            self.now = deadline
            fn(*args)
            fired += 1
        self.now = target
        return fired

    def run_all(self) -> int:
        """advance until nothing is pending"""
        fired = 0
        while self._queue:
            fired += self.advance(self._queue[0][0] - self.now)
        return fired

    def pending(self) -> int:
        return len(self._queue)
