"""
Rest timer.

A cancellable countdown that fires a completion callback once. The
session engine never waits on time itself; the shell starts a timer when
a session enters rest and dispatches RestComplete when it fires.

Usage:
    timer = RestTimer(on_complete=lambda: session.dispatch(RestComplete()))
    timer.start(60)
    runner = RestTimerRunner(timer)
    runner.start()
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_TICK_SECONDS = 1.0


class RestTimer:
    """
    Countdown in whole ticks.

    tick() is driven externally (a RestTimerRunner or a test) so the
    timer itself has no notion of wall-clock time.
    """

    def __init__(self, on_complete: Optional[Callable[[], None]] = None):
        self._on_complete = on_complete
        self._remaining = 0
        self._running = False
        self._lock = threading.Lock()

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def running(self) -> bool:
        return self._running

    def start(self, duration: int) -> None:
        """Restart the countdown at the full duration."""
        with self._lock:
            self._remaining = max(0, int(duration))
            self._running = self._remaining > 0
        logger.debug(f"Rest timer started for {duration}s")

    def cancel(self) -> None:
        with self._lock:
            self._running = False
            self._remaining = 0

    def tick(self) -> bool:
        """
        Advance one tick.

        Returns:
            True when this tick finished the countdown
        """
        with self._lock:
            if not self._running:
                return False
            self._remaining -= 1
            if self._remaining > 0:
                return False
            self._remaining = 0
            self._running = False

        logger.debug("Rest timer finished")
        if self._on_complete is not None:
            self._on_complete()
        return True


class RestTimerRunner:
    """Drives RestTimer.tick() from a daemon thread at a fixed interval."""

    def __init__(self, timer: RestTimer, interval: float = DEFAULT_TICK_SECONDS):
        self._timer = timer
        self._interval = interval
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="rest-timer", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=self._interval * 2)
            self._thread = None

    def _run(self) -> None:
        while not self._stop.wait(self._interval):
            try:
                self._timer.tick()
            except Exception:
                logger.exception("Rest timer callback failed")
