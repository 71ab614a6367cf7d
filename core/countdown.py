"""Cancellable countdown for timed typing attempts."""

import logging
import threading
import time
from queue import Queue
from typing import Callable, Optional

from core.key_events import TimerExpired

log = logging.getLogger("typetrainer.countdown")


class Countdown:
    """Single-shot deadline that wakes the engine through its event queue.

    When the deadline passes a TimerExpired sentinel is put on the queue the
    engine is blocked on, so waiting for a key and waiting for the deadline
    are the same wait. Each arm() starts a new generation; sentinels from
    earlier generations are stale and must be ignored.
    """

    def __init__(self, event_queue: Queue,
                 duration_ns: Optional[int],
                 clock: Callable[[], int] = time.monotonic_ns):
        """Initialize countdown.

        Args:
            event_queue: Queue the engine reads key events from
            duration_ns: Time limit in nanoseconds, or None for unlimited
            clock: Monotonic nanosecond clock
        """
        self.event_queue = event_queue
        self.duration_ns = duration_ns
        self.clock = clock
        self.generation = 0
        self.deadline_ns: Optional[int] = None
        self._fired = threading.Event()
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    @property
    def armed(self) -> bool:
        return self.deadline_ns is not None

    def arm(self) -> None:
        """Start counting down from now. No-op for an unlimited countdown."""
        if self.duration_ns is None:
            return

        with self._lock:
            self._cancel_timer()
            self.generation += 1
            self._fired = threading.Event()
            self.deadline_ns = self.clock() + self.duration_ns
            self._timer = threading.Timer(
                self.duration_ns / 1e9, self._expire, args=(self.generation,)
            )
            self._timer.daemon = True
            self._timer.start()

        log.debug(f"Countdown armed for {self.duration_ns / 1e9:.1f}s (generation {self.generation})")

    def fire(self) -> None:
        """Expire the countdown now. Safe to call more than once."""
        self._expire(self.generation)

    def cancel(self) -> None:
        """Disarm the countdown. Safe to call more than once."""
        with self._lock:
            self._cancel_timer()
            self.deadline_ns = None
            self.generation += 1

    def expired(self) -> bool:
        """Check whether the current generation's deadline has passed."""
        if self.deadline_ns is None:
            return False
        return self._fired.is_set() or self.clock() >= self.deadline_ns

    def is_current(self, sentinel: TimerExpired) -> bool:
        return self.armed and sentinel.generation == self.generation

    def remaining_ns(self) -> Optional[int]:
        if self.deadline_ns is None:
            return None
        return max(0, self.deadline_ns - self.clock())

    def _expire(self, generation: int) -> None:
        with self._lock:
            if generation != self.generation or self.deadline_ns is None:
                return
            if self._fired.is_set():
                return
            self._fired.set()

        log.info("Time limit reached")
        self.event_queue.put(TimerExpired(generation))

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
