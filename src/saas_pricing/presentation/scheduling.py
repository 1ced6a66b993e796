"""
Debounced recalculation policy.

Fires at most once per quiet interval after the last input change. Time comes
from an injectable monotonic clock; callers poll instead of holding a timer
thread.
"""
import time
from typing import Callable, Optional


class Debouncer:
    """Deadline-based debounce: every touch() pushes the deadline back."""

    def __init__(self, interval: float = 0.5, clock: Optional[Callable[[], float]] = None):
        self.interval = interval
        self.clock = clock or time.monotonic
        self.deadline: Optional[float] = None

    @property
    def pending(self) -> bool:
        return self.deadline is not None

    def touch(self) -> None:
        """Record a change; fire one interval after the latest change."""
        self.deadline = self.clock() + self.interval

    def schedule(self, delay: float) -> None:
        """Arm a one-off deadline ``delay`` seconds from now."""
        self.deadline = self.clock() + delay

    def cancel(self) -> None:
        self.deadline = None

    def poll(self) -> bool:
        """True exactly once when the deadline has passed."""
        if self.deadline is None or self.clock() < self.deadline:
            return False
        self.deadline = None
        return True
