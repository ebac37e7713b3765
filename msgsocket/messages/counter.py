"""Process-wide message counter shared by every session."""

from __future__ import annotations

import threading


class MessageCounter:
    """Monotonic counter with an indivisible fetch-and-increment.

    One instance is owned by the application and handed to each session by
    reference. Values returned by ``next()`` are unique and strictly
    increasing across all callers, whichever thread they run on.
    """

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    def next(self) -> int:
        """Increment the counter and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        """Most recently issued value (0 before the first increment)."""
        with self._lock:
            return self._value


__all__ = ["MessageCounter"]
