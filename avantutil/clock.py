"""Wall-clock snapshot taken on demand."""

from __future__ import annotations

import time

__all__ = ["Clock"]


class Clock:
    """Holds a wall-clock time that only changes when :meth:`update` is called.

    A fresh clock reads as the Unix epoch.
    """

    def __init__(self) -> None:
        self._nanoseconds = 0

    def update(self) -> None:
        """Take the current system time."""
        self._nanoseconds = time.time_ns()

    def milliseconds(self) -> int:
        """Milliseconds since the epoch at the last update."""
        return self._nanoseconds // 1_000_000

    def seconds(self) -> int:
        """Whole seconds since the epoch at the last update."""
        return self._nanoseconds // 1_000_000_000