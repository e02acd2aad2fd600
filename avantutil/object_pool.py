"""Thread-safe pool of pre-built objects."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

__all__ = ["ObjectPool"]

T = TypeVar("T")


class ObjectPool(Generic[T]):
    """Holds *size* objects built by *factory* and hands them out one at a time.

    With *block* set, :meth:`allocate` waits for an object to be released
    when none is free; otherwise it returns None.
    """

    def __init__(self, factory: Callable[[], T], size: int, block: bool = True) -> None:
        if size < 0:
            raise ValueError("pool size must not be negative")
        self._condition = threading.Condition()
        self._free: dict[int, T] = {}
        for _ in range(size):
            obj = factory()
            self._free[id(obj)] = obj
        self._objects = list(self._free.values())
        self._block = block

    def allocate(self) -> T | None:
        """Take a free object, waiting for one if the pool blocks."""
        with self._condition:
            if self._block:
                self._condition.wait_for(lambda: bool(self._free))
            elif not self._free:
                return None
            return self._free.popitem()[1]

    def release(self, obj: T | None) -> None:
        """Return an object to the pool; None is ignored."""
        if obj is None:
            return
        with self._condition:
            self._free[id(obj)] = obj
            self._condition.notify_all()

    def space(self) -> int:
        """Number of objects currently free."""
        with self._condition:
            return len(self._free)

    @contextmanager
    def borrowed(self) -> Iterator[T | None]:
        """Allocate an object for the duration of a with block, then release it."""
        obj = self.allocate()
        try:
            yield obj
        finally:
            self.release(obj)