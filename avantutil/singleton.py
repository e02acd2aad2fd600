"""Lazily created, per-class shared instance."""

from __future__ import annotations

from typing import Any, ClassVar

__all__ = ["Singleton"]


class Singleton:
    """Base class giving each subclass one shared, lazily built instance."""

    _instances: ClassVar[dict[type, Any]] = {}

    @classmethod
    def instance(cls, *args: Any, **kwargs: Any) -> Any:
        """Return the shared instance, building it from the arguments if absent.

        Arguments are ignored once the instance exists.
        """
        existing = Singleton._instances.get(cls)
        if existing is None:
            existing = cls(*args, **kwargs)
            Singleton._instances[cls] = existing
        return existing

    @classmethod
    def get_instance(cls) -> Any:
        """Return the shared instance, or None if none has been built."""
        return Singleton._instances.get(cls)

    @classmethod
    def destroy_instance(cls) -> None:
        """Drop the shared instance so the next call builds a new one."""
        Singleton._instances.pop(cls, None)