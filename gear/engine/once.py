"""Compute-once cells for cached derived state."""
from __future__ import annotations

from threading import Lock
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class Once(Generic[T]):
    """Holds a value produced by ``factory`` on first access.

    The factory runs at most once, even with concurrent readers, and every
    call to :meth:`get` returns the same published object.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory: Optional[Callable[[], T]] = factory
        self._value: Optional[T] = None
        self._ready = False
        self._lock = Lock()

    def get(self) -> T:
        if self._ready:
            return self._value  # type: ignore[return-value]
        with self._lock:
            if not self._ready:
                self._value = self._factory()  # type: ignore[misc]
                self._ready = True
                self._factory = None
        return self._value  # type: ignore[return-value]


__all__ = ["Once"]
