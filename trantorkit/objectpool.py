"""A thread-safe pool of reusable objects."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class ObjectPool(Generic[T]):
    """Hands out objects made by a factory and takes them back for reuse."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._idle: list[T] = []
        self._lock = threading.Lock()

    @contextmanager
    def get_object(self) -> Iterator[T]:
        """Borrow an object; it returns to the pool when the block exits."""
        with self._lock:
            obj = self._idle.pop() if self._idle else None
        if obj is None:
            obj = self._factory()
        try:
            yield obj
        finally:
            with self._lock:
                self._idle.append(obj)

    def __len__(self) -> int:
        """Number of idle objects waiting in the pool."""
        with self._lock:
            return len(self._idle)