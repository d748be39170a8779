"""Process-wide values that are built once, on first use.

The database connection pool and the object store client are expensive to
create and safe to share between request threads, so each is wrapped in a
:class:`Lazy` owned by its module.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class Lazy(Generic[T]):
    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._value: object = _UNSET

    @property
    def initialized(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        # Single attribute read, so a concurrent reset() cannot hand out a half-cleared value.
        value = self._value
        if value is not _UNSET:
            return value  # type: ignore[return-value]
        with self._lock:
            if self._value is _UNSET:
                self._value = self._factory()
            return self._value  # type: ignore[return-value]

    def reset(self) -> None:
        with self._lock:
            self._value = _UNSET
