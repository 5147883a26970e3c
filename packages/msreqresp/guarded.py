"""Lock-guarded holder for the diagnostic fields of otherwise immutable records.

Errors and responses keep their identity in frozen records and carry exactly
one mutable field each. That field lives in a ``GuardedValue`` so concurrent
writers resolve as last-writer-wins and readers never observe a torn value.
"""

from __future__ import annotations

import threading
from typing import Generic, TypeVar


T = TypeVar("T")


class GuardedValue(Generic[T]):
    """Single mutable reference protected by a ``threading.Lock``."""

    __slots__ = ("_lock", "_value")

    def __init__(self, value: T) -> None:
        self._lock = threading.Lock()
        self._value = value

    def get(self) -> T:
        """Return the current value."""
        with self._lock:
            return self._value

    def set(self, value: T) -> None:
        """Replace the current value."""
        with self._lock:
            self._value = value

    def __repr__(self) -> str:
        return f"GuardedValue({self.get()!r})"
