"""Root-scoped key/value store shared by every test in one session."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any


class RootStore:
    """Thread-safe store with compute-if-absent semantics.

    One instance lives for the whole test session. Values computed through
    :meth:`get_or_compute` are created at most once per key even when
    several threads ask for the same key concurrently.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._lock = threading.Lock()
        self._closed = False

    def get(self, key: str) -> Any:
        with self._lock:
            return self._values.get(key)

    def get_or_compute(self, key: str, factory: Callable[[str], Any]) -> Any:
        """Return the value stored under *key*, computing it on first access.

        *factory* is called with *key* while the store lock is held, so
        exactly one caller computes the value.
        """
        with self._lock:
            if self._closed:
                raise RuntimeError("RootStore is closed")
            if key not in self._values:
                self._values[key] = factory(key)
            return self._values[key]

    def close(self) -> None:
        """Discard every stored value. Further computation is rejected."""
        with self._lock:
            self._values.clear()
            self._closed = True

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._values
