from __future__ import annotations

import threading
import weakref
from collections.abc import Iterator
from contextlib import contextmanager


class LocationLocks:
    """Registry of one lock per location identifier.

    Holding a location's lock across the density check and the insert makes
    the warehouse-count ceiling exact within one process. Multiple processes
    writing to the same database still need a store-level constraint.

    Entries are weakly referenced: a lock leaves the registry as soon as no
    caller holds or waits on it, so arbitrary identifiers never accumulate.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: weakref.WeakValueDictionary[str, threading.Lock] = (
            weakref.WeakValueDictionary()
        )

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    def _lock_for(self, identifier: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(identifier)
            if lock is None:
                lock = threading.Lock()
                self._locks[identifier] = lock
            return lock

    @contextmanager
    def hold(self, identifier: str) -> Iterator[None]:
        lock = self._lock_for(identifier)
        with lock:
            yield
