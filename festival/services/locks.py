"""Per-sport write locks."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List


class SportLocks:
    """Lazily created ``threading.Lock`` per sport id.

    ``hold`` takes several locks in sorted order so that writers touching
    more than one sport cannot deadlock each other.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: Dict[str, threading.Lock] = {}

    def lock_for(self, sport_id: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(sport_id)
            if lock is None:
                lock = self._locks[sport_id] = threading.Lock()
            return lock

    def __contains__(self, sport_id: object) -> bool:
        with self._guard:
            return sport_id in self._locks

    @contextmanager
    def hold(self, *sport_ids: str) -> Iterator[None]:
        acquired: List[threading.Lock] = []
        try:
            for sport_id in sorted(set(sport_ids)):
                lock = self.lock_for(sport_id)
                lock.acquire()
                acquired.append(lock)
            yield
        finally:
            for lock in reversed(acquired):
                lock.release()


sport_locks = SportLocks()


__all__ = ["SportLocks", "sport_locks"]
