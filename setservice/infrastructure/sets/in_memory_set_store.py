"""
In-memory adapter for the SetStore port.

Holds the whole set in process memory behind a single lock.
Contents are lost on restart.
"""

import logging
import threading
from collections.abc import Iterable

from setservice.domain.sets.ports import SetStore

logger = logging.getLogger(__name__)


class InMemorySetStore(SetStore):
    """Lock-guarded set of strings shared by all requests.

    Mutations and snapshots are mutually exclusive, so concurrent
    requests can neither lose an update nor observe a torn read.
    """

    def __init__(self, initial: Iterable[str] = ()) -> None:
        self._values: set[str] = set(initial)
        self._lock = threading.Lock()

    def add_one(self, value: str) -> bool:
        with self._lock:
            if value in self._values:
                return False
            self._values.add(value)
        logger.debug("Added value to set (size=%d)", len(self))
        return True

    def add_many(self, values: Iterable[str]) -> None:
        incoming = list(values)
        with self._lock:
            self._values.update(incoming)
            size = len(self._values)
        logger.debug("Merged %d value(s) into set (size=%d)", len(incoming), size)

    def snapshot(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._values)

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __contains__(self, value: object) -> bool:
        with self._lock:
            return value in self._values
