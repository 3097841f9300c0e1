# This project was developed with assistance from AI tools.
"""In-memory cache of calculation results.

Entries live for the lifetime of the process: there is no eviction, deletion
or persistence. The Store goes from empty to populated and never back.

Concurrency:
    One lock guards the entry dict. IDs come from a separate counter that is
    advanced outside the lock, so two racing inserts always get distinct IDs
    but the one holding the higher ID may be stored first. ``list_all`` makes
    no ordering promise.
"""

import itertools
import logging
import threading

from ..schemas.mortgage import CacheEntry, Result

logger = logging.getLogger(__name__)


class Store:
    """Thread-safe map from integer ID to stored calculation result."""

    def __init__(self) -> None:
        self._entries: dict[int, CacheEntry] = {}
        self._lock = threading.Lock()
        # next() on itertools.count is atomic under the GIL.
        self._ids = itertools.count()

    def insert(self, result: Result) -> int:
        """Store ``result`` under a fresh ID and return the ID."""
        entry_id = next(self._ids)
        entry = CacheEntry(
            id=entry_id,
            params=result.params,
            program=result.program,
            aggregates=result.aggregates,
        )
        with self._lock:
            self._entries[entry_id] = entry
        logger.debug("Cached result id=%d", entry_id)
        return entry_id

    def list_all(self) -> list[CacheEntry]:
        """Return a snapshot of every entry, in no particular order."""
        with self._lock:
            return list(self._entries.values())

    def has_data(self) -> bool:
        with self._lock:
            return bool(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_store: Store | None = None
_store_lock = threading.Lock()


def get_store() -> Store:
    """Return the process-wide Store, creating it on first use."""
    global _store  # noqa: PLW0603
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = Store()
    return _store
