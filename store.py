"""
ReconHub in-memory dataset store.
Ordered collection of query records, newest first, living for the process lifetime.
"""

import threading
from collections import deque
from typing import Deque, Iterable, Optional, Tuple

from models import QueryRecord


class DatasetStore:
    """Process-wide ordered collection of query records.

    Records sit newest-ingested first, followed by the seeded records in their
    seed order. The store also owns the sequential id counter; ingest is the
    only caller that should touch `allocate_id` or `insert_front`.

    The dev server handles requests on worker threads, so every read and write
    goes through `lock`. It is re-entrant so ingest can hold it across
    `allocate_id` + `insert_front`.
    """

    def __init__(self, records: Optional[Iterable[QueryRecord]] = None, next_id: Optional[int] = None):
        self.lock = threading.RLock()
        self._records: Deque[QueryRecord] = deque(records or ())
        self._next_id = int(next_id) if next_id is not None else len(self._records) + 1
        self._version = 0

    def __len__(self) -> int:
        with self.lock:
            return len(self._records)

    @property
    def next_id(self) -> int:
        with self.lock:
            return self._next_id

    @property
    def version(self) -> int:
        """Bumped on every insert; render caches key off this."""
        with self.lock:
            return self._version

    def allocate_id(self) -> int:
        with self.lock:
            n = self._next_id
            self._next_id += 1
            return n

    def insert_front(self, record: QueryRecord) -> None:
        with self.lock:
            self._records.appendleft(record)
            self._version += 1

    def all(self) -> Tuple[QueryRecord, ...]:
        with self.lock:
            return tuple(self._records)

    def versioned_all(self) -> Tuple[int, Tuple[QueryRecord, ...]]:
        """Snapshot plus the version it was taken at, read atomically."""
        with self.lock:
            return self._version, tuple(self._records)

    def to_dicts(self) -> list:
        return [r.to_dict() for r in self.all()]
