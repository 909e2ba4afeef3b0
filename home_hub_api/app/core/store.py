"""
In‑memory record store.

The store holds one ordered ``Collection`` per entity kind (users,
contacts, newsletter subscriptions, cost estimates).  Records are
plain dictionaries; the store assigns each one an integer ``id`` from
a per‑kind counter that starts at 1 and is never reused, and stamps a
timezone‑aware UTC creation timestamp.

Nothing is persisted: a ``RecordStore`` lives as long as the
application object it is attached to (``app.state.store``).  Tests
construct a fresh store per case.

Each collection owns a re‑entrant lock.  Services that need a
check‑then‑create sequence (unique e‑mail, unique username) hold
``collection.locked()`` around both steps so the uniqueness
invariants survive handlers running on worker threads.
"""

from __future__ import annotations

import copy
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterator, List, Optional

Record = Dict[str, Any]
Clock = Callable[[], datetime]

USERS = "users"
CONTACTS = "contacts"
NEWSLETTERS = "newsletters"
ESTIMATES = "estimates"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Collection:
    """Ordered sequence of records of a single entity kind."""

    def __init__(self, kind: str, timestamp_field: str = "created_at", clock: Clock = utcnow) -> None:
        self.kind = kind
        self.timestamp_field = timestamp_field
        self._clock = clock
        self._records: List[Record] = []
        self._next_id = 1
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator["Collection"]:
        """Hold the collection lock for a multi‑step operation."""
        with self._lock:
            yield self

    def create(self, **fields: Any) -> Record:
        """Append a new record and return a copy of it.

        ``id`` and the timestamp field are assigned here; values passed
        under those names are overwritten.
        """
        with self._lock:
            record = dict(fields)
            record["id"] = self._next_id
            record[self.timestamp_field] = self._clock()
            self._next_id += 1
            self._records.append(record)
            return copy.deepcopy(record)

    def list(self) -> List[Record]:
        """Return copies of all records, oldest first."""
        with self._lock:
            return copy.deepcopy(self._records)

    def find_by(self, predicate: Callable[[Record], bool]) -> Optional[Record]:
        """Return a copy of the first record matching ``predicate``."""
        with self._lock:
            for record in self._records:
                if predicate(record):
                    return copy.deepcopy(record)
            return None

    def delete_by_id(self, record_id: int) -> bool:
        """Remove the record with ``record_id``.

        Returns ``True`` if a record was removed, ``False`` otherwise.
        """
        with self._lock:
            for index, record in enumerate(self._records):
                if record["id"] == record_id:
                    del self._records[index]
                    return True
            return False

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def reset(self) -> None:
        """Drop every record and restart the id counter at 1."""
        with self._lock:
            self._records.clear()
            self._next_id = 1


class RecordStore:
    """Container of the four entity collections."""

    def __init__(self, clock: Clock = utcnow) -> None:
        self.clock = clock
        self._collections: Dict[str, Collection] = {
            USERS: Collection(USERS, clock=clock),
            CONTACTS: Collection(CONTACTS, clock=clock),
            NEWSLETTERS: Collection(NEWSLETTERS, timestamp_field="subscribed_at", clock=clock),
            ESTIMATES: Collection(ESTIMATES, clock=clock),
        }

    def collection(self, kind: str) -> Collection:
        try:
            return self._collections[kind]
        except KeyError:
            raise KeyError(f"Unknown entity kind: {kind}") from None

    @property
    def users(self) -> Collection:
        return self._collections[USERS]

    @property
    def contacts(self) -> Collection:
        return self._collections[CONTACTS]

    @property
    def newsletters(self) -> Collection:
        return self._collections[NEWSLETTERS]

    @property
    def estimates(self) -> Collection:
        return self._collections[ESTIMATES]

    def create(self, kind: str, fields: Dict[str, Any]) -> Record:
        return self.collection(kind).create(**fields)

    def list(self, kind: str) -> List[Record]:
        return self.collection(kind).list()

    def find_by(self, kind: str, predicate: Callable[[Record], bool]) -> Optional[Record]:
        return self.collection(kind).find_by(predicate)

    def delete_by_id(self, kind: str, record_id: int) -> bool:
        return self.collection(kind).delete_by_id(record_id)

    def counts(self) -> Dict[str, int]:
        """Return the number of records per entity kind."""
        return {kind: coll.count() for kind, coll in self._collections.items()}

    def reset(self) -> None:
        for coll in self._collections.values():
            coll.reset()
