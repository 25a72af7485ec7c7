"""
In-memory record store behind every CRUD page.

Records are dataclasses with an integer ``id``. The store keeps them in
insertion order and hands out fresh identifiers from a millisecond clock,
bumped when two records are created within the same millisecond.
"""

import time
from collections.abc import Iterable, Mapping
from dataclasses import fields, replace
from typing import Any, Generic, TypeVar

from dashboard.errors import DeletionNotConfirmed

R = TypeVar("R")


class RecordStore(Generic[R]):
    """Ordered in-memory collection with add / edit / remove."""

    def __init__(self, records: Iterable[R] = ()):
        self._records: list[R] = list(records)
        self._last_id = max((record.id for record in self._records), default=0)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(list(self._records))

    def all(self) -> list[R]:
        return list(self._records)

    def get(self, record_id: int) -> R | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def next_id(self) -> int:
        candidate = int(time.time() * 1000)
        self._last_id = max(candidate, self._last_id + 1)
        return self._last_id

    def add(self, record: R) -> R:
        """Store ``record`` under a new identifier and return the stored copy."""
        stored = replace(record, id=self.next_id())
        self._records.append(stored)
        return stored

    def edit(self, record_id: int, patch: Mapping[str, Any]) -> R | None:
        """
        Merge ``patch`` over the record with ``record_id``.

        Returns None when no such record exists. Unknown keys and ``id`` are
        ignored.
        """
        for index, record in enumerate(self._records):
            if record.id == record_id:
                allowed = {f.name for f in fields(record)} - {"id"}
                updated = replace(record, **{k: v for k, v in patch.items() if k in allowed})
                self._records[index] = updated
                return updated
        return None

    def remove(self, record_id: int, *, confirmed: bool) -> R | None:
        """Remove the record with ``record_id``. Requires ``confirmed=True``."""
        if not confirmed:
            raise DeletionNotConfirmed(record_id)
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return self._records.pop(index)
        return None
