"""The owned, name-sorted collection of boat records.

INVARIANT: After every insertion the records are sorted by
case-insensitive name. The sort is a full stable re-sort per insert;
at a capacity of 120 records that costs nothing worth optimizing.

Duplicate names are accepted. Lookups return the first match in
sorted order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marinactl.domain.errors import CapacityExceeded, NotFound
from marinactl.domain.names import name_sort_key, names_match

if TYPE_CHECKING:
    from collections.abc import Iterator

    from marinactl.domain.records import Record

DEFAULT_CAPACITY = 120


class Registry:
    """Ordered collection of records keyed by case-insensitive name."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = capacity
        self._records: list[Record] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._records) >= self._capacity

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(list(self._records))

    def insert(self, record: Record) -> None:
        """Add *record* and re-sort.

        Raises:
            CapacityExceeded: The registry is full. Nothing is changed.
        """
        if self.is_full:
            raise CapacityExceeded(self._capacity)
        self._records.append(record)
        self._records.sort(key=lambda r: name_sort_key(r.name))

    def find(self, name: str) -> Record | None:
        """Return the first record whose name matches *name*, ignoring case."""
        for record in self._records:
            if names_match(record.name, name):
                return record
        return None

    def remove(self, name: str) -> Record:
        """Remove and return the first record matching *name*.

        The remaining records keep their relative order.

        Raises:
            NotFound: No record matches. Nothing is changed.
        """
        for index, record in enumerate(self._records):
            if names_match(record.name, name):
                del self._records[index]
                return record
        raise NotFound(name)

    def list(self) -> list[Record]:
        """Records in current sort order (a copy; mutating it has no effect)."""
        return list(self._records)
