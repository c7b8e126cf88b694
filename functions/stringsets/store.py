"""
In-memory string set store.

Holds the uploaded string sets and answers the aggregate queries over them.
Every operation runs under a single lock so that readers, including the
longest chain solver, always see a consistent snapshot.
"""

from __future__ import annotations

import logging
import threading
from collections import Counter
from dataclasses import dataclass, field
from statistics import median
from typing import Iterable, Optional, Protocol

logger = logging.getLogger(__name__)


class InvalidStringSetError(ValueError):
    """Raised when a string set would be empty or contain bad strings."""


class UnknownStringSetError(ValueError):
    """Raised when an operation refers to a string set id that does not exist."""


@dataclass(frozen=True)
class SetStatistics:
    count: int
    shortest_length: int
    longest_length: int
    average_length: float
    median_length: float

    @classmethod
    def from_strings(cls, strings: Iterable[str]) -> "SetStatistics":
        lengths = [len(s) for s in strings]
        return cls(
            count=len(lengths),
            shortest_length=min(lengths),
            longest_length=max(lengths),
            average_length=sum(lengths) / len(lengths),
            median_length=float(median(lengths)),
        )


@dataclass
class StringSetRecord:
    set_id: int
    strings: tuple[str, ...]
    statistics: SetStatistics = field(init=False)

    def __post_init__(self):
        self.statistics = SetStatistics.from_strings(self.strings)

    def as_dict(self) -> dict:
        return {"id": self.set_id, "strings": list(self.strings)}


class StringSetStore(Protocol):
    """Interface for string set storage."""

    def create(self, strings: Iterable[str]) -> int:
        ...

    def get(self, set_id: int) -> Optional[StringSetRecord]:
        ...

    def delete(self, set_id: int) -> Optional[StringSetRecord]:
        ...

    def all_current_sets(self) -> list[tuple[int, tuple[str, ...]]]:
        ...

    def create_intersection(self, first_id: int, second_id: int) -> int:
        ...

    def search(self, query: str) -> list[int]:
        ...

    def most_common(self) -> list[str]:
        ...

    def longest(self) -> list[str]:
        ...

    def exactly_in(self, count: int) -> list[str]:
        ...

    def statistics(self, set_id: int) -> Optional[SetStatistics]:
        ...


def _validate(strings: Iterable[str]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for s in strings:
        if not s:
            raise InvalidStringSetError("Empty strings not allowed")
        if s in seen:
            raise InvalidStringSetError(f"Duplicated string: {s}")
        seen[s] = None
    if not seen:
        raise InvalidStringSetError("Empty sets not allowed")
    return tuple(seen)


class InMemoryStringSetStore:
    """Thread-safe in-memory store keyed by ascending integer ids."""

    def __init__(self):
        self._lock = threading.RLock()
        self._sets: dict[int, StringSetRecord] = {}
        self._next_id = 1

    def create(self, strings: Iterable[str]) -> int:
        try:
            validated = _validate(strings)
        except InvalidStringSetError as exc:
            logger.warning("Rejected string set: %s", exc)
            raise
        with self._lock:
            set_id = self._next_id
            self._next_id += 1
            self._sets[set_id] = StringSetRecord(set_id=set_id, strings=validated)
        logger.info("Created string set %d with %d strings", set_id, len(validated))
        return set_id

    def get(self, set_id: int) -> Optional[StringSetRecord]:
        with self._lock:
            return self._sets.get(set_id)

    def delete(self, set_id: int) -> Optional[StringSetRecord]:
        with self._lock:
            record = self._sets.pop(set_id, None)
        if record:
            logger.info("Deleted string set %d", set_id)
        return record

    def all_current_sets(self) -> list[tuple[int, tuple[str, ...]]]:
        with self._lock:
            return [(set_id, record.strings) for set_id, record in self._sets.items()]

    def create_intersection(self, first_id: int, second_id: int) -> int:
        with self._lock:
            for set_id in (first_id, second_id):
                if set_id not in self._sets:
                    raise UnknownStringSetError(f"Unknown id: {set_id}")
            other = set(self._sets[second_id].strings)
            common = [s for s in self._sets[first_id].strings if s in other]
            return self.create(common)

    def search(self, query: str) -> list[int]:
        with self._lock:
            return [
                set_id
                for set_id, record in self._sets.items()
                if query in record.strings
            ]

    def _membership_counts(self) -> Counter:
        counts: Counter = Counter()
        for record in self._sets.values():
            counts.update(record.strings)
        return counts

    def most_common(self) -> list[str]:
        with self._lock:
            counts = self._membership_counts()
        if not counts:
            return []
        top = max(counts.values())
        return sorted(s for s, n in counts.items() if n == top)

    def longest(self) -> list[str]:
        with self._lock:
            strings = {s for record in self._sets.values() for s in record.strings}
        if not strings:
            return []
        max_length = max(len(s) for s in strings)
        return sorted(s for s in strings if len(s) == max_length)

    def exactly_in(self, count: int) -> list[str]:
        with self._lock:
            counts = self._membership_counts()
        return sorted(s for s, n in counts.items() if n == count)

    def statistics(self, set_id: int) -> Optional[SetStatistics]:
        record = self.get(set_id)
        return record.statistics if record else None

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        with self._lock:
            self._sets.clear()
            self._next_id = 1
