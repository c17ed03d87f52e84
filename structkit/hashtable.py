"""Hash table with separate chaining and user-supplied hash and equality."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

HashFunc = Callable[[Any], int]
IsEqual = Callable[[Any, Any], Any]
Action = Callable[[Any, Any], Any]


class HashTable:
    """A fixed number of buckets, each a chain of stored values."""

    def __init__(self, hash_func: HashFunc, is_equal: IsEqual, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._hash = hash_func
        self._is_equal = is_equal
        self._buckets: list[list[Any]] = [[] for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        return len(self._buckets)

    def _bucket(self, value: Any) -> list[Any]:
        return self._buckets[self._hash(value) % len(self._buckets)]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[Any]:
        for bucket in self._buckets:
            yield from bucket

    def is_empty(self) -> bool:
        return not any(self._buckets)

    def insert(self, value: Any) -> None:
        self._bucket(value).append(value)

    def remove(self, value: Any) -> bool:
        """Remove the first stored value equal to ``value``; tell if one was found."""
        bucket = self._bucket(value)
        for index, item in enumerate(bucket):
            if self._is_equal(item, value):
                del bucket[index]
                return True
        return False

    def find(self, value: Any) -> Optional[Any]:
        """Return the stored value equal to ``value``, or None."""
        return next(
            (item for item in self._bucket(value) if self._is_equal(item, value)),
            None,
        )

    def for_each(self, action: Action, param: Any) -> int:
        """Apply ``action`` to every value; count calls that returned 0."""
        return sum(1 for item in self if action(item, param) == 0)