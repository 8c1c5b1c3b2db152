"""A fixed-bucket hash table with a caller-supplied bucket function."""

from __future__ import annotations

from typing import Any, Callable, Hashable, List, Optional, Tuple

__all__ = ["HashError", "HashTable"]

HashFunc = Callable[[int, Any], int]


class HashError(Exception):
    """Raised on a duplicate key, a missing key, or a bad bucket index."""


class HashTable:
    """Chained hash table.

    ``hash_func(buckets, key)`` must return a bucket index in
    ``range(buckets)``. New entries go to the front of their bucket chain.
    """

    def __init__(self, buckets: int, hash_func: HashFunc) -> None:
        self._hash_func = hash_func
        self._buckets: List[List[Tuple[Hashable, Any]]] = [
            [] for _ in range(buckets)
        ]
        self._count = 0

    def _bucket(self, key: Any) -> List[Tuple[Hashable, Any]]:
        index = self._hash_func(len(self._buckets), key)
        if not 0 <= index < len(self._buckets):
            raise HashError("bad bucket lookup")
        return self._buckets[index]

    def _find(self, key: Any) -> Optional[int]:
        for position, (node_key, _) in enumerate(self._bucket(key)):
            if node_key == key:
                return position
        return None

    def lookup(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None if absent."""
        position = self._find(key)
        if position is None:
            return None
        return self._bucket(key)[position][1]

    def add(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``; the key must not already exist."""
        if self._find(key) is not None:
            raise HashError("duplicate hash key")
        self._bucket(key).insert(0, (key, value))
        self._count += 1

    def remove(self, key: Any) -> None:
        """Remove the entry for ``key``; the key must exist."""
        position = self._find(key)
        if position is None:
            raise HashError("hash node not found")
        del self._bucket(key)[position]
        self._count -= 1

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._count