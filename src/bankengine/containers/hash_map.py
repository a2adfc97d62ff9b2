# src/bankengine/containers/hash_map.py
"""
Fixed-capacity chained hash table keyed by unsigned 32-bit integers.

Each bucket is an :class:`OrderedList` of ``(key, value)`` entries. A second
OrderedList records live keys in insertion order; it is the canonical
iteration order and is independent of bucket layout.

Hash function
-------------
Knuth multiplicative hashing with 32-bit wraparound::

    h(k) = ((k * 2654435761) mod 2**32) mod bucket_capacity

No seeding, no resizing: the bucket count is fixed for the table's lifetime.

Duplicate keys
--------------
``insert`` overwrites the value of an existing key and leaves the length
and key order untouched.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

import numpy as np

from bankengine.containers.ordered_list import OrderedList, OrderedListView
from bankengine.errors import ConfigurationError, KeyNotFound
from bankengine.typing import KEY_MAX, AccountKey, Int1D

V = TypeVar("V")

KNUTH_MULTIPLIER = 2654435761
DEFAULT_BUCKET_CAPACITY = 65536
_U32_MASK = 0xFFFFFFFF

__all__ = ["HashMap", "DEFAULT_BUCKET_CAPACITY", "KNUTH_MULTIPLIER"]


@dataclass(slots=True)
class _Entry(Generic[V]):
    key: AccountKey
    value: V


class HashMap(Generic[V]):
    """
    Chained hash map from uint32 keys to arbitrary values.

    Parameters
    ----------
    bucket_capacity : int, default 65536
        Number of chains. Must be positive.

    Examples
    --------
    >>> table = HashMap(bucket_capacity=16)
    >>> table.insert(7, 100)
    >>> table.insert(3, 50)
    >>> table[7] += 1
    >>> list(table.keys()), table[7]
    ([7, 3], 101)
    """

    __slots__ = ("_bucket_capacity", "_buckets", "_keys", "_count")

    def __init__(self, bucket_capacity: int = DEFAULT_BUCKET_CAPACITY) -> None:
        if isinstance(bucket_capacity, bool) or not isinstance(bucket_capacity, int):
            raise ConfigurationError(
                f"bucket_capacity must be int, got {type(bucket_capacity).__name__}"
            )
        if bucket_capacity < 1:
            raise ConfigurationError(
                f"bucket_capacity must be >= 1, got {bucket_capacity}"
            )
        self._bucket_capacity = bucket_capacity
        # chains are created on first use
        self._buckets: list[OrderedList[_Entry[V]] | None] = [None] * bucket_capacity
        self._keys: OrderedList[AccountKey] = OrderedList()
        self._count = 0

    # ------------------------------------------------------------------
    # hashing
    # ------------------------------------------------------------------
    @property
    def bucket_capacity(self) -> int:
        return self._bucket_capacity

    def hash(self, key: AccountKey) -> int:
        """Bucket index of *key*."""
        return ((key * KNUTH_MULTIPLIER) & _U32_MASK) % self._bucket_capacity

    @staticmethod
    def _normalize(key: object) -> AccountKey | None:
        """Return *key* as a plain int, or None if it cannot be a uint32."""
        try:
            k = operator.index(key)  # type: ignore[arg-type]
        except TypeError:
            return None
        if 0 <= k <= KEY_MAX:
            return k
        return None

    def _locate(self, key: object) -> tuple[OrderedList[_Entry[V]] | None, int]:
        k = self._normalize(key)
        if k is None:
            return None, -1
        bucket = self._buckets[self.hash(k)]
        if bucket is None:
            return None, -1
        return bucket, bucket.find(lambda entry: entry.key == k)

    # ------------------------------------------------------------------
    # mutation
    # ------------------------------------------------------------------
    def insert(self, key: AccountKey, value: V) -> None:
        """
        Store *value* under *key*, overwriting any previous value.

        Raises
        ------
        ValueError
            If *key* is not an integer in ``[0, 2**32)``.
        """
        k = self._normalize(key)
        if k is None:
            raise ValueError(f"key must be an integer in [0, {KEY_MAX}], got {key!r}")

        h = self.hash(k)
        bucket = self._buckets[h]
        if bucket is None:
            bucket = OrderedList()
            self._buckets[h] = bucket

        index = bucket.find(lambda entry: entry.key == k)
        if index != -1:
            bucket[index].value = value
            return

        bucket.append(_Entry(k, value))
        self._keys.append(k)
        self._count += 1

    def remove(self, key: AccountKey) -> None:
        """
        Delete *key* and its value.

        Raises
        ------
        KeyNotFound
            If *key* is not stored.
        """
        bucket, index = self._locate(key)
        if bucket is None or index == -1:
            raise KeyNotFound(key)
        k = bucket[index].key
        bucket.remove_at(index)
        self._keys.remove_first(k)
        self._count -= 1

    def clear(self) -> None:
        """Erase all entries."""
        for bucket in self._buckets:
            if bucket is not None:
                bucket.clear()
        self._keys.clear()
        self._count = 0

    # ------------------------------------------------------------------
    # lookup
    # ------------------------------------------------------------------
    def get(self, key: AccountKey) -> V:
        """
        Value stored under *key*.

        Raises
        ------
        KeyNotFound
            If *key* is not stored.
        """
        bucket, index = self._locate(key)
        if bucket is None or index == -1:
            raise KeyNotFound(key)
        return bucket[index].value

    def contains(self, key: AccountKey) -> bool:
        bucket, index = self._locate(key)
        return bucket is not None and index != -1

    def keys(self) -> OrderedListView[AccountKey]:
        """Live keys in insertion order (read-only view)."""
        return OrderedListView(self._keys)

    def items(self) -> Iterator[tuple[AccountKey, V]]:
        """Yield ``(key, value)`` pairs in insertion order."""
        for key in self._keys:
            yield key, self.get(key)

    def length(self) -> int:
        return self._count

    def chain_lengths(self) -> Int1D:
        """Length of every chain, indexed by bucket."""
        return np.fromiter(
            (0 if bucket is None else len(bucket) for bucket in self._buckets),
            dtype=np.int64,
            count=self._bucket_capacity,
        )

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[AccountKey]:
        return iter(self._keys)

    def __getitem__(self, key: AccountKey) -> V:
        return self.get(key)

    def __setitem__(self, key: AccountKey, value: V) -> None:
        """Replace the value of an existing key; never inserts."""
        bucket, index = self._locate(key)
        if bucket is None or index == -1:
            raise KeyNotFound(key)
        bucket[index].value = value

    def __repr__(self) -> str:
        return (
            f"HashMap(length={self._count}, "
            f"bucket_capacity={self._bucket_capacity})"
        )
