# src/bankengine/containers/ordered_list.py
"""
Insertion-ordered doubly linked list backed by an index arena.

Nodes live in parallel storage addressed by stable integer slots:

- ``_values`` : Python list holding the payloads
- ``_prev`` / ``_next`` : ``int64`` NumPy arrays of neighbour slots,
  ``-1`` meaning "no neighbour"

Freed slots are pushed on a stack and reused by later appends, so a slot
never moves while its node is alive. The arena grows by doubling when
both the free stack and the unused tail are exhausted.

Complexity
----------
- append : O(1) amortized
- remove_at, __getitem__, __setitem__ : O(index)
- remove_first, contains, find : O(n)
- clear : O(n)
- length : O(1)
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

import numpy as np

from bankengine.errors import IndexOutOfRange, ValueNotFound
from bankengine.typing import Int1D

T = TypeVar("T")

_NIL = -1
_MIN_CAPACITY = 4

__all__ = ["OrderedList", "OrderedListView"]


class OrderedList(Generic[T]):
    """
    Mutable, insertion-ordered sequence with O(1) tail insertion.

    Parameters
    ----------
    capacity : int, optional
        Initial number of node slots. The arena doubles when full.

    Examples
    --------
    >>> lst = OrderedList()
    >>> lst.append("a")
    >>> lst.append("b")
    >>> lst.append("c")
    >>> lst.remove_at(1)
    >>> list(lst)
    ['a', 'c']
    """

    __slots__ = (
        "_values",
        "_prev",
        "_next",
        "_free",
        "_used",
        "_head",
        "_tail",
        "_count",
    )

    def __init__(self, capacity: int = _MIN_CAPACITY) -> None:
        capacity = max(int(capacity), _MIN_CAPACITY)
        self._values: list[T | None] = [None] * capacity
        self._prev: Int1D = np.full(capacity, _NIL, dtype=np.int64)
        self._next: Int1D = np.full(capacity, _NIL, dtype=np.int64)
        self._free: list[int] = []
        self._used = 0  # high-water mark of slots ever handed out
        self._head = _NIL
        self._tail = _NIL
        self._count = 0

    # ------------------------------------------------------------------
    # arena bookkeeping
    # ------------------------------------------------------------------
    @property
    def capacity(self) -> int:
        """Number of node slots currently allocated."""
        return self._prev.size

    def _ensure_capacity(self, extra: int) -> None:
        needed = self._used + extra
        if needed <= self.capacity:
            return
        new_cap = max(self.capacity * 2, needed, _MIN_CAPACITY)

        for name in ("_prev", "_next"):
            arr = getattr(self, name)
            new_arr = np.full(new_cap, _NIL, dtype=np.int64)
            new_arr[: arr.size] = arr
            setattr(self, name, new_arr)
        self._values.extend([None] * (new_cap - len(self._values)))

    def _acquire(self) -> int:
        if self._free:
            return self._free.pop()
        self._ensure_capacity(1)
        slot = self._used
        self._used += 1
        return slot

    def _release(self, slot: int) -> None:
        self._values[slot] = None
        self._prev[slot] = _NIL
        self._next[slot] = _NIL
        self._free.append(slot)

    def _slot_at(self, index: int) -> int:
        if index < 0 or index >= self._count:
            raise IndexOutOfRange(index, self._count)
        slot = self._head
        for _ in range(index):
            slot = int(self._next[slot])
        return slot

    def _unlink(self, slot: int) -> None:
        prev_slot = int(self._prev[slot])
        next_slot = int(self._next[slot])

        if prev_slot == _NIL and next_slot == _NIL:
            # sole element
            self._head = _NIL
            self._tail = _NIL
        elif next_slot == _NIL:
            # tail
            self._next[prev_slot] = _NIL
            self._tail = prev_slot
        elif prev_slot == _NIL:
            # head
            self._prev[next_slot] = _NIL
            self._head = next_slot
        else:
            # interior
            self._next[prev_slot] = next_slot
            self._prev[next_slot] = prev_slot

        self._release(slot)
        self._count -= 1

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------
    def append(self, value: T) -> None:
        """Insert *value* at the tail."""
        slot = self._acquire()
        self._values[slot] = value
        self._prev[slot] = self._tail
        self._next[slot] = _NIL
        if self._tail == _NIL:
            self._head = slot
        else:
            self._next[self._tail] = slot
        self._tail = slot
        self._count += 1

    def remove_at(self, index: int) -> None:
        """
        Remove the element at position *index*.

        Raises
        ------
        IndexOutOfRange
            If ``index`` is negative or ``index >= length()``.
        """
        self._unlink(self._slot_at(index))

    def remove_first(self, value: T) -> None:
        """
        Remove the first element equal to *value*, scanning from the head.

        Raises
        ------
        ValueNotFound
            If no element compares equal.
        """
        slot = self._head
        while slot != _NIL:
            if self._values[slot] == value:
                self._unlink(slot)
                return
            slot = int(self._next[slot])
        raise ValueNotFound(value)

    def clear(self) -> None:
        """Drop every element, keeping the allocated arena."""
        self._prev[: self._used] = _NIL
        self._next[: self._used] = _NIL
        for slot in range(self._used):
            self._values[slot] = None
        self._free.clear()
        self._used = 0
        self._head = _NIL
        self._tail = _NIL
        self._count = 0

    def contains(self, value: T) -> bool:
        """True if some element compares equal to *value*."""
        return any(item == value for item in self)

    def find(self, predicate: Callable[[T], bool]) -> int:
        """Index of the first element satisfying *predicate*, or ``-1``."""
        for index, item in enumerate(self):
            if predicate(item):
                return index
        return -1

    def length(self) -> int:
        """Number of live elements."""
        return self._count

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self._count

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        slot = self._head
        while slot != _NIL:
            yield self._values[slot]  # type: ignore[misc]
            slot = int(self._next[slot])

    def __getitem__(self, index: int) -> T:
        return self._values[self._slot_at(index)]  # type: ignore[return-value]

    def __setitem__(self, index: int, value: T) -> None:
        self._values[self._slot_at(index)] = value

    def __repr__(self) -> str:
        return f"OrderedList({list(self)!r})"


class OrderedListView(Generic[T]):
    """
    Read-only window onto an OrderedList.

    Reflects later changes of the underlying list but exposes no mutator.
    """

    __slots__ = ("_list",)

    def __init__(self, lst: OrderedList[T]) -> None:
        self._list = lst

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[T]:
        return iter(self._list)

    def __getitem__(self, index: int) -> T:
        return self._list[index]

    def __contains__(self, value: object) -> bool:
        return value in self._list

    def __repr__(self) -> str:
        return f"OrderedListView({list(self._list)!r})"
