from __future__ import annotations
import ctypes
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar, overload

from .dynamic_array import DynamicArray

T = TypeVar("T")
U = TypeVar("U")

# Bytes used to store one slot index / one element reference.
INDEX_SIZE = ctypes.sizeof(ctypes.c_size_t)
DEFAULT_ITEM_SIZE = ctypes.sizeof(ctypes.py_object)

# Placeholder left in a slot once its element has been handed back.
_VACANT: Any = object()


class Slot(Generic[T]):
    """One cell of the backing array: an element plus the index of the next slot.

    ``item`` is freely writable. ``next`` is read-only from the outside; only
    the owning ``IndexedList`` relinks slots.
    """

    __slots__ = ("item", "_next")

    def __init__(self, item: T, next: Optional[int] = None) -> None:
        self.item = item
        self._next = next

    @property
    def next(self) -> Optional[int]:
        """Physical index of the following slot, or None at the tail."""
        return self._next

    def _take(self) -> T:
        item = self.item
        assert item is not _VACANT, "slot element already taken"
        self.item = _VACANT
        return item

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Slot({self.item!r}, next={self._next!r})"


class IndexedList(Generic[T]):
    """A singly-linked list whose nodes live in one contiguous slot array.

    Implementation notes
    --------------------
    • Links are slot indices into ``_slots``, not object references, so the
      whole list is a single growable arena.
    • Removed slots go on a free list and are overwritten by later pushes.
      The slot array never shrinks: ``true_len()`` is the high-water mark.
    • Only forward links exist. Positional access and ``delete`` walk from
      the head and cost O(index); there is no ``pop_back``.
    • Negative indices are normalized (like built-in list semantics).
    """

    __slots__ = ("_slots", "_head", "_tail", "_free", "_length", "_item_size")

    def __init__(
        self,
        it: Optional[Iterable[T]] = None,
        capacity: int = 0,
        item_size: Optional[int] = None,
    ) -> None:
        if item_size is not None and item_size < 0:
            raise ValueError("item_size must be >= 0")
        self._slots: DynamicArray[Slot[T]] = DynamicArray(capacity=capacity)
        self._head: Optional[int] = None
        self._tail: Optional[int] = None
        self._free: DynamicArray[int] = DynamicArray()
        self._length = 0
        # Bytes charged per element by mem_used(); one reference by default.
        self._item_size = DEFAULT_ITEM_SIZE if item_size is None else item_size

        if it is not None:
            for v in it:
                self.push_back(v)

    @classmethod
    def with_capacity(cls, capacity: int, item_size: Optional[int] = None) -> IndexedList[T]:
        """Return an empty list whose slot array has room for `capacity` slots."""
        return cls(capacity=capacity, item_size=item_size)

    # ------------------------------- internals -------------------------------

    def _accounting_ok(self) -> bool:
        """Every slot is live or free, and head/tail/length agree on emptiness."""
        return (
            len(self._slots) == self._length + len(self._free)
            and (self._head is None) == (self._tail is None) == (self._length == 0)
        )

    def _alloc(self, item: T, next: Optional[int]) -> int:
        """Store a new slot, reusing a freed one when available; return its index."""
        if self._free:
            idx = self._free.pop()
            slot = self._slots[idx]
            slot.item = item
            slot._next = next
            return idx
        self._slots.append(Slot(item, next))
        return len(self._slots) - 1

    def _release(self, idx: int) -> T:
        """Take the element out of slot `idx` and put the slot on the free list."""
        item = self._slots[idx]._take()
        self._free.append(idx)
        return item

    def _normalize_index(self, index: int) -> int:
        if index < 0:
            index += self._length
        if index < 0 or index >= self._length:
            raise IndexError("IndexedList index out of range")
        return index

    def _physical_index_of(self, index: int) -> int:
        """Walk `index` links from the head and return that slot's position.

        Raises IndexError if the chain ends early.
        """
        current = self._head
        for _ in range(index):
            if current is None:
                break
            current = self._slots[current]._next
        if current is None:
            raise IndexError("IndexedList index out of range")
        return current

    # --------------------------------- API -----------------------------------

    def __len__(self) -> int:
        """Number of live elements. O(1)."""
        assert self._accounting_ok(), "slot accounting out of sync"
        return self._length

    def true_len(self) -> int:
        """Size of the slot array, live plus free. Never decreases."""
        assert self._accounting_ok(), "slot accounting out of sync"
        return len(self._slots)

    def free_len(self) -> int:
        """Number of vacated slots waiting to be reused."""
        return len(self._free)

    def capacity(self) -> int:
        """Reserved slot-array capacity; always >= true_len()."""
        return self._slots.capacity()

    def mem_used(self) -> int:
        """Estimated bytes held by the slot array and free list, by length.

        (item_size + INDEX_SIZE) * true_len() + INDEX_SIZE * free_len()
        """
        return (self._item_size + INDEX_SIZE) * len(self._slots) + INDEX_SIZE * len(self._free)

    def true_mem_used(self) -> int:
        """Same estimate as mem_used(), but over reserved capacities."""
        return (
            (self._item_size + INDEX_SIZE) * self._slots.capacity()
            + INDEX_SIZE * self._free.capacity()
        )

    def push_front(self, item: T) -> None:
        """Insert `item` before the current head. Amortized O(1)."""
        idx = self._alloc(item, self._head)
        self._head = idx
        if self._tail is None:
            # first element
            self._tail = idx
        self._length += 1
        assert self._accounting_ok()

    def push_back(self, item: T) -> None:
        """Append `item` after the current tail. Amortized O(1)."""
        idx = self._alloc(item, None)
        if self._tail is None:
            self._head = idx
        else:
            self._slots[self._tail]._next = idx
        self._tail = idx
        self._length += 1
        assert self._accounting_ok()

    def pop_front(self) -> Optional[T]:
        """Remove and return the head element, or None if the list is empty."""
        if self._head is None:
            return None
        idx = self._head
        self._head = self._slots[idx]._next
        if self._head is None:
            self._tail = None
        self._length -= 1
        item = self._release(idx)
        assert self._accounting_ok()
        return item

    # pop_back is deliberately absent: with forward links only it would be
    # O(n). Use delete(-1) when that cost is acceptable.

    def head(self) -> Optional[Slot[T]]:
        """Slot at the front of the list, or None if empty."""
        return None if self._head is None else self._slots[self._head]

    def tail(self) -> Optional[Slot[T]]:
        """Slot at the back of the list, or None if empty."""
        return None if self._tail is None else self._slots[self._tail]

    def delete(self, index: int) -> T:
        """Remove and return the element at logical position `index`. O(index).

        Raises:
            IndexError: if `index` is out of range.
        """
        index = self._normalize_index(index)
        if index == 0:
            return self.pop_front()  # type: ignore[return-value]

        prev = self._physical_index_of(index - 1)
        prev_slot = self._slots[prev]
        removed = prev_slot._next
        if removed is None:
            raise IndexError("IndexedList index out of range")

        prev_slot._next = self._slots[removed]._next
        if removed == self._tail:
            self._tail = prev
        self._length -= 1
        item = self._release(removed)
        assert self._accounting_ok()
        return item

    def __getitem__(self, index: int) -> Slot[T]:
        """Return the live slot at logical position `index`. O(index)."""
        return self._slots[self._physical_index_of(self._normalize_index(index))]

    def __setitem__(self, index: int, value: T) -> None:
        """Replace the element at logical position `index`. O(index)."""
        self[index].item = value

    @overload
    def get(self, index: int) -> Optional[T]: ...
    @overload
    def get(self, index: int, default: U) -> T | U: ...

    def get(self, index: int, default: U | None = None) -> T | U | None:
        """Safe accessor: element at `index`, or `default` if out of range."""
        try:
            return self[index].item
        except IndexError:
            return default

    def __iter__(self) -> Iterator[T]:
        """Yield elements from head to tail."""
        current = self._head
        while current is not None:
            slot = self._slots[current]
            yield slot.item
            current = slot._next

    def to_list(self) -> List[T]:
        return list(self)

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._length != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"IndexedList({self.to_list()!r})"
