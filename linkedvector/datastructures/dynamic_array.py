from __future__ import annotations
import ctypes
import logging
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DynamicArray(Generic[T]):
    """A grow-only dynamic array with an explicit, reportable capacity.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list),
      so the reserved capacity is known exactly and can be reported.
    • Capacity grows geometrically (x2) when full and never shrinks; popped
      cells stay reserved for the next append.
    • A zero capacity allocates no buffer at all.
    • Negative indices are normalized (like built-in list semantics).
    """

    __slots__ = ("_buf", "_size", "_capacity")

    # First allocation size when growing from an empty buffer.
    _INITIAL_CAPACITY = 4

    def __init__(self, it: Optional[Iterable[T]] = None, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self._capacity = capacity
        self._buf = self._make_array(capacity)
        self._size = 0

        if it is not None:
            for v in it:
                self.append(v)

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity`, or None for 0."""
        if capacity == 0:
            return None
        return (capacity * ctypes.py_object)()

    def _resize(self, new_capacity: int) -> None:
        """Move live items into a buffer of `new_capacity` cells (≥ size)."""
        if new_capacity < self._size:
            raise ValueError("new capacity must be >= size")

        new_buf = self._make_array(new_capacity)
        for i in range(self._size):
            new_buf[i] = self._buf[i]

        logger.debug("DynamicArray grew from %d to %d cells", self._capacity, new_capacity)
        self._buf = new_buf
        self._capacity = new_capacity

    def _grow_if_full(self) -> None:
        """Double capacity when the buffer is full (amortized O(1) append)."""
        if self._size >= self._capacity:
            self._resize(self._capacity * 2 if self._capacity > 0 else self._INITIAL_CAPACITY)

    @staticmethod
    def _normalize_index(idx: int, size: int) -> int:
        if idx < 0:
            idx += size
        if idx < 0 or idx >= size:
            raise IndexError("DynamicArray index out of range")
        return idx

    # --------------------------------- API -----------------------------------

    def capacity(self) -> int:
        """Number of reserved cells. O(1)."""
        return self._capacity

    def reserve(self, additional: int) -> None:
        """Make room for at least `additional` more items without regrowing."""
        if additional < 0:
            raise ValueError("additional must be >= 0")
        needed = self._size + additional
        if needed > self._capacity:
            self._resize(needed)

    def append(self, value: T) -> None:
        """Append `value` to the end. Amortized O(1)."""
        self._grow_if_full()
        self._buf[self._size] = value
        self._size += 1

    def pop(self) -> T:
        """Remove and return the last item. O(1); capacity is kept.

        Raises:
            IndexError: if the array is empty.
        """
        if self._size == 0:
            raise IndexError("pop from empty DynamicArray")
        self._size -= 1
        val = self._buf[self._size]
        # Drop the reference so the popped object can be collected.
        self._buf[self._size] = None
        return val  # type: ignore[return-value]

    def clear(self) -> None:
        """Remove all items. Keeps capacity."""
        for i in range(self._size):
            self._buf[i] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._buf[i]  # type: ignore[misc]

    def __getitem__(self, idx: int) -> T:
        i = self._normalize_index(idx, self._size)
        return self._buf[i]  # type: ignore[return-value]

    def __setitem__(self, idx: int, value: T) -> None:
        i = self._normalize_index(idx, self._size)
        self._buf[i] = value

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"DynamicArray({list(self)!r}, capacity={self._capacity})"
