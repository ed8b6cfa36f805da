"""Array-backed singly-linked list with slot recycling."""

from .datastructures import DynamicArray, IndexedList, Slot

__all__ = [
    "DynamicArray",
    "IndexedList",
    "Slot",
]
