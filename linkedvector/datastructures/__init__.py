from .dynamic_array import DynamicArray
from .indexed_list import IndexedList, Slot, INDEX_SIZE, DEFAULT_ITEM_SIZE

__all__ = [
    "DynamicArray",
    "IndexedList",
    "Slot",
    "INDEX_SIZE",
    "DEFAULT_ITEM_SIZE",
]
