"""Generic containers used by the bank: chained hash map and ordered list."""

from bankengine.containers.hash_map import (
    DEFAULT_BUCKET_CAPACITY,
    KNUTH_MULTIPLIER,
    HashMap,
)
from bankengine.containers.ordered_list import OrderedList, OrderedListView

__all__ = [
    "DEFAULT_BUCKET_CAPACITY",
    "KNUTH_MULTIPLIER",
    "HashMap",
    "OrderedList",
    "OrderedListView",
]
