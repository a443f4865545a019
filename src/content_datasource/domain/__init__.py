"""Domain layer: pure types and logic (no I/O, no external libs).

Composite item ids, the bundle/language filter and the indexable item value.
"""

from .filtering import BundleLanguageFilter, SelectionMode
from .item import IndexableItem
from .item_id import (
    CompositeItemId,
    combine_id,
    decode,
    encode,
    split_combined_id,
)

__all__ = [
    "BundleLanguageFilter",
    "SelectionMode",
    "IndexableItem",
    "CompositeItemId",
    "encode",
    "decode",
    "combine_id",
    "split_combined_id",
]
