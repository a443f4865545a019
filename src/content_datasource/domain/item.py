from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .item_id import CompositeItemId


@dataclass(frozen=True)
class IndexableItem:
    """One entity translation ready for indexing.

    Built fresh by each load call; ``payload`` is whatever the content store
    returned for the translation and is not inspected here.
    """

    id: CompositeItemId
    bundle: str
    payload: Any

    @property
    def item_id(self) -> str:
        return str(self.id)

    @property
    def entity_id(self) -> str:
        return self.id.entity_id

    @property
    def language_code(self) -> str:
        return self.id.language_code
