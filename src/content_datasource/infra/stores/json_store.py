from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ...domain.item_id import SEPARATOR
from ...exceptions import ContentStoreError
from .memory_store import InMemoryContentStore, InMemoryEntity

log = logging.getLogger(__name__)


class JsonContentStore(InMemoryContentStore):
    """Content store loaded from a JSON fixture file.

    Expected layout::

        {"entities": [
            {"id": "1", "bundle": "article", "translations": {"en": {...}, "de": {...}}}
        ]}

    A top-level list of entity objects is accepted as well.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(self._read(self.path))
        log.info("loaded %d entities from %s", len(self), self.path)

    @staticmethod
    def _read(path: Path) -> list[InMemoryEntity]:
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ContentStoreError(f"cannot read content store {path}: {e}") from e

        rows: Any = data.get("entities") if isinstance(data, dict) else data
        if not isinstance(rows, list):
            raise ContentStoreError(f"{path}: expected a list of entities")

        out: list[InMemoryEntity] = []
        for i, row in enumerate(rows):
            if not isinstance(row, dict) or "id" not in row or "bundle" not in row:
                raise ContentStoreError(f"{path}: entity #{i} needs 'id' and 'bundle'")
            translations = row.get("translations") or {}
            if not isinstance(translations, dict):
                raise ContentStoreError(f"{path}: entity #{i} 'translations' must be an object")
            entity_id = str(row["id"])
            if not entity_id or SEPARATOR in entity_id:
                raise ContentStoreError(f"{path}: entity #{i} has unusable id {entity_id!r}")
            for code in translations:
                if not code or SEPARATOR in code:
                    raise ContentStoreError(
                        f"{path}: entity {entity_id!r} has unusable language code {code!r}"
                    )
            out.append(InMemoryEntity(entity_id, str(row["bundle"]), dict(translations)))
        return out
