from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class InMemoryEntity:
    entity_id: str
    bundle_name: str
    translations: dict[str, Any] = field(default_factory=dict)

    def bundle(self) -> str:
        return self.bundle_name

    def translation(self, language_code: str) -> Any | None:
        return self.translations.get(language_code)

    def translation_languages(self) -> list[str]:
        return list(self.translations)


class InMemoryContentStore:
    """Dict-backed content store; iteration follows insertion order."""

    def __init__(self, entities: Iterable[InMemoryEntity] = ()) -> None:
        self._entities: dict[str, InMemoryEntity] = {}
        # Number of batched reads served; lets callers verify batching
        self.fetch_count = 0
        for e in entities:
            self.add(e)

    def add(self, entity: InMemoryEntity) -> None:
        self._entities[str(entity.entity_id)] = entity

    def create(self, entity_id: str, bundle: str, translations: Mapping[str, Any]) -> InMemoryEntity:
        entity = InMemoryEntity(str(entity_id), bundle, dict(translations))
        self.add(entity)
        return entity

    def delete(self, entity_id: str) -> None:
        self._entities.pop(str(entity_id), None)

    def fetch_multiple(self, entity_ids: Collection[str]) -> dict[str, InMemoryEntity]:
        self.fetch_count += 1
        return {eid: self._entities[eid] for eid in entity_ids if eid in self._entities}

    def iter_entity_ids(self) -> Iterable[str]:
        return list(self._entities)

    def __len__(self) -> int:
        return len(self._entities)
