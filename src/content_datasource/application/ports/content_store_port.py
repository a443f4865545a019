from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from typing import Any, Protocol, runtime_checkable


class EntityHandle(Protocol):
    """A fetched entity with access to its translations."""

    entity_id: str

    def bundle(self) -> str:  # pragma: no cover - interface
        ...

    def translation(self, language_code: str) -> Any | None:  # pragma: no cover - interface
        ...

    def translation_languages(self) -> list[str]:  # pragma: no cover - interface
        ...


class ContentStorePort(Protocol):
    """Batched entity lookup.

    Ids that do not exist are simply absent from the returned mapping;
    connectivity or read failures are raised to the caller.
    """

    def fetch_multiple(
        self, entity_ids: Collection[str]
    ) -> Mapping[str, EntityHandle]:  # pragma: no cover - interface
        ...


@runtime_checkable
class EnumerableContentStorePort(ContentStorePort, Protocol):
    # Needed for tracking: listing every item id the store could provide
    def iter_entity_ids(self) -> Iterable[str]:  # pragma: no cover - interface
        ...
