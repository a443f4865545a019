from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from langchain_core.documents import Document

from ..domain.item import IndexableItem


def _payload_text(payload: Any, text_key: str) -> str:
    if payload is None:
        return ""
    if isinstance(payload, str):
        return payload
    if isinstance(payload, Mapping):
        value = payload.get(text_key)
        if value is not None:
            return str(value)
    # Fall back to a stable serialization so nothing is indexed empty by accident
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, default=str)


def item_to_document(
    item: IndexableItem, *, text_key: str = "text", datasource_id: str | None = None
) -> Document:
    metadata: dict[str, Any] = {
        "item_id": item.item_id,
        "entity_id": item.entity_id,
        "langcode": item.language_code,
        "bundle": item.bundle,
    }
    if datasource_id:
        metadata["datasource"] = datasource_id
    return Document(page_content=_payload_text(item.payload, text_key), metadata=metadata)


def items_to_documents(
    items: Mapping[str, IndexableItem] | Iterable[IndexableItem],
    *,
    text_key: str = "text",
    datasource_id: str | None = None,
) -> list[Document]:
    """Convert loaded items into LangChain Documents for a downstream vector store."""
    values = items.values() if isinstance(items, Mapping) else items
    return [item_to_document(i, text_key=text_key, datasource_id=datasource_id) for i in values]
