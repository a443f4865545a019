from __future__ import annotations

from langchain_core.documents import Document

from content_datasource.domain.item import IndexableItem
from content_datasource.domain.item_id import CompositeItemId
from content_datasource.infra.documents import item_to_document, items_to_documents


def test_item_to_document_uses_text_key_and_metadata() -> None:
    item = IndexableItem(CompositeItemId("1", "en"), "article", {"text": "Hello", "title": "T"})
    doc = item_to_document(item, datasource_id="entity:node")
    assert isinstance(doc, Document)
    assert doc.page_content == "Hello"
    assert doc.metadata == {
        "item_id": "1:en",
        "entity_id": "1",
        "langcode": "en",
        "bundle": "article",
        "datasource": "entity:node",
    }


def test_string_and_fallback_payloads() -> None:
    plain = IndexableItem(CompositeItemId("1", "en"), "page", "just text")
    assert item_to_document(plain).page_content == "just text"

    other = IndexableItem(CompositeItemId("2", "en"), "page", {"body": "x"})
    assert item_to_document(other).page_content == '{"body": "x"}'
    assert item_to_document(other, text_key="body").page_content == "x"

    empty = IndexableItem(CompositeItemId("3", "en"), "page", None)
    assert item_to_document(empty).page_content == ""


def test_items_to_documents_accepts_mapping() -> None:
    items = {
        "1:en": IndexableItem(CompositeItemId("1", "en"), "page", "a"),
        "1:de": IndexableItem(CompositeItemId("1", "de"), "page", "b"),
    }
    docs = items_to_documents(items)
    assert [d.metadata["item_id"] for d in docs] == ["1:en", "1:de"]
    assert "datasource" not in docs[0].metadata
