from __future__ import annotations

from collections.abc import Collection, Mapping

import pytest

from content_datasource.application.use_cases.load_items import ContentEntityDatasource
from content_datasource.exceptions import ConfigurationError
from content_datasource.infra.stores.memory_store import InMemoryContentStore, InMemoryEntity


class LookupOnlyStore:
    """Store without id enumeration."""

    def fetch_multiple(self, entity_ids: Collection[str]) -> Mapping[str, InMemoryEntity]:
        return {}


def _store() -> InMemoryContentStore:
    return InMemoryContentStore(
        [
            InMemoryEntity("1", "item", {"en": "one", "de": "eins"}),
            InMemoryEntity("2", "article", {"en": "two"}),
            InMemoryEntity("3", "item", {"de": "drei"}),
        ]
    )


def test_item_ids_for_entity_respect_filter() -> None:
    datasource = ContentEntityDatasource(_store())
    assert datasource.get_item_ids_for_entity("1") == ["1:en", "1:de"]

    datasource.set_configuration({"languages": {"default": True, "selected": ["de"]}})
    assert datasource.get_item_ids_for_entity("1") == ["1:en"]
    assert datasource.get_item_ids_for_entity("404") == []


def test_partial_item_ids_all_pages() -> None:
    datasource = ContentEntityDatasource(_store())
    assert datasource.get_partial_item_ids() == ["1:en", "1:de", "2:en", "3:de"]


def test_partial_item_ids_paging() -> None:
    datasource = ContentEntityDatasource(_store())
    datasource.set_configuration({"bundles": {"default": False, "selected": ["item"]}})

    assert datasource.get_partial_item_ids(page=0, page_size=2) == ["1:en", "1:de"]
    assert datasource.get_partial_item_ids(page=1, page_size=2) == ["3:de"]
    assert datasource.get_partial_item_ids(page=2, page_size=2) is None


def test_partial_item_ids_on_empty_store() -> None:
    datasource = ContentEntityDatasource(InMemoryContentStore())
    assert datasource.get_partial_item_ids() == []
    assert datasource.get_partial_item_ids(page=0) is None


def test_partial_item_ids_requires_enumerable_store() -> None:
    datasource = ContentEntityDatasource(LookupOnlyStore())
    with pytest.raises(ConfigurationError):
        datasource.get_partial_item_ids()


def test_deleted_entity_drops_out() -> None:
    store = _store()
    datasource = ContentEntityDatasource(store)
    store.delete("1")
    assert datasource.load_multiple(["1:en", "2:en"]).keys() == {"2:en"}


def test_unusable_stored_ids_are_skipped_not_fatal() -> None:
    store = InMemoryContentStore(
        [
            InMemoryEntity("a:b", "item", {"en": "x"}),
            InMemoryEntity("2", "item", {"en": "y", "": "blank", "x:y": "odd"}),
        ]
    )
    datasource = ContentEntityDatasource(store)
    assert datasource.get_partial_item_ids() == ["2:en"]
    assert datasource.get_item_ids_for_entity("a:b") == []
    assert datasource.get_item_ids_for_entity("2") == ["2:en"]
