from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import ValidationError

from ...config import DatasourceConfig
from ...domain.filtering import BundleLanguageFilter
from ...domain.item import IndexableItem
from ...domain.item_id import CompositeItemId, decode, encode
from ...exceptions import ConfigurationError, MalformedIdError
from ..ports.config_source_port import ConfigSourcePort
from ..ports.content_store_port import ContentStorePort, EnumerableContentStorePort

log = logging.getLogger(__name__)


class ContentEntityDatasource:
    """Resolves composite item ids to indexable entity translations.

    The content store and (optional) configuration source are injected. The
    only state kept between calls is the current configuration and the filter
    built from it; both are swapped together in a single assignment.
    """

    def __init__(
        self,
        store: ContentStorePort,
        config_source: ConfigSourcePort | None = None,
        *,
        entity_type: str = "entity",
    ) -> None:
        self.store = store
        self.config_source = config_source
        self.entity_type = entity_type
        self._state: tuple[DatasourceConfig, BundleLanguageFilter] = (
            DatasourceConfig(),
            BundleLanguageFilter.allow_all(),
        )
        if config_source is not None:
            self.reload_configuration()

    # --- Configuration ---
    @property
    def datasource_id(self) -> str:
        return f"entity:{self.entity_type}"

    @property
    def configuration(self) -> DatasourceConfig:
        return self._state[0]

    @property
    def filter(self) -> BundleLanguageFilter:
        return self._state[1]

    def set_configuration(self, config: DatasourceConfig | dict) -> None:
        if not isinstance(config, DatasourceConfig):
            try:
                config = DatasourceConfig.model_validate(config)
            except ValidationError as e:
                raise ConfigurationError(f"invalid datasource configuration: {e}") from e
        self._state = (config, BundleLanguageFilter.from_config(config))
        log.debug(
            "[datasource] %s configured: bundles=%s languages=%s",
            self.datasource_id,
            config.bundles.model_dump(),
            config.languages.model_dump(),
        )

    def reload_configuration(self) -> None:
        if self.config_source is None:
            raise ConfigurationError("no configuration source attached")
        self.set_configuration(self.config_source.load())

    # --- Loading ---
    def load_multiple(self, ids: Iterable[str]) -> dict[str, IndexableItem]:
        """Load the items for ``ids``, silently dropping those that cannot be indexed.

        Malformed ids, missing entities, missing translations and items rejected
        by the bundle/language filter are omitted from the result. Errors from
        the content store itself are not caught.
        """
        if isinstance(ids, str):
            raise TypeError("load_multiple expects a collection of ids, not a single str")
        item_filter = self.filter

        requested: dict[str, CompositeItemId] = {}
        malformed = 0
        for item_id in ids:
            if item_id in requested:
                continue
            try:
                requested[item_id] = decode(item_id)
            except MalformedIdError as e:
                malformed += 1
                log.debug("[datasource] skipping %s", e)

        if not requested:
            return {}

        entity_ids = sorted({cid.entity_id for cid in requested.values()})
        entities = self.store.fetch_multiple(entity_ids)

        items: dict[str, IndexableItem] = {}
        for item_id, cid in requested.items():
            entity = entities.get(cid.entity_id)
            if entity is None:
                log.debug("[datasource] %s: entity not found", item_id)
                continue
            if cid.language_code not in entity.translation_languages():
                log.debug("[datasource] %s: no such translation", item_id)
                continue
            bundle = entity.bundle()
            if not item_filter.is_eligible(bundle, cid.language_code):
                log.debug("[datasource] %s: filtered out (bundle=%s)", item_id, bundle)
                continue
            items[item_id] = IndexableItem(
                id=cid, bundle=bundle, payload=entity.translation(cid.language_code)
            )

        log.debug(
            "[datasource] load requested=%d loaded=%d malformed=%d dropped=%d",
            len(requested) + malformed,
            len(items),
            malformed,
            len(requested) - len(items),
        )
        return items

    def load(self, item_id: str) -> IndexableItem | None:
        return self.load_multiple([item_id]).get(item_id)

    # --- Item accessors ---
    def get_item_id(self, item: IndexableItem) -> str:
        return item.item_id

    def get_item_language(self, item: IndexableItem) -> str:
        return item.language_code

    def get_item_bundle(self, item: IndexableItem) -> str:
        return item.bundle

    # --- Tracking ---
    def get_item_ids_for_entity(self, entity_id: str) -> list[str]:
        """Eligible item ids for every translation of one entity (empty if it is gone)."""
        entity = self.store.fetch_multiple([entity_id]).get(entity_id)
        if entity is None:
            return []
        item_filter = self.filter
        if not item_filter.is_bundle_eligible(entity.bundle()):
            return []
        return self._eligible_item_ids(entity_id, entity.translation_languages(), item_filter)

    def get_partial_item_ids(
        self, page: int | None = None, page_size: int = 100
    ) -> list[str] | None:
        """List eligible item ids, one page of entities at a time.

        With ``page=None`` every entity is visited. Returns None once ``page``
        lies past the last entity, so callers can stop iterating.
        """
        if not isinstance(self.store, EnumerableContentStorePort):
            raise ConfigurationError(
                f"content store {type(self.store).__name__} cannot enumerate entity ids"
            )
        if page_size <= 0:
            raise ValueError("page_size must be positive")

        all_ids = list(self.store.iter_entity_ids())
        if page is not None:
            start = page * page_size
            if start >= len(all_ids):
                return None
            all_ids = all_ids[start : start + page_size]

        item_filter = self.filter
        out: list[str] = []
        if not all_ids:
            return out
        entities = self.store.fetch_multiple(all_ids)
        for entity_id in all_ids:
            entity = entities.get(entity_id)
            if entity is None:
                continue
            bundle = entity.bundle()
            if not item_filter.is_bundle_eligible(bundle):
                continue
            out.extend(
                self._eligible_item_ids(entity_id, entity.translation_languages(), item_filter)
            )
        return out

    def _eligible_item_ids(
        self,
        entity_id: str,
        language_codes: Iterable[str],
        item_filter: BundleLanguageFilter,
    ) -> list[str]:
        # Stored ids that cannot round-trip are skipped, not fatal to the listing
        out: list[str] = []
        for code in language_codes:
            if not item_filter.is_language_eligible(code):
                continue
            try:
                out.append(encode(entity_id, code))
            except MalformedIdError as e:
                log.debug("[datasource] skipping stored %s", e)
        return out
