"""Search-index datasource for translatable content entities.

Turns ``<entityId>:<languageCode>`` item ids into indexable items, filtered by
bundle and language.
"""

from .application.use_cases.load_items import ContentEntityDatasource
from .config import DatasourceConfig, SelectionConfig
from .domain import BundleLanguageFilter, CompositeItemId, IndexableItem, decode, encode
from .exceptions import ConfigurationError, ContentStoreError, DatasourceError, MalformedIdError

__all__ = [
    "ContentEntityDatasource",
    "DatasourceConfig",
    "SelectionConfig",
    "BundleLanguageFilter",
    "CompositeItemId",
    "IndexableItem",
    "encode",
    "decode",
    "DatasourceError",
    "MalformedIdError",
    "ConfigurationError",
    "ContentStoreError",
]
