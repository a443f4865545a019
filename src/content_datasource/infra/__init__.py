from .config_sources import JsonFileConfigSource, SettingsConfigSource, StaticConfigSource
from .documents import item_to_document, items_to_documents
from .stores import InMemoryContentStore, InMemoryEntity, JsonContentStore

__all__ = [
    "JsonFileConfigSource",
    "SettingsConfigSource",
    "StaticConfigSource",
    "item_to_document",
    "items_to_documents",
    "InMemoryContentStore",
    "InMemoryEntity",
    "JsonContentStore",
]
