from .config_source_port import ConfigSourcePort
from .content_store_port import ContentStorePort, EntityHandle, EnumerableContentStorePort

__all__ = [
    "ConfigSourcePort",
    "ContentStorePort",
    "EntityHandle",
    "EnumerableContentStorePort",
]
