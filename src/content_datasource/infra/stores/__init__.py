from .json_store import JsonContentStore
from .memory_store import InMemoryContentStore, InMemoryEntity

__all__ = ["InMemoryContentStore", "InMemoryEntity", "JsonContentStore"]
