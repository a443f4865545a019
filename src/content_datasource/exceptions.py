from __future__ import annotations


class DatasourceError(Exception):
    """Base class for errors raised by the datasource package."""


class MalformedIdError(DatasourceError, ValueError):
    """Raised when a composite item id cannot be encoded or decoded."""

    def __init__(self, item_id: str, reason: str = "missing separator") -> None:
        super().__init__(f"malformed item id {item_id!r}: {reason}")
        self.item_id = item_id
        self.reason = reason


class ConfigurationError(DatasourceError):
    """Raised for invalid or missing configuration."""


class ContentStoreError(DatasourceError):
    """Raised when a content store cannot be read."""
