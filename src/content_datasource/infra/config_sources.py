from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..config import DatasourceConfig, Settings, get_settings
from ..exceptions import ConfigurationError


def _validate(raw: Any, origin: str) -> DatasourceConfig:
    try:
        return DatasourceConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"invalid datasource configuration in {origin}: {e}") from e


class StaticConfigSource:
    """Always returns the same configuration (tests, embedding callers)."""

    def __init__(self, config: DatasourceConfig | dict[str, Any] | None = None) -> None:
        if config is None or isinstance(config, DatasourceConfig):
            self._config = config or DatasourceConfig()
        else:
            self._config = _validate(config, "static mapping")

    def load(self) -> DatasourceConfig:
        return self._config


class JsonFileConfigSource:
    """Reads ``{"bundles": {"default": ..., "selected": [...]}, "languages": {...}}``.

    The file is re-read on every ``load`` so a datasource picks up edits on
    ``reload_configuration``.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> DatasourceConfig:
        if not self.path.exists():
            raise ConfigurationError(f"config file not found: {self.path}")
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"config file {self.path} is not valid JSON: {e}") from e
        return _validate(raw, str(self.path))


class SettingsConfigSource:
    """Configuration taken from environment-backed settings (``DS_DATASOURCE__...``)."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings

    def load(self) -> DatasourceConfig:
        settings = self._settings or get_settings()
        return settings.datasource
