from __future__ import annotations

from typing import Protocol

from ...config import DatasourceConfig


class ConfigSourcePort(Protocol):
    def load(self) -> DatasourceConfig:  # pragma: no cover - interface
        ...
