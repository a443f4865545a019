from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class SelectionConfig(BaseModel):
    """One filter axis.

    ``default=True`` makes every value eligible except ``selected``;
    ``default=False`` makes only ``selected`` eligible.
    """

    default: bool = True
    # NoDecode: env values reach the validator as raw strings
    selected: Annotated[list[str], NoDecode] = Field(default_factory=list)

    @field_validator("selected", mode="before")
    @classmethod
    def _normalize_selected(cls, v):  # type: ignore[no-untyped-def]
        # Env values arrive as "item,page" or as a JSON list
        if isinstance(v, str):
            text = v.strip()
            if text.startswith("["):
                try:
                    v = json.loads(text)
                except json.JSONDecodeError as e:
                    raise ValueError(f"selected is not a valid JSON list: {e}") from e
            else:
                v = text.split(",") if text else []
        if v is None:
            return []
        out: list[str] = []
        for raw in v:
            s = str(raw).strip()
            if not s:
                raise ValueError("selected values must be non-empty strings")
            if s not in out:
                out.append(s)
        return out


class DatasourceConfig(BaseModel):
    """Raw datasource configuration, as stored alongside the index."""

    bundles: SelectionConfig = Field(default_factory=SelectionConfig)
    languages: SelectionConfig = Field(default_factory=SelectionConfig)


class Settings(BaseSettings):
    entity_type: str = Field(default="node")
    store_path: Path | None = Field(default=None)
    config_path: Path | None = Field(default=None)
    page_size: int = Field(default=100, gt=0)
    log_level: str = Field(default="WARNING")
    # Used by SettingsConfigSource: DS_DATASOURCE__BUNDLES__DEFAULT=false, ...
    datasource: DatasourceConfig = Field(default_factory=DatasourceConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="DS_",
        env_nested_delimiter="__",
    )


# Cached accessor shared between CLI commands without re-parsing env
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
