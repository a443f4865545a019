from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError
from pydantic_settings import SettingsError

from .application.use_cases.load_items import ContentEntityDatasource
from .config import get_settings
from .domain.filtering import BundleLanguageFilter
from .domain.item_id import combine_id
from .exceptions import ConfigurationError, DatasourceError
from .infra.config_sources import JsonFileConfigSource, SettingsConfigSource
from .infra.stores.json_store import JsonContentStore
from .logging_setup import setup_logging

app = typer.Typer(add_completion=False, no_args_is_help=True, help="Content datasource tools")


def _config_source(config: Path | None) -> JsonFileConfigSource | SettingsConfigSource:
    settings = get_settings()
    path = config or settings.config_path
    if path is not None:
        return JsonFileConfigSource(path)
    return SettingsConfigSource(settings)


def _build_datasource(store: Path | None, config: Path | None) -> ContentEntityDatasource:
    settings = get_settings()
    store_path = store or settings.store_path
    if store_path is None:
        raise ConfigurationError("no content store given (use --store or DS_STORE_PATH)")
    return ContentEntityDatasource(
        JsonContentStore(store_path),
        _config_source(config),
        entity_type=settings.entity_type,
    )


@app.command("load")
def load_cmd(
    ids: list[str] = typer.Argument(..., help="Composite item ids (<entityId>:<langcode>)."),
    store: Path | None = typer.Option(None, help="JSON content store file."),  # noqa: B008
    config: Path | None = typer.Option(None, help="JSON datasource configuration."),  # noqa: B008
    as_json: bool = typer.Option(False, "--json", help="Print items as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log dropped ids."),
) -> None:
    """Load items by id; ids that cannot be indexed are left out."""
    setup_logging(logging.DEBUG if verbose else get_settings().log_level)
    datasource = _build_datasource(store, config)
    items = datasource.load_multiple(ids)

    if as_json:
        payload: list[dict[str, Any]] = [
            {
                "item_id": item_id,
                "bundle": item.bundle,
                "langcode": item.language_code,
                "payload": item.payload,
            }
            for item_id, item in items.items()
        ]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2, default=str))
        return

    if not items:
        typer.echo("No items.")
        return
    for item_id, item in items.items():
        typer.echo(f"{item_id}  bundle={item.bundle}")
    missing = [i for i in ids if i not in items]
    if missing:
        typer.echo(f"skipped: {', '.join(missing)}")


@app.command("ids")
def ids_cmd(
    store: Path | None = typer.Option(None, help="JSON content store file."),  # noqa: B008
    config: Path | None = typer.Option(None, help="JSON datasource configuration."),  # noqa: B008
    page: int | None = typer.Option(None, help="Page of entities (0-based); all if omitted."),
    page_size: int | None = typer.Option(None, help="Entities per page."),
) -> None:
    """List every item id eligible for indexing."""
    setup_logging(get_settings().log_level)
    datasource = _build_datasource(store, config)
    size = page_size or get_settings().page_size
    item_ids = datasource.get_partial_item_ids(page=page, page_size=size)
    if item_ids is None:
        typer.echo(f"Page {page} is past the end.")
        raise typer.Exit(code=0)
    for item_id in item_ids:
        typer.echo(combine_id(datasource.datasource_id, item_id))


@app.command("check")
def check_cmd(
    bundle: str = typer.Argument(..., help="Bundle name."),
    langcode: str = typer.Argument(..., help="Language code."),
    config: Path | None = typer.Option(None, help="JSON datasource configuration."),  # noqa: B008
) -> None:
    """Tell whether a bundle/language pair would be indexed."""
    item_filter = BundleLanguageFilter.from_config(_config_source(config).load())
    ok = item_filter.is_eligible(bundle, langcode)
    typer.echo(f"{bundle}/{langcode}: {'eligible' if ok else 'excluded'}")
    if not ok:
        raise typer.Exit(code=1)


def main() -> int:
    try:
        app()
        return 0
    except (ConfigurationError, SettingsError, ValidationError) as ce:
        typer.secho(f"Config error: {ce}", fg=typer.colors.RED, err=True)
        return 2
    except DatasourceError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
