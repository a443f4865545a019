from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from .exceptions import ConfigurationError


def resolve_level(level: int | str) -> int:
    """Accept ``logging.DEBUG`` or names such as ``"debug"`` (DS_LOG_LEVEL)."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ConfigurationError(f"unknown log level: {level!r}")
    return value


def setup_logging(level: int | str = logging.INFO) -> None:
    # stderr keeps stdout clean for --json output
    logging.basicConfig(
        level=resolve_level(level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                markup=False,
                show_path=False,
            )
        ],
        force=True,
    )
