"""Helpers shared by CLI commands."""

from __future__ import annotations

__all__ = [
    "apply_overrides",
    "load_config_or_exit",
]

from pathlib import Path
from typing import Any

import click

from pretty_httpx_logger.config import FormatOptions, LoggerConfig, get_default_config_path
from pretty_httpx_logger.exceptions import ConfigurationError

_FORMAT_FIELDS = ("max_width", "compact")


def load_config_or_exit(config_path: Path | None) -> LoggerConfig:
    """Load the config file, or defaults when none is given and none exists.

    An explicitly given path must exist.

    Raises:
        click.ClickException: If the file is missing or invalid.
    """
    path = config_path or get_default_config_path()
    if config_path is None and not path.exists():
        return LoggerConfig()

    try:
        return LoggerConfig.load_from_file(path)
    except (FileNotFoundError, ConfigurationError) as e:
        raise click.ClickException(str(e)) from e


def apply_overrides(config: LoggerConfig, **overrides: Any) -> LoggerConfig:
    """Return a copy of config with every non-None override applied.

    max_width and compact go to the format options; everything else is a
    top-level LoggerConfig field.
    """
    format_updates = {k: overrides.pop(k) for k in _FORMAT_FIELDS if overrides.get(k) is not None}
    top_updates = {k: v for k, v in overrides.items() if v is not None}

    fmt = FormatOptions(**{**config.format.model_dump(), **format_updates})
    return LoggerConfig(**{**config.model_dump(), **top_updates, "format": fmt})
