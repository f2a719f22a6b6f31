"""Config command group for pretty-httpx CLI.

Provides configuration management subcommands.
"""

from __future__ import annotations

__all__ = ["config"]

import json

import click

from pretty_httpx_logger.config import LoggerConfig, get_default_config_path

from ..helpers import load_config_or_exit
from ..styling import style_error, style_header, style_success


@click.group()
def config() -> None:
    """Configuration management commands.

    Without a config file, built-in defaults are used.
    """
    pass


@config.command("path")
def config_path() -> None:
    """Show the config file location."""
    click.echo(str(get_default_config_path()))


@config.command("show")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def config_show(as_json: bool) -> None:
    """Display current configuration."""
    loaded = load_config_or_exit(None)

    if as_json:
        click.echo(json.dumps(loaded.model_dump(mode="json"), indent=2))
        return

    click.echo(style_header("Sections"))
    for name in ("request", "request_header", "request_body", "response_header", "response_body", "error", "enabled"):
        click.echo(f"  {name}: {getattr(loaded, name)}")
    click.echo()

    click.echo(style_header("Format"))
    for name, value in loaded.format.model_dump().items():
        click.echo(f"  {name}: {value}")
    click.echo()

    click.echo(style_header("Colors"))
    for name in ("request", "header", "body", "error", "response", "response_header", "response_status"):
        click.echo(f"  {name}: {loaded.colors.resolve(name).value}")


@config.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def config_init(force: bool) -> None:
    """Write a config file with default values."""
    path = get_default_config_path()
    if path.exists() and not force:
        click.echo(style_error(f"Config already exists at {path} (use --force to overwrite)"), err=True)
        raise SystemExit(1)

    LoggerConfig().save_to_file(path)
    click.echo(style_success(f"Configuration saved to {path}"))
