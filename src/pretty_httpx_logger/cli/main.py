"""Main CLI entry point for pretty-httpx.

Defines the CLI group and registers all subcommands.

Commands:
    config   - Configuration management (path, show, init)
    format   - Pretty-print a JSON document from a file or stdin
    request  - Send a request and print its transcript

Subcommand help:
    pretty-httpx COMMAND -h         Show help for a specific command
"""

from __future__ import annotations

__all__ = ["cli"]

import sys

import click

from pretty_httpx_logger import __version__

from .commands.config import config
from .commands.format import format_cmd
from .commands.request import request


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """pretty-httpx: boxed, colorized transcripts of HTTP traffic."""
    if version:
        click.echo(f"pretty-httpx {__version__}")
        sys.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Register commands
cli.add_command(config)
cli.add_command(format_cmd)
cli.add_command(request)


def main() -> None:
    """CLI entry point."""
    cli()
