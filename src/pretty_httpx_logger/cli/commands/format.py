"""Format command for pretty-httpx CLI.

Pretty-prints a document (JSON by default) without sending anything.
"""

from __future__ import annotations

__all__ = ["format_cmd"]

from pathlib import Path
from typing import BinaryIO

import click

from pretty_httpx_logger.body import decode_body
from pretty_httpx_logger.printer import PrettyPrinter
from pretty_httpx_logger.utils.logging.sinks import console_sink

from ..helpers import apply_overrides, load_config_or_exit
from ..styling import style_dim


@click.command("format")
@click.argument("source", type=click.File("rb"), default="-")
@click.option(
    "--content-type",
    default="application/json",
    show_default=True,
    help="How to decode the input (JSON falls back to text)",
)
@click.option("--max-width", type=click.IntRange(min=1), help="Columns before wrapping")
@click.option("--compact/--no-compact", default=None, help="Collapse small structures onto one line")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Config file (default: OS config dir)",
)
def format_cmd(
    source: BinaryIO,
    content_type: str,
    max_width: int | None,
    compact: bool | None,
    config_path: Path | None,
) -> None:
    """Pretty-print SOURCE (a file, or stdin when omitted)."""
    config = apply_overrides(load_config_or_exit(config_path), max_width=max_width, compact=compact)

    data = decode_body(source.read(), content_type)
    if data is None:
        click.echo(style_dim("Empty input."))
        return

    PrettyPrinter(config.format).print_value(data, console_sink())
