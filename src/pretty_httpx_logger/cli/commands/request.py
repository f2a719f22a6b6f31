"""Request command for pretty-httpx CLI.

Sends one HTTP request and prints the transcript.
"""

from __future__ import annotations

__all__ = ["request"]

import json
import sys
from pathlib import Path

import click
import httpx

from pretty_httpx_logger import __version__
from pretty_httpx_logger.constants import APP_NAME
from pretty_httpx_logger.interceptor import PrettyHttpxLogger
from pretty_httpx_logger.printer import Sink
from pretty_httpx_logger.transport import create_client
from pretty_httpx_logger.utils.logging.logger_setup import setup_text_logger
from pretty_httpx_logger.utils.logging.sinks import console_sink, logger_sink

from ..helpers import apply_overrides, load_config_or_exit
from ..styling import style_error

# User-Agent header for requests sent by the CLI
USER_AGENT = f"{APP_NAME}/{__version__}"

DEFAULT_TIMEOUT_SECONDS = 30.0


def _parse_headers(values: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated 'Name: value' options."""
    headers: dict[str, str] = {}
    for raw in values:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            raise click.BadParameter(f"expected 'Name: value', got {raw!r}", param_hint="--header")
        headers[name.strip()] = value.strip()
    return headers


def _tee(*sinks: Sink) -> Sink:
    def emit(line: str) -> None:
        for sink in sinks:
            sink(line)

    return emit


@click.command("request")
@click.argument("method")
@click.argument("url")
@click.option("--header", "-H", "headers", multiple=True, help="Request header as 'Name: value' (repeatable)")
@click.option("--data", "-d", "data", help="Raw request body")
@click.option("--json", "json_body", help="JSON request body")
@click.option("--request-header/--no-request-header", default=None, help="Print request headers")
@click.option("--request-body/--no-request-body", default=None, help="Print request body")
@click.option("--response-header/--no-response-header", default=None, help="Print response headers")
@click.option("--response-body/--no-response-body", default=None, help="Print response body")
@click.option("--max-width", type=click.IntRange(min=1), help="Columns before wrapping")
@click.option("--compact/--no-compact", default=None, help="Collapse small structures onto one line")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Config file (default: OS config dir)",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Also append the transcript to this file",
)
@click.option("--timeout", type=float, default=DEFAULT_TIMEOUT_SECONDS, show_default=True, help="Timeout in seconds")
@click.option("--fail", is_flag=True, help="Exit with status 1 on 4xx/5xx responses")
def request(
    method: str,
    url: str,
    headers: tuple[str, ...],
    data: str | None,
    json_body: str | None,
    request_header: bool | None,
    request_body: bool | None,
    response_header: bool | None,
    response_body: bool | None,
    max_width: int | None,
    compact: bool | None,
    config_path: Path | None,
    log_file: Path | None,
    timeout: float,
    fail: bool,
) -> None:
    """Send a request and print a pretty transcript.

    \b
    Examples:
      pretty-httpx request GET https://httpbin.org/json
      pretty-httpx request POST https://httpbin.org/post --json '{"a": 1}' --request-body
    """
    if data is not None and json_body is not None:
        raise click.UsageError("Use either --data or --json, not both.")

    payload = None
    if json_body is not None:
        try:
            payload = json.loads(json_body)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"invalid JSON: {e}", param_hint="--json") from e

    config = apply_overrides(
        load_config_or_exit(config_path),
        request_header=request_header,
        request_body=request_body,
        response_header=response_header,
        response_body=response_body,
        max_width=max_width,
        compact=compact,
    )

    emit = console_sink()
    if log_file is not None:
        emit = _tee(emit, logger_sink(setup_text_logger(f"{APP_NAME}.transcript", log_file)))

    pretty_logger = PrettyHttpxLogger(config, emit=emit)
    request_headers = {"User-Agent": USER_AGENT, **_parse_headers(headers)}

    with create_client(pretty_logger, timeout=timeout, headers=request_headers) as client:
        try:
            response = client.request(method.upper(), url, content=data, json=payload)
        except httpx.HTTPError as e:
            click.echo(style_error(f"Request failed: {type(e).__name__}: {e}"), err=True)
            sys.exit(1)

    if fail and response.is_error:
        sys.exit(1)
