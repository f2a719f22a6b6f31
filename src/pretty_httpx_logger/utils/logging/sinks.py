"""Line sinks for transcript output.

A sink is any callable taking one finished line. The printer core has no
default sink; these are the ones the interceptor and CLI wire up.
"""

from __future__ import annotations

__all__ = [
    "colored_sink",
    "console_sink",
    "logger_sink",
]

import logging

import click

from pretty_httpx_logger.config import LoggerColor
from pretty_httpx_logger.printer import Sink


def console_sink(err: bool = False) -> Sink:
    """Sink that echoes each line to stdout (or stderr when err=True)."""

    def emit(line: str) -> None:
        click.echo(line, err=err)

    return emit


def logger_sink(logger: logging.Logger, level: int = logging.INFO) -> Sink:
    """Sink that logs each line as its own record."""

    def emit(line: str) -> None:
        logger.log(level, line)

    return emit


def colored_sink(sink: Sink, color: LoggerColor) -> Sink:
    """Wrap a sink so every line is styled with color.

    LoggerColor.RESET returns the sink unchanged.
    """
    if color is LoggerColor.RESET:
        return sink

    def emit(line: str) -> None:
        sink(click.style(line, fg=color.value))

    return emit
