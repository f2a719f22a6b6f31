"""pretty-httpx-logger: readable, boxed transcripts of httpx traffic."""

from pretty_httpx_logger.config import ColorConfig, FormatOptions, LoggerColor, LoggerConfig
from pretty_httpx_logger.filters import FilterArgs
from pretty_httpx_logger.interceptor import PrettyHttpxLogger
from pretty_httpx_logger.printer import PrettyPrinter, print_value
from pretty_httpx_logger.transport import (
    AsyncLoggingTransport,
    LoggingTransport,
    create_async_client,
    create_client,
)

__version__ = "0.1.0"

__all__ = [
    "AsyncLoggingTransport",
    "ColorConfig",
    "FilterArgs",
    "FormatOptions",
    "LoggerColor",
    "LoggerConfig",
    "LoggingTransport",
    "PrettyHttpxLogger",
    "PrettyPrinter",
    "__version__",
    "create_async_client",
    "create_client",
    "print_value",
]
