"""Custom exceptions for pretty-httpx-logger.

Formatting never raises into the observed HTTP flow: failures while rendering
traffic are caught by the interceptor and reported to the system logger.
The exceptions here surface at setup time only.

Usage:
    from pretty_httpx_logger.exceptions import ConfigurationError
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "PrettyLoggerError",
]


class PrettyLoggerError(Exception):
    """Base class for all pretty-httpx-logger errors."""


class ConfigurationError(PrettyLoggerError):
    """Configuration is invalid or incomplete.

    Raised when:
    - Config file contains invalid JSON
    - Config file cannot be read
    - Config file fails Pydantic validation

    Attributes:
        path: Config file that failed to load, if any.
        errors: One human-readable line per failing field.
    """

    def __init__(self, message: str, *, path: str | None = None, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.errors = errors or []
