"""Logging utilities and helpers.

This package provides logging infrastructure for pretty-httpx-logger:
- iso_formatter: ISO 8601 timestamp prefix for transcript lines written to files
- logger_setup: Factory for file loggers that receive transcript lines
- sinks: Line sinks (console, logging.Logger, color wrapper)
- system_logger: Singleton logger for the package's own operational warnings

Import directly from submodules to avoid circular imports:
    from pretty_httpx_logger.utils.logging.sinks import console_sink
"""

__all__: list[str] = []  # Direct submodule imports required (see docstring)
