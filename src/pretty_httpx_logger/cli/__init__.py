"""Command-line interface for pretty-httpx-logger.

Provides commands for sending requests with a printed transcript,
pretty-printing documents, and managing configuration.
"""

from .main import cli, main

__all__ = ["cli", "main"]
