"""Utility helpers for pretty-httpx-logger.

Import directly from submodules:
    from pretty_httpx_logger.utils.file_helpers import load_validated_json
    from pretty_httpx_logger.utils.logging.sinks import console_sink
"""

__all__: list[str] = []  # Direct submodule imports required (see docstring)
