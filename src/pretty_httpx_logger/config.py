"""Configuration models for pretty-httpx-logger.

Defines the rendering options for the pretty-printer, per-section colors, and
the switches that decide which parts of HTTP traffic are logged. Config can be
kept as JSON at the OS-appropriate location (via click.get_app_dir).

Example usage:
    # Load from config file
    config = LoggerConfig.load_from_file(config_path)

    # Save new configuration
    config.save_to_file(config_path)
"""

from __future__ import annotations

__all__ = [
    "ColorConfig",
    "FormatOptions",
    "LoggerColor",
    "LoggerConfig",
    "get_default_config_path",
]

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from pretty_httpx_logger.constants import (
    CONFIG_FILENAME,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_WIDTH,
    INITIAL_TAB,
)
from pretty_httpx_logger.utils.file_helpers import (
    get_app_dir,
    load_validated_json,
    require_file_exists,
    set_secure_permissions,
)


def get_default_config_path() -> Path:
    """Get the default config file path (<app dir>/config.json)."""
    return get_app_dir() / CONFIG_FILENAME


# =============================================================================
# Rendering
# =============================================================================


class FormatOptions(BaseModel):
    """Options for one pretty-printer run.

    Attributes:
        max_width: Display columns before wrapping. Must be positive.
        compact: Collapse small leaf-only maps and short lists onto one line.
        initial_indent_level: Indent level of the top-level value.
        max_depth: Nesting depth after which values are replaced by a marker.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_width: int = Field(default=DEFAULT_MAX_WIDTH, gt=0)
    compact: bool = True
    initial_indent_level: int = Field(default=INITIAL_TAB, ge=0)
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, gt=0)


# =============================================================================
# Colors
# =============================================================================


class LoggerColor(str, Enum):
    """Terminal colors for transcript sections.

    Values are click color names. RESET leaves lines unstyled.
    """

    RED = "red"
    BLACK = "black"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    RESET = "reset"


class ColorConfig(BaseModel):
    """Per-section colors.

    Any section left unset falls back to `default`.
    """

    model_config = ConfigDict(extra="forbid")

    default: LoggerColor = LoggerColor.RESET
    request: LoggerColor | None = None
    header: LoggerColor | None = None
    body: LoggerColor | None = None
    error: LoggerColor | None = None
    response: LoggerColor | None = None
    response_header: LoggerColor | None = None
    response_status: LoggerColor | None = None

    def resolve(self, section: str) -> LoggerColor:
        """Get the effective color for a section name (e.g. "response_status")."""
        color = getattr(self, section)
        return color if color is not None else self.default


# =============================================================================
# Logger
# =============================================================================


class LoggerConfig(BaseModel):
    """Main configuration for PrettyHttpxLogger.

    Attributes:
        request: Print the request box (method and URL).
        request_header: Print query parameters, headers and extensions.
        request_body: Print the request body (skipped for GET).
        response_header: Print response headers.
        response_body: Print the response body.
        error: Print errors and 4xx/5xx responses.
        enabled: Master switch.
        format: Pretty-printer options.
        colors: Section colors.
    """

    model_config = ConfigDict(extra="forbid")

    request: bool = True
    request_header: bool = False
    request_body: bool = False
    response_header: bool = False
    response_body: bool = True
    error: bool = True
    enabled: bool = True
    format: FormatOptions = Field(default_factory=FormatOptions)
    colors: ColorConfig = Field(default_factory=ColorConfig)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to JSON file.

        Creates parent directories if they don't exist.

        Args:
            config_path: Path where the config JSON file should be saved.
        """
        config_path.parent.mkdir(parents=True, exist_ok=True)
        set_secure_permissions(config_path.parent, is_directory=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)

        set_secure_permissions(config_path)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "LoggerConfig":
        """Load configuration from JSON file.

        Args:
            config_path: Path to the config JSON file.

        Returns:
            LoggerConfig instance with loaded configuration.

        Raises:
            FileNotFoundError: If config file doesn't exist.
            ConfigurationError: If config file is invalid.
        """
        require_file_exists(config_path, file_type="configuration")
        return load_validated_json(
            config_path,
            cls,
            file_type="config",
            recovery_hint="Run 'pretty-httpx config init --force' to reset it.",
        )
