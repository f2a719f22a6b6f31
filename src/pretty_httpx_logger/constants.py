"""Application-wide constants for pretty-httpx-logger.

Constants that define rendering behavior.
For user-configurable settings, see config.py.
"""

__all__ = [
    # Application identity
    "APP_NAME",
    "CONFIG_FILENAME",
    # Layout
    "DEFAULT_MAX_WIDTH",
    "INITIAL_TAB",
    "TAB_STEP",
    "BINARY_CHUNK_SIZE",
    "MAX_FLATTEN_SEQUENCE_LENGTH",
    "DEFAULT_MAX_DEPTH",
    # Box drawing
    "MARGIN",
    "BOX_TOP",
    "BOX_BOTTOM",
    "BOX_RULE",
    "BOX_CORNER",
    "BOX_SEPARATOR",
    "TABLE_ROW",
    # Markers
    "CYCLE_MARKER",
    "DEPTH_MARKER",
    # Body decoding
    "TEXT_CONTENT_TYPES",
]

# ============================================================================
# Application Identity
# ============================================================================

# Application name used for logger names and the config directory
APP_NAME: str = "pretty-httpx-logger"

CONFIG_FILENAME: str = "config.json"

# ============================================================================
# Layout
# ============================================================================

# Display columns per line before wrapping
DEFAULT_MAX_WIDTH: int = 90

# Indent level of a top-level body
INITIAL_TAB: int = 1

# One indent level
TAB_STEP: str = "    "

# Bytes per line when dumping binary bodies
BINARY_CHUNK_SIZE: int = 20

# Sequences with this many elements or more are never flattened
MAX_FLATTEN_SEQUENCE_LENGTH: int = 10

# Nesting below this depth is replaced with DEPTH_MARKER
DEFAULT_MAX_DEPTH: int = 64

# ============================================================================
# Box drawing
# ============================================================================

MARGIN: str = "║"
BOX_TOP: str = "╔"
BOX_BOTTOM: str = "╚"
BOX_RULE: str = "═"
BOX_CORNER: str = "╝"
BOX_SEPARATOR: str = "╣"
TABLE_ROW: str = "╟"

# ============================================================================
# Markers
# ============================================================================

CYCLE_MARKER: str = "<cycle>"
DEPTH_MARKER: str = "<max depth exceeded>"

# ============================================================================
# Body decoding
# ============================================================================

# Content type fragments decoded as text rather than binary
TEXT_CONTENT_TYPES: tuple[str, ...] = (
    "text/",
    "xml",
    "javascript",
    "x-www-form-urlencoded",
    "html",
)
