"""Log formatting for transcript files.

Provides ISO 8601 timestamp formatting for plain-text transcript lines.
"""

from __future__ import annotations

__all__ = ["ISO8601LineFormatter"]

import logging
from datetime import datetime, timezone


class ISO8601LineFormatter(logging.Formatter):
    """Formatter that prefixes each line with an ISO 8601 timestamp (UTC).

    Format: YYYY-MM-DDTHH:MM:SS.sssZ <line>
    Example: 2025-12-04T10:48:37.123Z ║    "id": 7,
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as a timestamped text line.

        Args:
            record: The log record to format

        Returns:
            str: Timestamp, a space, then the message
        """
        timestamp = (
            datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z")
        )

        # Dict messages come from the system logger
        if isinstance(record.msg, dict):
            message = record.msg.get("message") or record.msg.get("event", "")
        else:
            message = record.getMessage()

        return f"{timestamp} {message}"
