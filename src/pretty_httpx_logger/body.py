"""Body decoding for printed traffic.

Raw request/response bytes are turned into the value that gets pretty-printed
and handed to filters:

- empty body            -> None
- JSON content type     -> parsed JSON (falls back to text if it does not parse)
- textual content type  -> str, decoded with the declared charset
- anything else         -> str if it is valid UTF-8, else the raw bytes
"""

from __future__ import annotations

__all__ = [
    "decode_body",
    "read_request_body",
    "read_response_body",
]

import json
import re
from typing import Any

import httpx

from pretty_httpx_logger.constants import TEXT_CONTENT_TYPES

_CHARSET = re.compile(r"charset=\"?([\w.:-]+)", re.IGNORECASE)


def _decode_text(content: bytes, content_type: str) -> str:
    match = _CHARSET.search(content_type)
    encoding = match.group(1) if match else "utf-8"
    try:
        return content.decode(encoding, errors="replace")
    except LookupError:
        return content.decode("utf-8", errors="replace")


def decode_body(content: bytes, content_type: str | None) -> Any:
    """Decode a raw body according to its content type.

    Args:
        content: Raw body bytes.
        content_type: Value of the Content-Type header, if any.

    Returns:
        None, parsed JSON, str, or bytes (see module docstring).
    """
    if not content:
        return None

    ctype = (content_type or "").lower()
    if "json" in ctype:
        try:
            return json.loads(content)
        except ValueError:
            return _decode_text(content, ctype)

    if any(fragment in ctype for fragment in TEXT_CONTENT_TYPES):
        return _decode_text(content, ctype)

    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        return content


def read_request_body(request: httpx.Request) -> Any:
    """Decoded request body, or None if there is none or it is a stream not yet read."""
    try:
        content = request.content
    except httpx.RequestNotRead:
        return None
    return decode_body(content, request.headers.get("content-type"))


def read_response_body(response: httpx.Response) -> Any:
    """Decoded response body, or None if there is none or it has not been read."""
    try:
        content = response.content
    except httpx.ResponseNotRead:
        return None
    return decode_body(content, response.headers.get("content-type"))
