"""Structured pretty-printer for HTTP bodies and metadata.

Turns a value (mapping, sequence, byte buffer or scalar) into display lines
prefixed with a vertical-bar margin and indentation. Every print_* method is a
generator: lines are produced lazily, top to bottom. Input containers are
classified one level at a time (see values.py), so nothing is buffered
beyond the current recursion state. Callers either iterate the lines or hand
a sink to print_value().

Layout for {"id": 7, "owner": {"name": "ada"}, "tags": ["a", "b"]} with
compact=False:

    ║    {
    ║         "id": 7,
    ║         "owner": {
    ║             "name": "ada"
    ║        },
    ║         "tags": [
    ║                 a,
    ║                 b
    ║         ]
    ║    }

With compact=True "owner" and "tags" each collapse onto a single line.

Box and table helpers used by the HTTP transcript live here too so that all
width handling goes through one place.
"""

from __future__ import annotations

__all__ = [
    "PrettyPrinter",
    "Sink",
    "chunk_bytes",
    "chunk_text",
    "print_value",
]

import re
from collections.abc import Mapping
from typing import Any, Callable, Iterator

from pretty_httpx_logger.config import FormatOptions
from pretty_httpx_logger.constants import (
    BINARY_CHUNK_SIZE,
    BOX_BOTTOM,
    BOX_CORNER,
    BOX_RULE,
    BOX_SEPARATOR,
    BOX_TOP,
    MARGIN,
    MAX_FLATTEN_SEQUENCE_LENGTH,
    TAB_STEP,
    TABLE_ROW,
)
from pretty_httpx_logger.values import (
    BinaryValue,
    ListValue,
    MapValue,
    ScalarValue,
    to_value,
)

# Receives each finished line
Sink = Callable[[str], None]

_LINE_BREAKS = re.compile(r"[\r\n]+")


def chunk_text(text: str, width: int) -> list[str]:
    """Split text into consecutive pieces of at most `width` characters.

    Pure length-based split, no word-boundary awareness.

    Raises:
        ValueError: If width is not positive.
    """
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    return [text[i : i + width] for i in range(0, len(text), width)]


def chunk_bytes(data: bytes, size: int = BINARY_CHUNK_SIZE) -> list[bytes]:
    """Split a byte buffer into consecutive chunks of `size` bytes (last may be shorter).

    Raises:
        ValueError: If size is not positive.
    """
    if size <= 0:
        raise ValueError(f"chunk size must be positive, got {size}")
    return [data[i : i + size] for i in range(0, len(data), size)]


class PrettyPrinter:
    """Renders values as indented, width-bounded display lines.

    Stateless apart from its options: formatting the same value twice yields
    identical lines.

    Args:
        options: Rendering options. Defaults to FormatOptions().
    """

    def __init__(self, options: FormatOptions | None = None) -> None:
        self.options = options or FormatOptions()

    @property
    def max_width(self) -> int:
        return self.options.max_width

    @property
    def compact(self) -> bool:
        return self.options.compact

    @staticmethod
    def indent(level: int) -> str:
        return TAB_STEP * level

    # ==================== Entry Points ====================

    def print_value(self, obj: Any, emit: Sink) -> None:
        """Render obj and pass each line to emit, in order."""
        for line in self.iter_lines(obj):
            emit(line)

    def iter_lines(self, obj: Any) -> Iterator[str]:
        """Render obj lazily.

        Dispatch:
            mapping  -> bracketed key/value block
            sequence -> bracketed element block
            bytes    -> bracketed decimal byte dump
            other    -> text block wrapped at max_width
        """
        value = to_value(obj, self.options.max_depth)
        level = self.options.initial_indent_level

        if isinstance(value, MapValue):
            yield from self.print_mapping(value, level)
        elif isinstance(value, ListValue):
            yield f"{MARGIN}{self.indent(level)}["
            yield from self.print_sequence(value, level)
            yield f"{MARGIN}{self.indent(level)}]"
        elif isinstance(value, BinaryValue):
            yield f"{MARGIN}{self.indent(level)}["
            yield from self.print_binary_buffer(value.data, level)
            yield f"{MARGIN}{self.indent(level)}]"
        elif isinstance(value, ScalarValue):
            yield from self.print_block(value.text())
        else:
            raise TypeError(f"Unhandled value type: {type(value).__name__}")

    # ==================== Structured Values ====================

    def print_mapping(
        self,
        mapping: MapValue,
        indent_level: int | None = None,
        *,
        is_list_element: bool = False,
        is_last: bool = False,
    ) -> Iterator[str]:
        """Render a mapping as a braced block.

        Args:
            mapping: The mapping to render.
            indent_level: Level of the braces; entries sit one level deeper.
            is_list_element: True when rendered as an element of a sequence.
            is_last: True when it is the last element of that sequence.
        """
        level = self.options.initial_indent_level if indent_level is None else indent_level
        closing_sep = "," if is_list_element and not is_last else ""

        yield f"{MARGIN}{self.indent(level)}{{"
        yield from self._print_entries(mapping, level)
        yield f"{MARGIN}{self.indent(level)}}}{closing_sep}"

    def _print_entries(self, mapping: MapValue, level: int) -> Iterator[str]:
        tabs = level + 1
        pad = f"{MARGIN}{self.indent(tabs)} "
        count = len(mapping)

        for index, (key, value) in enumerate(mapping.entries()):
            sep = "" if index == count - 1 else ","
            label = f'"{key}"'

            if isinstance(value, MapValue):
                if self.compact and self.can_flatten_mapping(value):
                    yield f"{pad}{label}: {value.flat()}{sep}"
                else:
                    yield f"{pad}{label}: {{"
                    yield from self._print_entries(value, tabs)
                    yield f"{MARGIN}{self.indent(tabs)}}}{sep}"
            elif isinstance(value, ListValue):
                if self.compact and self.can_flatten_sequence(value):
                    yield f"{pad}{label}: {value.flat()}{sep}"
                else:
                    yield f"{pad}{label}: ["
                    yield from self.print_sequence(value, tabs)
                    yield f"{pad}]{sep}"
            elif isinstance(value, BinaryValue):
                yield f"{pad}{label}: ["
                yield from self.print_binary_buffer(value.data, tabs)
                yield f"{pad}]{sep}"
            else:
                yield from self._print_scalar_entry(label, value, tabs, sep)

    def _print_scalar_entry(self, label: str, value: ScalarValue, tabs: int, sep: str) -> Iterator[str]:
        if isinstance(value.value, str):
            msg = '"' + _LINE_BREAKS.sub(" ", value.value) + '"'
        else:
            msg = value.text().replace("\n", "")

        pad = f"{MARGIN}{self.indent(tabs)} "
        line_width = max(self.max_width - len(self.indent(tabs)), 1)

        if len(label) + 2 + len(msg) <= line_width:
            yield f"{pad}{label}: {msg}{sep}"
            return

        chunks = chunk_text(msg, line_width)
        for i, chunk in enumerate(chunks):
            key_part = f"{label}:" if i == 0 else ""
            tail = sep if i == len(chunks) - 1 else ""
            yield f"{pad}{key_part} {chunk}{tail}"

    def print_sequence(self, sequence: ListValue, indent_level: int | None = None) -> Iterator[str]:
        """Render sequence elements (without the surrounding brackets)."""
        tabs = self.options.initial_indent_level if indent_level is None else indent_level
        count = len(sequence)

        for index, item in enumerate(sequence):
            is_last = index == count - 1
            sep = "" if is_last else ","

            if isinstance(item, MapValue):
                if self.compact and self.can_flatten_mapping(item):
                    yield f"{MARGIN}{self.indent(tabs)}  {item.flat()}{sep}"
                else:
                    yield from self.print_mapping(item, tabs + 1, is_list_element=True, is_last=is_last)
            else:
                text = item.text() if isinstance(item, ScalarValue) else item.flat()
                yield f"{MARGIN}{self.indent(tabs + 2)} {text}{sep}"

    def print_binary_buffer(
        self,
        data: bytes,
        indent_level: int | None = None,
        chunk_size: int = BINARY_CHUNK_SIZE,
    ) -> Iterator[str]:
        """Render bytes as lines of comma-joined decimal values, chunk_size per line."""
        tabs = self.options.initial_indent_level if indent_level is None else indent_level
        for chunk in chunk_bytes(data, chunk_size):
            yield f"{MARGIN}{self.indent(tabs)} {', '.join(str(b) for b in chunk)}"

    def print_block(self, text: str) -> Iterator[str]:
        """Render text as max_width-long pieces, one per line."""
        for chunk in chunk_text(text, self.max_width):
            yield f"{MARGIN} {chunk}"

    # ==================== Flattening ====================

    def can_flatten_mapping(self, mapping: MapValue) -> bool:
        """True if no direct value is a container and the flat form fits in max_width."""
        has_nested = any(isinstance(value, (MapValue, ListValue, BinaryValue)) for _, value in mapping.entries())
        return not has_nested and self._flat_fits(mapping)

    def can_flatten_sequence(self, sequence: ListValue) -> bool:
        """True if the sequence is short and its flat form fits in max_width."""
        return len(sequence) < MAX_FLATTEN_SEQUENCE_LENGTH and self._flat_fits(sequence)

    def _flat_fits(self, value: MapValue | ListValue) -> bool:
        # Stops walking as soon as the rendering reaches max_width
        width = 0
        for piece in value.iter_flat():
            width += len(piece)
            if width >= self.max_width:
                return False
        return True

    # ==================== Boxes and Tables ====================

    def print_rule(self, prefix: str = BOX_BOTTOM, suffix: str = BOX_CORNER) -> Iterator[str]:
        yield f"{prefix}{BOX_RULE * self.max_width}{suffix}"

    def print_boxed(self, header: str, text: str) -> Iterator[str]:
        yield f"{BOX_TOP}{BOX_SEPARATOR} {header}"
        yield f"{MARGIN}  {text}"
        yield from self.print_rule()

    def print_kv(self, key: str, value: Any) -> Iterator[str]:
        """Render one table row; values too wide go on their own wrapped lines."""
        pre = f"{TABLE_ROW} {key}: "
        msg = str(value)

        if len(pre) + len(msg) > self.max_width:
            yield pre
            yield from self.print_block(msg)
        else:
            yield f"{pre}{msg}"

    def print_table(self, mapping: Mapping[Any, Any] | None, header: str) -> Iterator[str]:
        """Render a titled key/value table. Empty or missing mappings produce nothing."""
        if not mapping:
            return
        yield f"{BOX_TOP} {header} "
        for key, value in mapping.items():
            yield from self.print_kv(str(key), value)
        yield from self.print_rule()


def print_value(obj: Any, emit: Sink, options: FormatOptions | None = None) -> None:
    """Render obj with the given options, passing each line to emit."""
    PrettyPrinter(options).print_value(obj, emit)
