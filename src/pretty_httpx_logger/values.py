"""Value model for the pretty-printer.

Arbitrary Python objects (parsed JSON bodies, headers, raw bytes) are
classified into a closed set of node types:

- MapValue: ordered key/value entries (any collections.abc.Mapping)
- ListValue: ordered elements (list, tuple and other non-text sequences)
- BinaryValue: raw bytes (bytes, bytearray, memoryview)
- ScalarValue: everything else, rendered with str()

Containers are classified one level at a time: MapValue and ListValue wrap
the caller's container and classify each child only when it is iterated, so
nothing below the current recursion state is copied. The Scope carried along
bounds recursion: containers nested deeper than max_depth, and containers
that contain themselves, become marker scalars.
"""

from __future__ import annotations

__all__ = [
    "BinaryValue",
    "ListValue",
    "MapValue",
    "Marker",
    "ScalarValue",
    "Scope",
    "Value",
    "to_value",
]

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Iterator, Union

from pretty_httpx_logger.constants import CYCLE_MARKER, DEFAULT_MAX_DEPTH, DEPTH_MARKER


class Marker:
    """Placeholder scalar that renders as its text, unquoted."""

    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        self.text = text

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Marker) and other.text == self.text

    def __hash__(self) -> int:
        return hash(self.text)


@dataclass(frozen=True, slots=True)
class Scope:
    """Position of a container's children in the tree being classified.

    Attributes:
        depth: Nesting depth of the children.
        max_depth: Depth at which containers become DEPTH_MARKER.
        ancestors: ids of the containers on the path from the root.
    """

    depth: int = 0
    max_depth: int = DEFAULT_MAX_DEPTH
    ancestors: frozenset[int] = frozenset()

    def enter(self, container: Any) -> "Scope":
        return Scope(self.depth + 1, self.max_depth, self.ancestors | {id(container)})


@dataclass(frozen=True, slots=True)
class ScalarValue:
    """Leaf value (string, number, boolean, None, or anything unrecognized)."""

    value: Any

    def text(self) -> str:
        return str(self.value)

    def iter_flat(self) -> Iterator[str]:
        yield repr(self.value)

    def flat(self) -> str:
        return repr(self.value)


@dataclass(frozen=True, slots=True)
class BinaryValue:
    """Raw byte buffer."""

    data: bytes

    def iter_flat(self) -> Iterator[str]:
        yield self.flat()

    def flat(self) -> str:
        return "[" + ", ".join(str(b) for b in self.data) + "]"


@dataclass(frozen=True, slots=True, eq=False)
class ListValue:
    """Ordered sequence; elements are classified as they are iterated."""

    source: Sequence[Any]
    scope: Scope = Scope()

    def __len__(self) -> int:
        return len(self.source)

    def __iter__(self) -> Iterator["Value"]:
        for item in self.source:
            yield _classify(item, self.scope)

    def iter_flat(self) -> Iterator[str]:
        """Flat rendering in pieces, so callers can stop once it is too wide."""
        yield "["
        for index, item in enumerate(self):
            if index:
                yield ", "
            yield from item.iter_flat()
        yield "]"

    def flat(self) -> str:
        return "".join(self.iter_flat())


@dataclass(frozen=True, slots=True, eq=False)
class MapValue:
    """Mapping in the caller's iteration order; values are classified as they are iterated."""

    source: Mapping[Any, Any]
    scope: Scope = Scope()

    def __len__(self) -> int:
        return len(self.source)

    def entries(self) -> Iterator[tuple[Any, "Value"]]:
        for key, value in self.source.items():
            yield key, _classify(value, self.scope)

    def iter_flat(self) -> Iterator[str]:
        """Flat rendering in pieces, so callers can stop once it is too wide."""
        yield "{"
        for index, (key, value) in enumerate(self.entries()):
            if index:
                yield ", "
            yield f"{key!r}: "
            yield from value.iter_flat()
        yield "}"

    def flat(self) -> str:
        return "".join(self.iter_flat())


Value = Union[MapValue, ListValue, BinaryValue, ScalarValue]

_VALUE_TYPES = (MapValue, ListValue, BinaryValue, ScalarValue)


def to_value(obj: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    """Classify the top level of an arbitrary object.

    Args:
        obj: Object to classify. Already-classified values are returned as is.
        max_depth: Container nesting depth at which DEPTH_MARKER is substituted.

    Returns:
        The classified Value. Children of containers are classified lazily.
    """
    return _classify(obj, Scope(max_depth=max_depth))


def _classify(obj: Any, scope: Scope) -> Value:
    if isinstance(obj, _VALUE_TYPES):
        return obj

    if isinstance(obj, (bytes, bytearray, memoryview)):
        return BinaryValue(bytes(obj))

    is_mapping = isinstance(obj, Mapping)
    is_sequence = not is_mapping and isinstance(obj, Sequence) and not isinstance(obj, str)
    if not (is_mapping or is_sequence):
        return ScalarValue(obj)

    if id(obj) in scope.ancestors:
        return ScalarValue(Marker(CYCLE_MARKER))
    if scope.depth >= scope.max_depth:
        return ScalarValue(Marker(DEPTH_MARKER))

    if is_mapping:
        return MapValue(obj, scope.enter(obj))
    return ListValue(obj, scope.enter(obj))
