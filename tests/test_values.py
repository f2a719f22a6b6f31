"""Tests for value classification."""

from __future__ import annotations

import httpx
import pytest

from pretty_httpx_logger.constants import CYCLE_MARKER, DEPTH_MARKER
from pretty_httpx_logger.values import (
    BinaryValue,
    ListValue,
    MapValue,
    Marker,
    ScalarValue,
    to_value,
)


class TestToValue:
    """Tests for to_value classification."""

    @pytest.mark.parametrize("obj", [b"\x00", bytearray(b"\x00"), memoryview(b"\x00")])
    def test_byte_buffers_are_binary(self, obj: object) -> None:
        assert to_value(obj) == BinaryValue(b"\x00")

    @pytest.mark.parametrize("obj", [[1, 2], (1, 2)])
    def test_sequences_are_lists(self, obj: object) -> None:
        value = to_value(obj)

        assert isinstance(value, ListValue)
        assert list(value) == [ScalarValue(1), ScalarValue(2)]

    def test_strings_are_scalars_not_sequences(self) -> None:
        assert to_value("abc") == ScalarValue("abc")

    def test_any_mapping_is_a_map(self) -> None:
        # Arrange
        headers = httpx.Headers({"Accept": "application/json"})

        # Act
        value = to_value(headers)

        # Assert
        assert isinstance(value, MapValue)
        assert list(value.entries()) == [("accept", ScalarValue("application/json"))]

    def test_keeps_mapping_order(self) -> None:
        value = to_value({"b": 1, "a": 2})
        assert [key for key, _ in value.entries()] == ["b", "a"]

    def test_classified_values_pass_through(self) -> None:
        value = ListValue(())
        assert to_value(value) is value

    def test_unknown_objects_are_scalars(self) -> None:
        obj = object()
        assert to_value(obj) == ScalarValue(obj)

    def test_children_are_classified_when_iterated(self) -> None:
        # Arrange
        source = {"a": [1, 2], "b": {"c": 3}}
        value = to_value(source)

        # Act
        source["d"] = "added later"

        # Assert
        assert len(value) == 3
        assert [key for key, _ in value.entries()] == ["a", "b", "d"]


class TestRecursionGuards:
    """Tests for cycle and depth markers."""

    def test_list_containing_itself(self) -> None:
        # Arrange
        items: list = [1]
        items.append(items)

        # Act
        value = to_value(items)

        # Assert
        assert list(value)[1] == ScalarValue(Marker(CYCLE_MARKER))

    def test_shared_reference_is_not_a_cycle(self) -> None:
        # Arrange
        shared = [1]

        # Act
        value = to_value({"x": shared, "y": shared})

        # Assert
        assert all(isinstance(v, ListValue) for _, v in value.entries())

    def test_depth_limit(self) -> None:
        value = to_value([[[1]]], max_depth=2)
        assert list(list(value)[0])[0] == ScalarValue(Marker(DEPTH_MARKER))

    def test_markers_render_unquoted(self) -> None:
        assert ScalarValue(Marker(CYCLE_MARKER)).flat() == CYCLE_MARKER


class TestFlatForm:
    """Tests for the single-line rendering used when flattening."""

    @pytest.mark.parametrize(
        "obj",
        [
            {"a": 1, "b": "x"},
            [1, "a", None],
            [{"a": True}],
            {"n": None, "f": 1.5},
        ],
    )
    def test_matches_python_repr(self, obj: object) -> None:
        assert to_value(obj).flat() == repr(obj)

    def test_binary_flat_is_decimal_list(self) -> None:
        assert BinaryValue(b"\x01\x02").flat() == "[1, 2]"
