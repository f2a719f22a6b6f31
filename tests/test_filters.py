"""Tests for FilterArgs."""

from __future__ import annotations

import pytest

from pretty_httpx_logger.filters import FilterArgs


class TestFilterArgs:
    """Tests for the data shape predicates."""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ("text", (True, False, False, False, False)),
            ({"a": 1}, (False, True, False, False, True)),
            ([1, 2], (False, False, True, False, True)),
            (b"\x00", (False, False, False, True, False)),
            (None, (False, False, False, False, False)),
        ],
    )
    def test_predicates(self, data: object, expected: tuple[bool, ...]) -> None:
        # Arrange
        args = FilterArgs(is_response=True, data=data)

        # Act
        actual = (
            args.has_string_data,
            args.has_map_data,
            args.has_list_data,
            args.has_binary_data,
            args.has_json_data,
        )

        # Assert
        assert actual == expected

    def test_defaults_to_no_data(self) -> None:
        assert FilterArgs(is_response=False).data is None

    def test_is_immutable(self) -> None:
        args = FilterArgs(is_response=False)
        with pytest.raises(AttributeError):
            args.is_response = True  # type: ignore[misc]
