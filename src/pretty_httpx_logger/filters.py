"""Filter arguments passed to user-supplied traffic filters.

A filter decides per request whether anything is printed:

    def only_json(request: httpx.Request, args: FilterArgs) -> bool:
        return not args.is_response or args.has_json_data

    PrettyHttpxLogger(filter=only_json)
"""

from __future__ import annotations

__all__ = ["FilterArgs", "TrafficFilter"]

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

import httpx


@dataclass(frozen=True, slots=True)
class FilterArgs:
    """What a filter sees besides the request.

    Attributes:
        is_response: False for the request hook, True for responses and errors.
        data: Decoded request body when is_response is False,
            decoded response body otherwise (None when there is no body).
    """

    is_response: bool
    data: Any = None

    @property
    def has_string_data(self) -> bool:
        return isinstance(self.data, str)

    @property
    def has_map_data(self) -> bool:
        return isinstance(self.data, Mapping)

    @property
    def has_list_data(self) -> bool:
        return isinstance(self.data, list)

    @property
    def has_binary_data(self) -> bool:
        return isinstance(self.data, (bytes, bytearray))

    @property
    def has_json_data(self) -> bool:
        return self.has_map_data or self.has_list_data


# Return False to skip printing
TrafficFilter = Callable[[httpx.Request, FilterArgs], bool]
