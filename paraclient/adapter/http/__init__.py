"""HTTP response mapping for the API client."""

from .response import (
    deserialize,
    get_entity,
    get_items,
    get_items_from_list,
    parse_bool,
)

__all__ = [
    "deserialize",
    "get_entity",
    "get_items",
    "get_items_from_list",
    "parse_bool",
]
