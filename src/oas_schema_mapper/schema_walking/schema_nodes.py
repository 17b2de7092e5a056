"""Schema node shapes and structural keywords."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

REFERENCE_KEYWORD = "$ref"
PROPERTIES_KEYWORD = "properties"
ITEMS_KEYWORD = "items"
ADDITIONAL_PROPERTIES_KEYWORD = "additionalProperties"
COMBINATOR_KEYWORDS: tuple[str, ...] = ("oneOf", "anyOf", "allOf")


class SchemaShape(str, Enum):
    """Recognized shapes of one schema position."""

    REFERENCE = "reference"
    COMBINATOR = "combinator"
    OBJECT = "object"
    ARRAY = "array"
    LEAF = "leaf"
    PASSTHROUGH = "passthrough"


def classify_schema_node(node: Any) -> SchemaShape:
    """Return the shape of a schema position, by keyword priority."""
    if not isinstance(node, Mapping):
        return SchemaShape.PASSTHROUGH
    if isinstance(node.get(REFERENCE_KEYWORD), str):
        return SchemaShape.REFERENCE
    if any(keyword in node for keyword in COMBINATOR_KEYWORDS):
        return SchemaShape.COMBINATOR
    if PROPERTIES_KEYWORD in node or isinstance(node.get(ADDITIONAL_PROPERTIES_KEYWORD), Mapping):
        return SchemaShape.OBJECT
    if ITEMS_KEYWORD in node:
        return SchemaShape.ARRAY
    return SchemaShape.LEAF


def is_sequence_value(value: Any) -> bool:
    """True for JSON arrays as loaded into Python (lists and tuples)."""
    return isinstance(value, (list, tuple))
