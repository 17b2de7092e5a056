"""Recursive schema tree walker."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .schema_nodes import (
    ADDITIONAL_PROPERTIES_KEYWORD,
    COMBINATOR_KEYWORDS,
    ITEMS_KEYWORD,
    PROPERTIES_KEYWORD,
    is_sequence_value,
)

SchemaMapper = Callable[[dict[str, Any]], Any]


def walk_schema(schema: Any, mapper: SchemaMapper) -> Any:
    """Rebuild ``schema`` bottom-up, applying ``mapper`` to every subschema.

    Children are walked first, so ``mapper`` receives a fresh copy of the
    current node whose schema-valued children are already mapped. Values that
    are not mappings (``None``, booleans) are returned unchanged.
    """
    if not isinstance(schema, Mapping):
        return schema

    node = dict(schema)

    properties = node.get(PROPERTIES_KEYWORD)
    if isinstance(properties, Mapping):
        node[PROPERTIES_KEYWORD] = {
            name: walk_schema(child, mapper) for name, child in properties.items()
        }

    items = node.get(ITEMS_KEYWORD)
    if isinstance(items, Mapping):
        node[ITEMS_KEYWORD] = walk_schema(items, mapper)

    additional_properties = node.get(ADDITIONAL_PROPERTIES_KEYWORD)
    if isinstance(additional_properties, Mapping):
        node[ADDITIONAL_PROPERTIES_KEYWORD] = walk_schema(additional_properties, mapper)

    for keyword in COMBINATOR_KEYWORDS:
        alternatives = node.get(keyword)
        if is_sequence_value(alternatives):
            node[keyword] = type(alternatives)(
                walk_schema(child, mapper) for child in alternatives
            )

    return mapper(node)
