"""OpenAPI schema object to JSON Schema draft-04 mapping service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from oas_schema_mapper.schema_walking import SchemaShape, classify_schema_node, walk_schema
from oas_schema_mapper.schema_walking.schema_nodes import ITEMS_KEYWORD, is_sequence_value

from .mapping_context import MappingContext

logger = logging.getLogger(__name__)

JSON_SCHEMA_DRAFT_04 = "http://json-schema.org/draft-04/schema#"

_NULLABLE_KEYWORD = "nullable"
_TYPE_KEYWORD = "type"
_SCHEMA_KEYWORD = "$schema"


class SchemaValidationErrorKind(str, Enum):
    """Reasons an OpenAPI schema object is rejected."""

    INVALID_TYPE_ARRAY = "invalid-type-array"
    INVALID_ITEMS_ARRAY = "invalid-items-array"
    INVALID_SCHEMA_NODE = "invalid-schema-node"


class SchemaValidationError(Exception):
    """Raised when an OpenAPI schema object cannot be mapped."""

    def __init__(self, kind: SchemaValidationErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


def map_oas_schema_to_json_schema(
    schema: Mapping[str, Any], context: MappingContext | None = None
) -> dict[str, Any]:
    """Return a draft-04 JSON Schema equivalent of an OpenAPI schema object.

    Every subschema is validated and has ``nullable`` folded into ``type``.
    The ``$schema`` identifier is added to the root only.

    Raises:
      SchemaValidationError: If any node uses an array ``type``, tuple-form
        ``items``, or the root is not a schema object.
    """
    resolved_context = context or MappingContext()
    if not isinstance(schema, Mapping):
        raise SchemaValidationError(
            SchemaValidationErrorKind.INVALID_SCHEMA_NODE,
            f"Invalid {resolved_context.describe()}: root must be a schema object.",
        )

    logger.debug("Mapping %s to JSON Schema draft-04", resolved_context.describe())

    def _map_node(node: dict[str, Any]) -> dict[str, Any]:
        return _map_schema_node(node, resolved_context)

    mapped = walk_schema(schema, _map_node)
    mapped.pop(_SCHEMA_KEYWORD, None)
    return {_SCHEMA_KEYWORD: JSON_SCHEMA_DRAFT_04, **mapped}


def _map_schema_node(node: dict[str, Any], context: MappingContext) -> dict[str, Any]:
    _validate_schema_node(node, context)
    if classify_schema_node(node) is SchemaShape.REFERENCE:
        node.pop(_NULLABLE_KEYWORD, None)
        return node
    return _rewrite_nullable(node)


def _validate_schema_node(node: Mapping[str, Any], context: MappingContext) -> None:
    if is_sequence_value(node.get(_TYPE_KEYWORD)):
        raise SchemaValidationError(
            SchemaValidationErrorKind.INVALID_TYPE_ARRAY,
            f"Invalid {context.describe()}: type must be a single string, "
            f"got an array {list(node[_TYPE_KEYWORD])!r}. Use nullable instead of 'null'.",
        )
    if is_sequence_value(node.get(ITEMS_KEYWORD)):
        raise SchemaValidationError(
            SchemaValidationErrorKind.INVALID_ITEMS_ARRAY,
            f"Invalid {context.describe()}: items must be a single schema object, "
            "tuple-form items arrays are not supported.",
        )


def _rewrite_nullable(node: dict[str, Any]) -> dict[str, Any]:
    if _NULLABLE_KEYWORD not in node:
        return node

    nullable = node.pop(_NULLABLE_KEYWORD)
    if not nullable:
        return node

    node_type = node.get(_TYPE_KEYWORD)
    if isinstance(node_type, str):
        node[_TYPE_KEYWORD] = [node_type, "null"]
    else:
        # without a type every value, null included, is already allowed
        node.pop(_TYPE_KEYWORD, None)
    return node
