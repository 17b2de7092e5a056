"""OpenAPI to JSON Schema mapping exports."""

from .json_schema_mapper import (
    JSON_SCHEMA_DRAFT_04,
    SchemaValidationError,
    SchemaValidationErrorKind,
    map_oas_schema_to_json_schema,
)
from .mapping_context import MappingContext

__all__ = [
    "JSON_SCHEMA_DRAFT_04",
    "MappingContext",
    "SchemaValidationError",
    "SchemaValidationErrorKind",
    "map_oas_schema_to_json_schema",
]
