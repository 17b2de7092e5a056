"""Schema walking exports."""

from .schema_nodes import SchemaShape, classify_schema_node
from .schema_walker import SchemaMapper, walk_schema

__all__ = [
    "SchemaMapper",
    "SchemaShape",
    "classify_schema_node",
    "walk_schema",
]
