"""Schema conversion domain exports."""

from .conversion_contracts import ConversionOutcome, ConversionRequest, ConvertedSchema
from .conversion_use_case import ConversionError, execute_schema_conversion, render_schemas

__all__ = [
    "ConversionRequest",
    "ConversionOutcome",
    "ConvertedSchema",
    "ConversionError",
    "execute_schema_conversion",
    "render_schemas",
]
