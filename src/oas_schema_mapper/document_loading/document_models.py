"""OpenAPI document entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from oas_schema_mapper.reference_resolution import escape_pointer_segment


@dataclass(frozen=True)
class OpenApiDocument:
    """Parsed OpenAPI document and where it was read from."""

    path: Path | None
    root: Mapping[str, Any]

    def schema_names(self) -> tuple[str, ...]:
        """Return ``components.schemas`` names in document order."""
        components = self.root.get("components")
        if not isinstance(components, Mapping):
            return ()
        schemas = components.get("schemas")
        if not isinstance(schemas, Mapping):
            return ()
        return tuple(str(name) for name in schemas)

    @staticmethod
    def schema_reference(name: str) -> dict[str, str]:
        return {"$ref": f"#/components/schemas/{escape_pointer_segment(name)}"}
