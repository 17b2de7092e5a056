"""Schema conversion entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from oas_schema_mapper.configuration import OutputSettings


@dataclass(frozen=True)
class ConversionRequest:
    """Input contract for converting document schemas."""

    document_path: str
    schema_names: tuple[str, ...] = ()
    output_dir: str | None = None
    config_path: str | None = None


@dataclass(frozen=True)
class ConvertedSchema:
    """One named component schema mapped to JSON Schema."""

    name: str
    json_schema: dict[str, Any]


@dataclass(frozen=True)
class ConversionOutcome:
    """Output contract for one completed conversion."""

    schemas: tuple[ConvertedSchema, ...]
    output_paths: tuple[Path, ...] = ()
    output_settings: OutputSettings = OutputSettings()
