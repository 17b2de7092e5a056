"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from oas_schema_mapper.reference_resolution import DEFAULT_SUPPORTED_PREFIXES


@dataclass(frozen=True)
class ReferenceSettings:
    """Where references may point and whether targets are inlined."""

    supported_prefixes: tuple[str, ...] = DEFAULT_SUPPORTED_PREFIXES
    inline: bool = False


@dataclass(frozen=True)
class OutputSettings:
    """JSON rendering options for converted schemas."""

    indent: int = 2
    sort_keys: bool = False


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    references: ReferenceSettings = field(default_factory=ReferenceSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
