"""Mapping context entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MappingContext:
    """Enclosing document and label for one mapping call."""

    document: Mapping[str, Any] | None = None
    schema_name: str | None = None

    def describe(self) -> str:
        return f"schema '{self.schema_name}'" if self.schema_name else "schema"
