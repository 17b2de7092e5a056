"""OpenAPI document loading service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml

from .document_models import OpenApiDocument

logger = logging.getLogger(__name__)


class DocumentError(Exception):
    """Raised when an OpenAPI document cannot be read."""


def load_openapi_document(document_path: Path | str) -> OpenApiDocument:
    """Parse a YAML or JSON OpenAPI document from disk."""
    path = Path(document_path)
    if not path.exists():
        raise DocumentError(f"OpenAPI document not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentError(f"Failed to parse OpenAPI document {path}: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise DocumentError(f"OpenAPI document root must be a mapping: {path}")

    document = OpenApiDocument(path=path.resolve(), root=parsed)
    logger.debug("Loaded %s with %d component schemas", path, len(document.schema_names()))
    return document
