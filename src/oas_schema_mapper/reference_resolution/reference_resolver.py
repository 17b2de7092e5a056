"""Local ``$ref`` resolution service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from oas_schema_mapper.schema_walking import SchemaShape, classify_schema_node, walk_schema
from oas_schema_mapper.schema_walking.schema_nodes import REFERENCE_KEYWORD

from .reference_pointers import ReferencePointer, ReferencePointerError, parse_reference_pointer

logger = logging.getLogger(__name__)

DEFAULT_SUPPORTED_PREFIXES: tuple[str, ...] = ("#/components/schemas",)


class ReferenceResolutionErrorKind(str, Enum):
    """Reasons a ``$ref`` cannot be followed."""

    UNRESOLVED_PATH = "unresolved-path"
    UNSUPPORTED_REFERENCE_TARGET = "unsupported-reference-target"
    NOT_A_REFERENCE = "not-a-reference"
    CIRCULAR_REFERENCE = "circular-reference"


class ReferenceResolutionError(Exception):
    """Raised when a reference node cannot be resolved against its document."""

    def __init__(self, kind: ReferenceResolutionErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


def resolve_reference(
    document: Mapping[str, Any],
    reference_node: Mapping[str, Any],
    *,
    supported_prefixes: Sequence[str] = DEFAULT_SUPPORTED_PREFIXES,
) -> Any:
    """Return the document value a reference node points at, unmodified.

    Args:
      document: Root document the pointer is evaluated against.
      reference_node: Schema node holding a ``#/...`` string in ``$ref``.
      supported_prefixes: Pointer prefixes references may point below.

    Raises:
      ReferenceResolutionError: If the node is not a reference, points outside
        the supported prefixes, or names a path missing from the document.
    """
    if classify_schema_node(reference_node) is not SchemaShape.REFERENCE:
        raise ReferenceResolutionError(
            ReferenceResolutionErrorKind.NOT_A_REFERENCE,
            "Reference node must contain a string $ref.",
        )

    pointer = _parse_supported_pointer(reference_node[REFERENCE_KEYWORD], supported_prefixes)
    current: Any = document
    for depth, segment in enumerate(pointer.segments):
        if not isinstance(current, Mapping) or segment not in current:
            missing_path = "/".join(pointer.segments[: depth + 1])
            raise ReferenceResolutionError(
                ReferenceResolutionErrorKind.UNRESOLVED_PATH,
                f"Could not resolve $ref '{pointer.raw}': '#/{missing_path}' does not exist.",
            )
        current = current[segment]

    logger.debug("Resolved $ref %s", pointer.raw)
    return current


def inline_references(
    document: Mapping[str, Any],
    schema: Any,
    *,
    supported_prefixes: Sequence[str] = DEFAULT_SUPPORTED_PREFIXES,
) -> Any:
    """Return ``schema`` with every reference node replaced by its target.

    Targets are inlined recursively. Keys next to ``$ref`` are dropped.

    Raises:
      ReferenceResolutionError: On any resolution failure, or when a reference
        is reached again while its own target is being expanded.
    """
    return _inline(document, schema, supported_prefixes, expanding=())


def _inline(
    document: Mapping[str, Any],
    schema: Any,
    supported_prefixes: Sequence[str],
    expanding: tuple[str, ...],
) -> Any:
    def _replace_reference(node: dict[str, Any]) -> Any:
        if classify_schema_node(node) is not SchemaShape.REFERENCE:
            return node
        ref = node[REFERENCE_KEYWORD]
        if ref in expanding:
            cycle = " -> ".join((*expanding, ref))
            raise ReferenceResolutionError(
                ReferenceResolutionErrorKind.CIRCULAR_REFERENCE,
                f"Circular $ref cannot be inlined: {cycle}",
            )
        if len(node) > 1:
            logger.debug("Dropping keys next to $ref %s: %s", ref, sorted(set(node) - {"$ref"}))
        target = resolve_reference(document, node, supported_prefixes=supported_prefixes)
        return _inline(document, target, supported_prefixes, (*expanding, ref))

    return walk_schema(schema, _replace_reference)


def _parse_supported_pointer(value: str, supported_prefixes: Sequence[str]) -> ReferencePointer:
    try:
        pointer = parse_reference_pointer(value)
        prefixes = [parse_reference_pointer(prefix) for prefix in supported_prefixes]
    except ReferencePointerError as exc:
        raise ReferenceResolutionError(
            ReferenceResolutionErrorKind.UNSUPPORTED_REFERENCE_TARGET, str(exc)
        ) from exc

    for prefix in prefixes:
        if pointer.starts_with(prefix) and len(pointer.segments) > len(prefix.segments):
            return pointer
    raise ReferenceResolutionError(
        ReferenceResolutionErrorKind.UNSUPPORTED_REFERENCE_TARGET,
        f"Unsupported $ref '{value}': references must point below "
        f"{', '.join(supported_prefixes)}.",
    )
