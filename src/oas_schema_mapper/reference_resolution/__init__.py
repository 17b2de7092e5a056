"""Reference resolution exports."""

from .reference_pointers import ReferencePointer, escape_pointer_segment, parse_reference_pointer
from .reference_resolver import (
    DEFAULT_SUPPORTED_PREFIXES,
    ReferenceResolutionError,
    ReferenceResolutionErrorKind,
    inline_references,
    resolve_reference,
)

__all__ = [
    "DEFAULT_SUPPORTED_PREFIXES",
    "ReferencePointer",
    "ReferenceResolutionError",
    "ReferenceResolutionErrorKind",
    "escape_pointer_segment",
    "inline_references",
    "parse_reference_pointer",
    "resolve_reference",
]
