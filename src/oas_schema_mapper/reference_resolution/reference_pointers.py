"""Local JSON pointer parsing for ``$ref`` values."""

from __future__ import annotations

from dataclasses import dataclass

LOCAL_POINTER_PREFIX = "#/"


class ReferencePointerError(ValueError):
    """Raised when a ``$ref`` value is not a local document pointer."""


@dataclass(frozen=True)
class ReferencePointer:
    """Parsed ``#/...`` pointer with decoded path segments."""

    raw: str
    segments: tuple[str, ...]

    def starts_with(self, prefix: ReferencePointer) -> bool:
        return self.segments[: len(prefix.segments)] == prefix.segments


def parse_reference_pointer(value: str) -> ReferencePointer:
    """Split a local pointer into segments, decoding ``~1`` and ``~0``."""
    if not value.startswith(LOCAL_POINTER_PREFIX):
        raise ReferencePointerError(
            f"Only local references starting with '{LOCAL_POINTER_PREFIX}' are supported: {value}"
        )
    body = value[len(LOCAL_POINTER_PREFIX) :]
    segments = tuple(
        segment.replace("~1", "/").replace("~0", "~") for segment in body.split("/")
    )
    return ReferencePointer(raw=value, segments=segments)


def escape_pointer_segment(segment: str) -> str:
    return segment.replace("~", "~0").replace("/", "~1")
