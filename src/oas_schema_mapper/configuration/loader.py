"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from oas_schema_mapper.reference_resolution import DEFAULT_SUPPORTED_PREFIXES
from oas_schema_mapper.reference_resolution.reference_pointers import LOCAL_POINTER_PREFIX

from .runtime_settings import Configuration, OutputSettings, ReferenceSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_configuration() -> Configuration:
    """Configuration used when no file is given."""
    return Configuration(path=None)


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    references = _parse_references_section(parsed.get("references"))
    output = _parse_output_section(parsed.get("output"))
    return Configuration(path=path, references=references, output=output)


def _parse_references_section(value: Any) -> ReferenceSettings:
    section = _optional_mapping(value, "references")
    supported_prefixes = _normalize_prefixes(
        section.get("supported_prefixes", list(DEFAULT_SUPPORTED_PREFIXES))
    )
    inline = _require_bool(section.get("inline", False), "references.inline")
    return ReferenceSettings(supported_prefixes=supported_prefixes, inline=inline)


def _parse_output_section(value: Any) -> OutputSettings:
    section = _optional_mapping(value, "output")
    indent = _require_positive_int(section.get("indent", 2), "output.indent")
    sort_keys = _require_bool(section.get("sort_keys", False), "output.sort_keys")
    return OutputSettings(indent=indent, sort_keys=sort_keys)


def _normalize_prefixes(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Sequence):
        raise ConfigurationError(
            "references.supported_prefixes must be a string or list of strings."
        )
    prefixes: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ConfigurationError("references.supported_prefixes entries must be strings.")
        stripped = item.strip().rstrip("/")
        if not stripped.startswith(LOCAL_POINTER_PREFIX):
            raise ConfigurationError(
                f"references.supported_prefixes entry '{item}' must start with "
                f"'{LOCAL_POINTER_PREFIX}'."
            )
        prefixes.append(stripped)
    if not prefixes:
        raise ConfigurationError("references.supported_prefixes must contain at least one prefix.")
    return tuple(prefixes)


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
