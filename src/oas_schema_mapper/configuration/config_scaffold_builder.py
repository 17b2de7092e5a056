"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "oas-schema-mapper.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Conversion configuration for oas-schema-mapper.
# Every setting is optional; remove a line to keep its default.

references:
  # $ref pointers must point below one of these local prefixes.
  supported_prefixes:
    - "#/components/schemas"
  # Replace $ref nodes with their targets before mapping to JSON Schema.
  inline: false

output:
  # Indentation of rendered JSON Schema documents.
  indent: 2
  sort_keys: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
