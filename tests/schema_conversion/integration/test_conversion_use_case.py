"""Schema conversion use-case integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from oas_schema_mapper.oas_mapping import JSON_SCHEMA_DRAFT_04
from oas_schema_mapper.schema_conversion import (
    ConversionError,
    ConversionRequest,
    execute_schema_conversion,
)


def _sample_document_path() -> Path:
    return Path(__file__).resolve().parents[3] / "samples" / "petstore-openapi.yaml"


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_converts_all_component_schemas_of_sample_document() -> None:
    outcome = execute_schema_conversion(
        ConversionRequest(document_path=str(_sample_document_path()))
    )

    assert [schema.name for schema in outcome.schemas] == ["Pet", "Owner", "PetOrOwner"]
    assert outcome.output_paths == ()
    pet = outcome.schemas[0].json_schema
    assert pet["$schema"] == JSON_SCHEMA_DRAFT_04
    assert pet["properties"]["tag"] == {"type": ["string", "null"]}
    assert pet["properties"]["owner"] == {"$ref": "#/components/schemas/Owner"}
    assert pet["additionalProperties"] is False
    assert pet["required"] == ["id", "name"]


def test_converts_selected_schema_with_inlined_references(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "references:\n  inline: true\n")

    outcome = execute_schema_conversion(
        ConversionRequest(
            document_path=str(_sample_document_path()),
            schema_names=("Pet",),
            config_path=str(config_path),
        )
    )

    owner = outcome.schemas[0].json_schema["properties"]["owner"]
    assert owner == {
        "type": "object",
        "properties": {
            "email": {"type": ["string", "null"]},
            "nicknames": {"type": ["array", "null"], "items": {"type": "string"}},
        },
    }


def test_writes_one_file_per_schema(tmp_path: Path) -> None:
    output_dir = tmp_path / "out" / "schemas"

    outcome = execute_schema_conversion(
        ConversionRequest(
            document_path=str(_sample_document_path()),
            schema_names=("Owner", "Pet"),
            output_dir=str(output_dir),
        )
    )

    assert outcome.output_paths == (
        (output_dir / "Owner.json").resolve(),
        (output_dir / "Pet.json").resolve(),
    )
    written = json.loads((output_dir / "Owner.json").read_text(encoding="utf-8"))
    assert written == outcome.schemas[0].json_schema


def test_unknown_schema_name_raises_conversion_error() -> None:
    with pytest.raises(ConversionError, match="Missing"):
        execute_schema_conversion(
            ConversionRequest(
                document_path=str(_sample_document_path()), schema_names=("Missing",)
            )
        )


def test_invalid_schema_raises_conversion_error(tmp_path: Path) -> None:
    document_path = _write_file(
        tmp_path / "openapi.yaml",
        """
openapi: 3.1.0
components:
  schemas:
    Tag:
      type: [string, "null"]
""",
    )

    with pytest.raises(ConversionError, match="type must be a single string"):
        execute_schema_conversion(ConversionRequest(document_path=str(document_path)))


def test_circular_inlining_raises_conversion_error(tmp_path: Path) -> None:
    document_path = _write_file(
        tmp_path / "openapi.yaml",
        """
components:
  schemas:
    Node:
      type: object
      properties:
        next:
          $ref: "#/components/schemas/Node"
""",
    )
    config_path = _write_file(tmp_path / "config.yaml", "references:\n  inline: true\n")

    with pytest.raises(ConversionError, match="Circular"):
        execute_schema_conversion(
            ConversionRequest(document_path=str(document_path), config_path=str(config_path))
        )


def test_document_without_schemas_raises_conversion_error(tmp_path: Path) -> None:
    document_path = _write_file(tmp_path / "openapi.yaml", "openapi: 3.0.3\npaths: {}\n")

    with pytest.raises(ConversionError, match="No component schemas"):
        execute_schema_conversion(ConversionRequest(document_path=str(document_path)))


def test_missing_document_raises_conversion_error(tmp_path: Path) -> None:
    with pytest.raises(ConversionError, match="not found"):
        execute_schema_conversion(
            ConversionRequest(document_path=str(tmp_path / "missing.yaml"))
        )


@pytest.mark.parametrize("name", ["../escape", "nested/Pet", "..", "back\\slash"])
def test_unsafe_schema_name_is_rejected_before_writing(tmp_path: Path, name: str) -> None:
    document_path = _write_file(
        tmp_path / "openapi.json",
        json.dumps({"components": {"schemas": {"Safe": {"type": "string"}, name: {}}}}),
    )
    output_dir = tmp_path / "out"

    with pytest.raises(ConversionError, match="cannot be used as an output file name"):
        execute_schema_conversion(
            ConversionRequest(document_path=str(document_path), output_dir=str(output_dir))
        )

    assert not output_dir.exists()
    assert not (tmp_path / "escape.json").exists()
