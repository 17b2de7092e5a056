"""Schema conversion use-case service."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from oas_schema_mapper.configuration import (
    Configuration,
    ConfigurationError,
    OutputSettings,
    default_configuration,
    load_configuration,
)
from oas_schema_mapper.document_loading import DocumentError, OpenApiDocument, load_openapi_document
from oas_schema_mapper.oas_mapping import (
    MappingContext,
    SchemaValidationError,
    map_oas_schema_to_json_schema,
)
from oas_schema_mapper.reference_resolution import (
    ReferenceResolutionError,
    inline_references,
    resolve_reference,
)

from .conversion_contracts import ConversionOutcome, ConversionRequest, ConvertedSchema

logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """Raised when a conversion use case cannot be completed."""


def execute_schema_conversion(request: ConversionRequest) -> ConversionOutcome:
    """Convert the requested component schemas and optionally write them to disk."""
    try:
        configuration = (
            load_configuration(request.config_path)
            if request.config_path
            else default_configuration()
        )
        document = load_openapi_document(request.document_path)
    except (ConfigurationError, DocumentError, OSError) as exc:
        raise ConversionError(str(exc)) from exc

    schema_names = request.schema_names or document.schema_names()
    if not schema_names:
        raise ConversionError(f"No component schemas found in {request.document_path}.")

    try:
        schemas = tuple(
            _convert_schema(document, name, configuration) for name in schema_names
        )
    except (ReferenceResolutionError, SchemaValidationError) as exc:
        raise ConversionError(str(exc)) from exc

    output_paths: tuple[Path, ...] = ()
    if request.output_dir:
        try:
            output_paths = _write_schemas(schemas, Path(request.output_dir), configuration.output)
        except OSError as exc:
            raise ConversionError(str(exc)) from exc

    return ConversionOutcome(
        schemas=schemas, output_paths=output_paths, output_settings=configuration.output
    )


def render_schemas(outcome: ConversionOutcome) -> str:
    """Render converted schemas as JSON text; several schemas are keyed by name."""
    if len(outcome.schemas) == 1:
        payload: object = outcome.schemas[0].json_schema
    else:
        payload = {schema.name: schema.json_schema for schema in outcome.schemas}
    return _dump_json(payload, outcome.output_settings)


def _convert_schema(
    document: OpenApiDocument, name: str, configuration: Configuration
) -> ConvertedSchema:
    prefixes = configuration.references.supported_prefixes
    schema = resolve_reference(
        document.root, document.schema_reference(name), supported_prefixes=prefixes
    )
    if configuration.references.inline:
        schema = inline_references(document.root, schema, supported_prefixes=prefixes)
    json_schema = map_oas_schema_to_json_schema(
        schema, MappingContext(document=document.root, schema_name=name)
    )
    logger.debug("Converted component schema %s", name)
    return ConvertedSchema(name=name, json_schema=json_schema)


def _write_schemas(
    schemas: tuple[ConvertedSchema, ...], output_dir: Path, settings: OutputSettings
) -> tuple[Path, ...]:
    file_names = [_output_file_name(schema.name) for schema in schemas]
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for schema, file_name in zip(schemas, file_names, strict=True):
        destination = output_dir / file_name
        destination.write_text(_dump_json(schema.json_schema, settings) + "\n", encoding="utf-8")
        written.append(destination.resolve())
    return tuple(written)


def _output_file_name(name: str) -> str:
    if name in ("", ".", "..") or "/" in name or "\\" in name:
        raise ConversionError(f"Schema name '{name}' cannot be used as an output file name.")
    return f"{name}.json"


def _dump_json(payload: object, settings: OutputSettings) -> str:
    return json.dumps(payload, indent=settings.indent, sort_keys=settings.sort_keys)
