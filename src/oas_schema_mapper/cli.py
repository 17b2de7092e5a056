"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from oas_schema_mapper.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from oas_schema_mapper.document_loading import DocumentError, load_openapi_document
from oas_schema_mapper.schema_conversion import (
    ConversionError,
    ConversionRequest,
    execute_schema_conversion,
    render_schemas,
)

_PACKAGE_LOGGER = logging.getLogger("oas_schema_mapper")
_PACKAGE_LOGGER.addHandler(logging.NullHandler())


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="oas-schema-mapper")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
def cli(verbose: bool) -> None:
    """Convert OpenAPI schema objects into JSON Schema draft-04."""
    if verbose and _PACKAGE_LOGGER.level != logging.DEBUG:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        _PACKAGE_LOGGER.addHandler(handler)
        _PACKAGE_LOGGER.setLevel(logging.DEBUG)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration with the default settings and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="list-schemas")
@click.option(
    "--document",
    "document_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON OpenAPI document",
)
def list_schemas(document_path: str) -> None:
    """List the component schema names of an OpenAPI document."""
    try:
        document = load_openapi_document(document_path)
    except (DocumentError, OSError) as exc:
        raise CliError(str(exc)) from exc
    for name in document.schema_names():
        click.echo(name)


@cli.command(name="convert")
@click.option(
    "--document",
    "document_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON OpenAPI document",
)
@click.option(
    "--schema",
    "schema_names",
    multiple=True,
    help="Component schema name to convert; repeat for several. Defaults to all.",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Optional directory for writing one <name>.json file per schema",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML configuration file",
)
def convert(
    document_path: str,
    schema_names: tuple[str, ...],
    output_dir: str | None,
    config_path: str | None,
) -> None:
    """Convert component schemas of an OpenAPI document to JSON Schema."""
    try:
        outcome = execute_schema_conversion(
            ConversionRequest(
                document_path=document_path,
                schema_names=tuple(schema_names),
                output_dir=output_dir,
                config_path=config_path,
            )
        )
    except ConversionError as exc:
        raise CliError(str(exc)) from exc
    if outcome.output_paths:
        for path in outcome.output_paths:
            click.echo(str(path))
        return
    click.echo(render_schemas(outcome))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
