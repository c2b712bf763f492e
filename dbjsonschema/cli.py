"""Command line entry point.

Converts one source from a YAML/JSON column definition file and prints the
resulting JSON Schema document.

Example:
    $ dbjsonschema --columns tables.yaml --source users --options options.yaml
"""

from __future__ import annotations

import json
import logging
import pathlib

import click
from pydantic import ValidationError
from suthing import FileHandle

from dbjsonschema.architecture.options import ConvertOptions
from dbjsonschema.converter import SchemaConverter
from dbjsonschema.errors import DbJsonSchemaError
from dbjsonschema.onto import Dialect
from dbjsonschema.provider import FileColumnProvider

logger = logging.getLogger(__name__)


def _load_map(path: pathlib.Path | None) -> dict | None:
    if path is None:
        return None
    return FileHandle.load(path)


@click.command()
@click.option(
    "--columns",
    "columns_path",
    type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path),
    required=True,
    help="YAML/JSON file of {source: {column: metadata}}.",
)
@click.option("--source", type=str, required=True, help="Source (table) to convert.")
@click.option(
    "--dialect",
    type=click.Choice([d.value for d in Dialect]),
    default=Dialect.MYSQL.value,
    show_default=True,
)
@click.option(
    "--options",
    "options_path",
    type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path),
    default=None,
    help="YAML file of conversion options.",
)
@click.option(
    "--type-map",
    type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path),
    default=None,
)
@click.option(
    "--pattern-map",
    type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path),
    default=None,
)
@click.option(
    "--format-map",
    type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path),
    default=None,
)
@click.option("--indent", type=int, default=2, show_default=True)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
    default=None,
    help="Write the document to a file instead of stdout.",
)
@click.option("--verbose", is_flag=True, default=False)
def main(
    columns_path: pathlib.Path,
    source: str,
    dialect: str,
    options_path: pathlib.Path | None,
    type_map: pathlib.Path | None,
    pattern_map: pathlib.Path | None,
    format_map: pathlib.Path | None,
    indent: int,
    output: pathlib.Path | None,
    verbose: bool,
):
    logging.basicConfig(level=logging.WARNING, handlers=[logging.StreamHandler()])
    logging.getLogger("dbjsonschema").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )

    try:
        converter = SchemaConverter(
            FileColumnProvider(columns_path),
            dialect=dialect,
            type_map=_load_map(type_map),
            pattern_map=_load_map(pattern_map),
            format_map=_load_map(format_map),
        )
        options = (
            ConvertOptions.from_yaml(options_path)
            if options_path is not None
            else ConvertOptions()
        )
        document = converter.convert(source, options)
    except (DbJsonSchemaError, ValidationError) as e:
        raise click.ClickException(str(e)) from e

    rendered = json.dumps(document, indent=indent, ensure_ascii=False)
    if output is not None:
        output.write_text(rendered + "\n")
        logger.info(f"Wrote schema of '{source}' to {output}")
    else:
        click.echo(rendered)


if __name__ == "__main__":
    main()
