"""CLI utilities for graphql-zod.

Generates a TypeScript module of zod validators from GraphQL SDL files
and prints the JSON Schema of the configuration file.
"""

from json import dumps
from pathlib import Path
from typing import TYPE_CHECKING

from click import ClickException, File, argument, echo, group, option
from click import Path as PathParam

from graphql_zod.config import CodegenConfig, load_config
from graphql_zod.errors import CodegenError
from graphql_zod.generator import generate
from graphql_zod.loader import load_schema

if TYPE_CHECKING:
    from typing import TextIO

InputFilepath = PathParam(
    exists=True,
    dir_okay=False,
    readable=True,
    path_type=Path,
)


@group(help='Generate zod validators from GraphQL schemas.')
def cli() -> None:
    """Root CLI group for graphql-zod tools."""
    return None


@cli.command(
    name='generate',
    help='Generate zod validators for the types declared in SCHEMA files.',
)
@option(
    '-c', '--config',
    type=InputFilepath,
    default=None,
    help='YAML configuration file.',
)
@option(
    '-o', '--output',
    type=File('wt'),
    default='-',
    help='Output file for the generated module (standard output by default).',
)
@argument(
    'schema',
    type=InputFilepath,
    nargs=-1,
    required=True,
)
def generate_module(config: Path | None, output: 'TextIO', schema: tuple[Path, ...]) -> None:
    """Generate a zod module from SDL files.

    Args:
        config: Optional configuration file.
        output: Output stream.
        schema: SDL files, concatenated in the given order.
    """
    filename = schema[0].as_posix() if len(schema) == 1 else None
    source = '\n'.join(path.read_text() for path in schema)

    try:
        document = load_schema(source, filename)
        module = generate(document, load_config(config))
    except CodegenError as base:
        raise ClickException(str(base)) from base

    output.write(module.render())


@cli.command(
    name='config-schema',
    help='Print the JSON Schema of the configuration file.',
)
def print_config_schema() -> None:
    """Generate and print the configuration JSON Schema."""
    schema = {
        **CodegenConfig.model_json_schema(),
        'title': 'graphql-zod',
        'description': 'Configuration of the graphql-zod generator',
    }

    echo(dumps(schema, ensure_ascii=False, sort_keys=True, indent=4))


if __name__ == '__main__':
    cli()
