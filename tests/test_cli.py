"""Tests for the command-line interface."""

from json import loads
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from graphql_zod.__main__ import cli

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def runner() -> CliRunner:
    """Provide a click test runner."""
    return CliRunner()


@pytest.fixture
def schema_file(tmp_path: 'Path') -> 'Path':
    """Provide a schema file with a single input type."""
    path = tmp_path / 'schema.graphql'
    path.write_text('input Point { x: Float!, y: Float }')

    return path


def test_generate_stdout(runner: CliRunner, schema_file: 'Path') -> None:
    """Print the generated module."""
    result = runner.invoke(cli, ['generate', str(schema_file)])

    assert result.exit_code == 0, result.output
    assert result.output.startswith("import { z } from 'zod'\n")
    assert '    x: z.number(),\n    y: z.number().nullish()\n' in result.output


def test_generate_file(runner: CliRunner, schema_file: 'Path', tmp_path: 'Path') -> None:
    """Write the generated module with configuration applied."""
    config = tmp_path / 'codegen.yml'
    config.write_text("import_from: './types'\n")
    output = tmp_path / 'schemas.ts'

    result = runner.invoke(cli, [
        'generate',
        '--config', str(config),
        '--output', str(output),
        str(schema_file),
    ])

    assert result.exit_code == 0, result.output
    assert "import { Point } from './types'" in output.read_text()


def test_generate_several_files(runner: CliRunner, schema_file: 'Path', tmp_path: 'Path') -> None:
    """Concatenate several schema files."""
    other = tmp_path / 'enums.graphql'
    other.write_text('enum Role { ADMIN }')

    result = runner.invoke(cli, ['generate', str(schema_file), str(other)])

    assert result.exit_code == 0, result.output
    assert 'export function PointSchema()' in result.output
    assert 'export const RoleSchema = z.nativeEnum(Role);' in result.output


def test_generate_invalid_schema(runner: CliRunner, tmp_path: 'Path') -> None:
    """Fail with a formatted message on invalid SDL."""
    path = tmp_path / 'schema.graphql'
    path.write_text('input {')

    result = runner.invoke(cli, ['generate', str(path)])

    assert result.exit_code == 1
    assert 'Invalid schema' in result.output
    assert 'schema.graphql' in result.output


def test_config_schema(runner: CliRunner) -> None:
    """Print the configuration JSON Schema."""
    result = runner.invoke(cli, ['config-schema'])

    assert result.exit_code == 0, result.output

    schema = loads(result.output)

    assert schema['title'] == 'graphql-zod'
    assert 'not_allow_empty_string' in schema['properties']


def test_generate_extension_file(runner: CliRunner, schema_file: 'Path', tmp_path: 'Path') -> None:
    """Merge a type extension declared in a separate file."""
    extension = tmp_path / 'extensions.graphql'
    extension.write_text('extend input Point { label: String! }')

    result = runner.invoke(cli, ['generate', str(schema_file), str(extension)])

    assert result.exit_code == 0, result.output
    assert '    y: z.number().nullish(),\n    label: z.string()\n' in result.output
