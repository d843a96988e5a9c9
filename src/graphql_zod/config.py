"""Generator configuration.

Configuration is resolved from a YAML file and from environment variables
prefixed with `GRAPHQL_ZOD_`. Explicit values (file contents) take
precedence over the environment.
"""

from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import SettingsConfigDict
from yaml import safe_load
from yaml.error import MarkedYAMLError

from graphql_zod.errors import ConfigError
from graphql_zod.models import SettingsModel
from graphql_zod.names import NamingConvention  # noqa: TC001

#: Primitive kinds of the builtin GraphQL scalars.
BUILTIN_SCALARS = {
    'ID': 'string',
    'String': 'string',
    'Boolean': 'boolean',
    'Int': 'number',
    'Float': 'number',
}

#: Refinement template of a single directive argument.
#: A method name, `[method, *args]` with `$N` placeholders, or a mapping
#: from argument values to either of these.
type ArgumentTemplate = str | list[str] | dict[str, str | list[str]]

ENV_PREFIX = 'GRAPHQL_ZOD_'


class CodegenConfig(SettingsModel):
    """Options consulted while compiling a schema into zod validators."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
    )

    scalars: dict[str, str] = Field(
        default_factory=dict,
        title='Scalar kinds',
        description=(
            'Primitive kind of custom scalars (`string`, `number`, `boolean`). '
            'Builtin scalars are always known. Scalars with any other kind '
            'fall back to the defined non-null validator.'
        ),
        examples=[{'DateTime': 'string', 'BigInt': 'number'}],
    )

    scalar_schemas: dict[str, str] = Field(
        default_factory=dict,
        title='Scalar validators',
        description=(
            'Literal zod expressions used for specific scalars. '
            'Takes precedence over the scalar kind.'
        ),
        examples=[{'Date': 'z.date()', 'Email': 'z.string().email()'}],
    )

    directives: dict[str, dict[str, ArgumentTemplate]] = Field(
        default_factory=dict,
        title='Directive refinements',
        description=(
            'Mapping of directive names to argument refinement templates. '
            'A template is a zod method name, a list of a method name and '
            'its arguments with `$1`, `$2`, ... placeholders, or a mapping '
            'from argument values to templates.'
        ),
        examples=[{
            'constraint': {
                'minLength': 'min',
                'startsWith': ['regex', '/^$1/'],
                'format': {'email': 'email', 'uri': 'url'},
            },
        }],
    )

    not_allow_empty_string: bool = Field(
        default=False,
        title='Reject empty strings',
        description='Require at least one character in non-null string fields.',
    )

    enums_as_types: bool = Field(
        default=False,
        title='Enums as string unions',
        description=(
            'Validate enums as string literal sets (`z.enum`) instead of '
            'native TypeScript enums (`z.nativeEnum`).'
        ),
    )

    with_object_type: bool = Field(
        default=False,
        title='Object types',
        description='Generate validators for output object types and unions.',
    )

    import_from: str | None = Field(
        default=None,
        title='Types module',
        description='Module that exports the TypeScript types of the schema.',
    )

    use_type_imports: bool = Field(
        default=False,
        title='Type-only imports',
        description='Use `import type` for schema types.',
    )

    naming_convention: NamingConvention = Field(
        default='pascalCase',
        title='Naming convention',
        description=(
            'Conversion applied to schema names in generated identifiers. '
            '`pascalCase` splits each underscore-separated segment into words '
            'at case boundaries and capitalizes them (`HTTPHeader` becomes '
            '`HttpHeader`), `keep` uses the schema name as is.'
        ),
    )

    types_prefix: str = Field(
        default='',
        title='Types prefix',
        description='Prefix added to every generated type identifier.',
    )

    types_suffix: str = Field(
        default='',
        title='Types suffix',
        description='Suffix added to every generated type identifier.',
    )

    def scalar_kind(self, name: str) -> str | None:
        """Return the primitive kind of a scalar, if known."""
        return {**BUILTIN_SCALARS, **self.scalars}.get(name)


def load_config(path: Path | None = None, **overrides: Any) -> CodegenConfig:  # noqa: ANN401
    """Load generator configuration from a YAML file.

    Args:
        path: Optional configuration file. An empty file is allowed.
        overrides: Explicit option values, applied over the file.

    Returns:
        Resolved configuration.

    Raises:
        ConfigError: If the file is not valid YAML, is not a mapping,
            or contains invalid option values.
    """
    content: dict[str, Any] = {}
    filename = None

    if path is not None:
        filename = path.as_posix()
        source = path.read_text()
        try:
            content = safe_load(source) or {}
        except MarkedYAMLError as base:
            raise ConfigError.from_yaml_error(base, filename, source) from base

        if not isinstance(content, dict):
            raise ConfigError('Configuration must be a mapping', context={'filename': filename})

    try:
        return CodegenConfig(**{**content, **overrides})
    except ValidationError as base:
        raise ConfigError.from_pydantic_error(base, filename) from base
