"""GraphQL names primitive types and conversion rules.

This module defines the GraphQL name pattern, strongly-typed aliases used
by schema models, and the conversion applied to schema names before they
are used as TypeScript identifiers in generated code.
"""

from re import ASCII
from re import compile as regexp
from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import Field

if TYPE_CHECKING:
    from graphql_zod.config import CodegenConfig

#: Base pattern for all GraphQL names.
#: Names start with a letter or underscore and contain letters, digits, or underscores.
_NAME_PATTERN = r'[_A-Za-z][_0-9A-Za-z]*'

#: Names of root operation types.
ROOT_OPERATION_PATTERN = regexp(
    r'^(Query|Mutation|Subscription)$',
    flags=ASCII,
)

#: Suffix appended to every generated schema identifier.
SCHEMA_SUFFIX = 'Schema'

type NamingConvention = Literal['keep', 'pascalCase']

TypeName = Annotated[
    str, Field(
        pattern=rf'^{_NAME_PATTERN}$',
        title='Type name',
        description=(
            'Name of a GraphQL type as declared in the schema. '
            'Names must start with a letter or underscore and may '
            'contain letters, digits, or underscores.'
        ),
        examples=[
            'User',
            'CreateUserInput',
            'DateTime',
        ],
    ),
]


#: Word boundaries inside a name segment: `userRole` and `HTTPHeader`.
WORD_BOUNDARY_PATTERNS = (
    regexp(r'([a-z0-9])([A-Z])', flags=ASCII),
    regexp(r'([A-Z])([A-Z][a-z])', flags=ASCII),
)


def split_words(segment: str) -> list[str]:
    """Split a name segment into words at case boundaries.

    A lower-case letter or digit followed by an upper-case letter starts
    a new word, and so does the last capital of an acronym followed by a
    lower-case letter (`HTTPHeader` is `HTTP`, `Header`).
    """
    for pattern in WORD_BOUNDARY_PATTERNS:
        segment = pattern.sub(r'\1 \2', segment)

    return segment.split()


def pascal_case(name: str) -> str:
    """Convert every underscore-separated segment of a name to PascalCase.

    Each word of a segment keeps an upper-case initial and the rest of
    it is lower-cased, so `HTTPHeader` becomes `HttpHeader`. Underscores
    are preserved, so `user_role` becomes `User_Role` and `__Private`
    stays `__Private`.

    Args:
        name: Raw schema name.

    Returns:
        Converted name.
    """
    return '_'.join(
        ''.join(word[:1].upper() + word[1:].lower() for word in split_words(segment))
        for segment in name.split('_')
    )


def convert_name(name: str, config: 'CodegenConfig') -> str:
    """Convert a schema name into a generated TypeScript identifier.

    Args:
        name: Raw schema name.
        config: Generator configuration providing the naming convention,
            prefix, and suffix.

    Returns:
        Converted identifier.
    """
    if config.naming_convention == 'pascalCase':
        name = pascal_case(name)

    return f'{config.types_prefix}{name}{config.types_suffix}'


def is_root_operation(name: str) -> bool:
    """Return whether a type name denotes a root operation type."""
    return ROOT_OPERATION_PATTERN.match(name) is not None
