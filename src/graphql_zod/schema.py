"""Schema type definitions.

Immutable models describing the top-level type definitions of a GraphQL
schema, in declaration order. This is the type table consulted by name
resolution and the input of the per-kind emitters.
"""

from enum import StrEnum
from functools import cached_property
from typing import Annotated, Literal

from pydantic import Field

from graphql_zod.models import SchemaModel
from graphql_zod.names import TypeName  # noqa: TC001
from graphql_zod.signatures import FieldDescriptor  # noqa: TC001


class TypeKind(StrEnum):
    """Kind of a top-level type definition."""

    INPUT_OBJECT = 'input_object'
    OBJECT = 'object'
    ENUM = 'enum'
    UNION = 'union'
    SCALAR = 'scalar'


class BaseDefinition(SchemaModel):
    """Common part of all type definitions."""

    name: TypeName = Field(
        title='Type name',
        description='Name of the type as declared in the schema.',
    )


class InputObjectDefinition(BaseDefinition):
    """Input record (`input Point { ... }`)."""

    kind: Literal[TypeKind.INPUT_OBJECT] = TypeKind.INPUT_OBJECT

    fields: tuple[FieldDescriptor, ...] = Field(
        default=(),
        title='Fields',
        description='Declared fields, in declaration order.',
    )


class ObjectDefinition(BaseDefinition):
    """Output record (`type User { ... }`)."""

    kind: Literal[TypeKind.OBJECT] = TypeKind.OBJECT

    fields: tuple[FieldDescriptor, ...] = Field(
        default=(),
        title='Fields',
        description='Declared fields, in declaration order.',
    )


class EnumDefinition(BaseDefinition):
    """Enumeration (`enum Role { ADMIN USER }`)."""

    kind: Literal[TypeKind.ENUM] = TypeKind.ENUM

    values: tuple[str, ...] = Field(
        default=(),
        title='Values',
        description='Literal value names, in declaration order.',
    )


class UnionDefinition(BaseDefinition):
    """Union (`union Result = User | Error`)."""

    kind: Literal[TypeKind.UNION] = TypeKind.UNION

    members: tuple[TypeName, ...] = Field(
        default=(),
        title='Members',
        description='Member type names, in declaration order.',
    )


class ScalarDefinition(BaseDefinition):
    """Custom scalar (`scalar DateTime`)."""

    kind: Literal[TypeKind.SCALAR] = TypeKind.SCALAR


TypeDefinition = Annotated[
    InputObjectDefinition | ObjectDefinition | EnumDefinition | UnionDefinition | ScalarDefinition,
    Field(discriminator='kind'),
]


class SchemaDocument(SchemaModel):
    """All type definitions of a schema, in declaration order."""

    definitions: tuple[TypeDefinition, ...] = Field(
        default=(),
        title='Definitions',
        description='Top-level type definitions in declaration order.',
    )

    @cached_property
    def types(self) -> dict[str, TypeDefinition]:
        """Definitions indexed by type name."""
        return {definition.name: definition for definition in self.definitions}

    def get(self, name: str) -> TypeDefinition | None:
        """Return the definition of a type, if declared."""
        return self.types.get(name)
