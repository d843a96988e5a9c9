"""Field type signatures and field descriptors.

A type signature is the nested list/non-null/named tree declared for one
field, for example `[String!]!`. Signatures are a closed tagged union over
exactly three node kinds, discriminated by the `kind` field, so that every
consumer can match on them exhaustively.

All models are immutable; the compiler only reads them.
"""

from typing import Annotated, Any, Literal

from pydantic import Field

from graphql_zod.models import SchemaModel
from graphql_zod.names import TypeName  # noqa: TC001


class NamedType(SchemaModel):
    """Reference to a named type (`String`, `User`, ...)."""

    kind: Literal['named'] = 'named'

    name: TypeName = Field(
        title='Type name',
        description='Name of the referenced schema type.',
    )

    def __str__(self) -> str:
        return self.name


class ListType(SchemaModel):
    """List modifier (`[T]`)."""

    kind: Literal['list'] = 'list'

    of: 'TypeSignature' = Field(
        title='Element type',
        description='Signature of the list elements.',
    )

    def __str__(self) -> str:
        return f'[{self.of}]'


class NonNullType(SchemaModel):
    """Non-null modifier (`T!`).

    The GraphQL grammar forbids `T!!`, so a non-null node wraps either
    a named type or a list, never another non-null node.
    """

    kind: Literal['non_null'] = 'non_null'

    of: 'NullableSignature' = Field(
        title='Wrapped type',
        description='Signature of the required slot.',
    )

    def __str__(self) -> str:
        return f'{self.of}!'


#: Signatures allowed directly under a non-null modifier.
NullableSignature = Annotated[
    NamedType | ListType,
    Field(discriminator='kind'),
]

#: Any field type signature.
TypeSignature = Annotated[
    NamedType | ListType | NonNullType,
    Field(discriminator='kind'),
]

ListType.model_rebuild()
NonNullType.model_rebuild()


class DirectiveInvocation(SchemaModel):
    """Directive attached to a field (`@constraint(minLength: 3)`)."""

    name: str = Field(
        title='Directive name',
        description='Name of the directive without the leading `@`.',
    )

    arguments: dict[str, Any] = Field(
        default_factory=dict,
        title='Arguments',
        description=(
            'Directive arguments in declaration order. Values are plain '
            'Python values: strings, numbers, booleans, lists, mappings. '
            'Enum values are represented by their names.'
        ),
    )


class FieldDescriptor(SchemaModel):
    """Single field of an input or output record.

    A descriptor is the unit of work of the compiler: every field is
    compiled once, independently of its siblings.
    """

    name: str = Field(
        title='Field name',
        description='Declared name of the field.',
    )

    type: TypeSignature = Field(
        title='Type signature',
        description='Full type signature declared for the field.',
    )

    directives: tuple[DirectiveInvocation, ...] = Field(
        default=(),
        title='Directives',
        description='Directives attached to the field, in declaration order.',
    )
