"""GraphQL SDL loading.

This module parses GraphQL SDL with graphql-core and converts the type
definitions relevant to validation (inputs, objects, enums, unions and
scalars) into immutable schema models, preserving declaration order.

Type extensions are merged into the definition they extend. Interfaces,
schema definitions and directive definitions carry no validator and are
skipped.
"""

from typing import TYPE_CHECKING

from graphql import GraphQLError, Source, parse, parse_type
from graphql.language import (
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    ScalarTypeExtensionNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
    get_location,
)
from graphql.utilities import value_from_ast_untyped

from graphql_zod.errors import ErrorContext, SchemaLoadError
from graphql_zod.schema import (
    EnumDefinition,
    InputObjectDefinition,
    ObjectDefinition,
    ScalarDefinition,
    SchemaDocument,
    UnionDefinition,
)
from graphql_zod.signatures import DirectiveInvocation, FieldDescriptor, ListType, NamedType, NonNullType

if TYPE_CHECKING:
    from graphql.language import (
        DefinitionNode,
        DirectiveNode,
        FieldDefinitionNode,
        InputValueDefinitionNode,
        Node,
        TypeExtensionNode,
        TypeNode,
    )

    from graphql_zod.schema import TypeDefinition
    from graphql_zod.signatures import TypeSignature


def signature_from_node(node: 'TypeNode') -> 'TypeSignature':
    """Convert a graphql-core type node into a type signature.

    Raises:
        SchemaLoadError: If the node is not a named, list or non-null type.
    """
    match node:
        case NonNullTypeNode(type=inner):
            return NonNullType(of=signature_from_node(inner))
        case ListTypeNode(type=inner):
            return ListType(of=signature_from_node(inner))
        case NamedTypeNode(name=name):
            return NamedType(name=name.value)

    raise SchemaLoadError(f'Unsupported type node {node!r}')


def parse_signature(text: str) -> 'TypeSignature':
    """Parse a type signature written in SDL notation (`[String!]!`).

    Raises:
        SchemaLoadError: If the text is not a valid type reference.
    """
    try:
        return signature_from_node(parse_type(text))
    except GraphQLError as base:
        raise SchemaLoadError.from_graphql_error(base) from base


def directive_from_node(node: 'DirectiveNode') -> DirectiveInvocation:
    return DirectiveInvocation(
        name=node.name.value,
        arguments={
            argument.name.value: value_from_ast_untyped(argument.value)
            for argument in node.arguments or ()
        },
    )


def field_from_node(node: 'FieldDefinitionNode | InputValueDefinitionNode') -> FieldDescriptor:
    return FieldDescriptor(
        name=node.name.value,
        type=signature_from_node(node.type),
        directives=tuple(
            directive_from_node(directive)
            for directive in node.directives or ()
        ),
    )


def definition_from_node(node: 'DefinitionNode') -> 'TypeDefinition | None':
    """Convert a top-level definition node, or return `None` to skip it."""
    match node:
        case InputObjectTypeDefinitionNode():
            return InputObjectDefinition(
                name=node.name.value,
                fields=tuple(field_from_node(field) for field in node.fields or ()),
            )
        case ObjectTypeDefinitionNode():
            return ObjectDefinition(
                name=node.name.value,
                fields=tuple(field_from_node(field) for field in node.fields or ()),
            )
        case EnumTypeDefinitionNode():
            return EnumDefinition(
                name=node.name.value,
                values=tuple(value.name.value for value in node.values or ()),
            )
        case UnionTypeDefinitionNode():
            return UnionDefinition(
                name=node.name.value,
                members=tuple(member.name.value for member in node.types or ()),
            )
        case ScalarTypeDefinitionNode():
            return ScalarDefinition(name=node.name.value)

    return None


#: Extension nodes merged into the definition they extend.
EXTENSION_NODES = (
    InputObjectTypeExtensionNode,
    ObjectTypeExtensionNode,
    EnumTypeExtensionNode,
    UnionTypeExtensionNode,
    ScalarTypeExtensionNode,
)


def node_context(node: 'Node', filename: str | None) -> ErrorContext:
    """Build an error context pointing at a node of the parsed document."""
    context = ErrorContext(filename=filename)

    if node.loc is not None:
        location = get_location(node.loc.source, node.loc.start)
        context['line_num'] = location.line - 1
        context['column_num'] = location.column - 1
        context['source'] = node.loc.source.body

    return context


def merge_fields(definition: InputObjectDefinition | ObjectDefinition,
                 node: InputObjectTypeExtensionNode | ObjectTypeExtensionNode,
                 filename: str | None = None) -> tuple[FieldDescriptor, ...]:
    """Append the fields of an extension to the fields of a record.

    Raises:
        SchemaLoadError: If the extension redeclares a field.
    """
    fields = {field.name: field for field in definition.fields}

    for field_node in node.fields or ():
        field = field_from_node(field_node)
        if field.name in fields:
            raise SchemaLoadError(
                f'Field {definition.name}.{field.name} is defined more than once',
                context=node_context(field_node, filename),
            )
        fields[field.name] = field

    return tuple(fields.values())


def extend_definition(definition: 'TypeDefinition', node: 'TypeExtensionNode',
                      filename: str | None = None) -> 'TypeDefinition':
    """Merge the members declared by a type extension into its definition.

    Fields, values and members of the extension follow the ones the
    definition already has.

    Args:
        definition: Definition being extended.
        node: Extension node of the same type.
        filename: Optional source name used in error messages.

    Returns:
        Extended definition.

    Raises:
        SchemaLoadError: If the extension targets a type of another kind
            or redeclares a field.
    """
    match definition, node:
        case (InputObjectDefinition(), InputObjectTypeExtensionNode()) | (
            ObjectDefinition(), ObjectTypeExtensionNode(),
        ):
            return definition.model_copy(update={
                'fields': merge_fields(definition, node, filename),
            })
        case EnumDefinition(), EnumTypeExtensionNode():
            return definition.model_copy(update={
                'values': definition.values + tuple(value.name.value for value in node.values or ()),
            })
        case UnionDefinition(), UnionTypeExtensionNode():
            return definition.model_copy(update={
                'members': definition.members + tuple(member.name.value for member in node.types or ()),
            })
        case ScalarDefinition(), ScalarTypeExtensionNode():
            return definition

    raise SchemaLoadError(
        f'Type {definition.name!r} of kind {definition.kind} cannot be extended by {node.kind}',
        context=node_context(node, filename),
    )


def load_schema(source: str, filename: str | None = None) -> SchemaDocument:
    """Parse GraphQL SDL into a schema document.

    Args:
        source: SDL text.
        filename: Optional source name used in error messages.

    Returns:
        Schema document with definitions in declaration order.

    Raises:
        SchemaLoadError: If the SDL is invalid, declares a type twice, or
            extends a type it does not declare.
    """
    try:
        document = parse(Source(source, filename or 'GraphQL request'))
    except GraphQLError as base:
        raise SchemaLoadError.from_graphql_error(base, filename) from base

    definitions: dict[str, TypeDefinition] = {}
    extensions: list[TypeExtensionNode] = []

    for node in document.definitions:
        if isinstance(node, EXTENSION_NODES):
            extensions.append(node)
            continue
        if (definition := definition_from_node(node)) is None:
            continue
        if definition.name in definitions:
            raise SchemaLoadError(
                f'Type {definition.name!r} is defined more than once',
                context=node_context(node, filename),
            )
        definitions[definition.name] = definition

    for node in extensions:
        if (definition := definitions.get(node.name.value)) is None:
            raise SchemaLoadError(
                f'Cannot extend undefined type {node.name.value!r}',
                context=node_context(node, filename),
            )
        definitions[definition.name] = extend_definition(definition, node, filename)

    return SchemaDocument(definitions=tuple(definitions.values()))
