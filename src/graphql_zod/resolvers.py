"""Name and scalar resolution.

Resolution maps a named type reference to the base zod expression that
validates it:

- records and unions resolve to a call of their generated constructor
  (`UserSchema()`);
- enums resolve to their generated validator value (`RoleSchema`);
- anything else is a scalar, resolved from configured overrides or from
  its primitive kind.
"""

from typing import TYPE_CHECKING, NamedTuple
from warnings import warn

from graphql_zod.errors import CodegenWarning
from graphql_zod.expressions import ANY_SCHEMA, Expression
from graphql_zod.names import SCHEMA_SUFFIX, convert_name
from graphql_zod.schema import TypeKind
from graphql_zod.signatures import NamedType

if TYPE_CHECKING:
    from graphql_zod.config import CodegenConfig
    from graphql_zod.schema import SchemaDocument
    from graphql_zod.signatures import TypeSignature

#: Zod validators of scalar primitive kinds.
PRIMITIVE_SCHEMAS = {
    'string': Expression.zod('string'),
    'number': Expression.zod('number'),
    'boolean': Expression.zod('boolean'),
}


class ResolvedName(NamedTuple):
    """Classification of a named type reference."""

    kind: TypeKind
    display_name: str


class ScalarResolver:
    """Resolve scalars to primitive zod validators."""

    def __init__(self, config: 'CodegenConfig') -> None:
        self.config = config

    def primitive_kind(self, name: str) -> str | None:
        """Return the primitive kind of a scalar, if configured."""
        return self.config.scalar_kind(name)

    def resolve_scalar(self, name: str) -> Expression:
        """Resolve a scalar to a base validator expression.

        Overrides take precedence over the primitive kind. Scalars of an
        unknown kind produce a warning and the defined non-null fallback.

        Args:
            name: Scalar name.

        Returns:
            Base validator expression.
        """
        if override := self.config.scalar_schemas.get(name):
            return Expression(override)

        if schema := PRIMITIVE_SCHEMAS.get(self.primitive_kind(name) or ''):
            return schema

        warn(f'unhandled scalar name: {name}', category=CodegenWarning, stacklevel=2)

        return Expression(ANY_SCHEMA)


class NameResolver:
    """Classify named types against the schema type table."""

    def __init__(self, document: 'SchemaDocument', config: 'CodegenConfig') -> None:
        self.document = document
        self.config = config
        self.scalars = ScalarResolver(config)

    def resolve(self, name: str) -> ResolvedName:
        """Classify a type name and compute its display name.

        Names that are not declared records, enums, or unions are scalars.

        Args:
            name: Raw type name.

        Returns:
            Kind and converted display name.
        """
        definition = self.document.get(name)
        kind = definition.kind if definition is not None else TypeKind.SCALAR

        return ResolvedName(kind, convert_name(name, self.config))

    def resolve_schema(self, name: str) -> Expression:
        """Resolve a type name to its base validator expression.

        Args:
            name: Raw type name.

        Returns:
            Constructor call, enum validator reference, or scalar validator.
        """
        kind, display_name = self.resolve(name)

        match kind:
            case TypeKind.INPUT_OBJECT | TypeKind.OBJECT | TypeKind.UNION:
                return Expression(f'{display_name}{SCHEMA_SUFFIX}()')
            case TypeKind.ENUM:
                return Expression(f'{display_name}{SCHEMA_SUFFIX}')
            case TypeKind.SCALAR:
                return self.scalars.resolve_scalar(name)

    def needs_lazy(self, signature: 'TypeSignature') -> bool:
        """Return whether a reference must be wrapped in `z.lazy`.

        Only input records can reference each other or themselves, so
        exactly the named references to input records are deferred.
        """
        return (
            isinstance(signature, NamedType)
            and self.resolve(signature.name).kind is TypeKind.INPUT_OBJECT
        )
