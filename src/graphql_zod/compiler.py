"""Type signature to validator compiler.

The compiler walks a field type signature from the outside in and builds
the zod expression from the inside out. The nullability applied at each
level depends on the node directly enclosing it:

==========================  ==========================================
Signature                   Expression
==========================  ==========================================
`String`                    `z.string().nullish()`
`String!`                   `z.string()`
`[String]`                  `z.array(z.string().nullable()).nullish()`
`[String!]`                 `z.array(z.string()).nullish()`
`[String]!`                 `z.array(z.string().nullable())`
`[String!]!`                `z.array(z.string())`
==========================  ==========================================

List elements are nullable unless explicitly wrapped in a non-null
modifier, regardless of whether the list itself is required. References
to input records are wrapped in `z.lazy` by the level that owns them, so
that recursive and mutually recursive inputs never construct eagerly.
"""

from typing import TYPE_CHECKING
from warnings import warn

from graphql_zod.directives import apply_directives
from graphql_zod.errors import CodegenWarning
from graphql_zod.expressions import Expression
from graphql_zod.schema import TypeKind
from graphql_zod.signatures import ListType, NamedType, NonNullType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from graphql_zod.config import CodegenConfig
    from graphql_zod.resolvers import NameResolver
    from graphql_zod.signatures import DirectiveInvocation, FieldDescriptor, TypeSignature


class TypeSignatureCompiler:
    """Compile field type signatures into zod validator expressions.

    The compiler holds no state besides its collaborators: compiling the
    same signature twice yields identical output.
    """

    def __init__(self, resolver: 'NameResolver', config: 'CodegenConfig') -> None:
        self.resolver = resolver
        self.config = config

    def compile_field(self, field: 'FieldDescriptor') -> str:
        """Compile a field into a shape entry (`name: <expression>`).

        Args:
            field: Field descriptor.

        Returns:
            Shape entry for the generated `z.object` call.
        """
        expression = self.compile(field.type, directives=field.directives)

        return f'{field.name}: {self.maybe_lazy(field.type, expression)}'

    def compile(self, signature: 'TypeSignature',
                parent: 'TypeSignature | None' = None,
                directives: 'Sequence[DirectiveInvocation]' = ()) -> Expression:
        """Compile a type signature into a validator expression.

        Args:
            signature: Signature node to compile.
            parent: Node directly enclosing `signature`, or `None` for
                the field type itself.
            directives: Directives attached to the field.

        Returns:
            Validator expression. An unknown signature node produces
            a `CodegenWarning` and an empty expression.
        """
        match signature:
            case ListType(of=inner):
                element = self.compile(inner, signature, directives)
                expression = self.maybe_lazy(inner, element).array()
                if isinstance(parent, NonNullType):
                    return expression
                return self.refine(expression, directives).nullish()

            case NonNullType(of=inner):
                return self.maybe_lazy(inner, self.compile(inner, signature, directives))

            case NamedType(name=name):
                expression = self.resolver.resolve_schema(name)
                if isinstance(parent, ListType):
                    return expression.nullable()

                expression = self.refine(expression, directives)
                if isinstance(parent, NonNullType):
                    if self.config.not_allow_empty_string and self.is_string(name):
                        return expression.chain('min', '1')
                    return expression

                return expression.nullish()

        warn(f'unhandled type: {signature!r}', category=CodegenWarning, stacklevel=2)

        return Expression.empty()

    def refine(self, expression: Expression,
               directives: 'Sequence[DirectiveInvocation]') -> Expression:
        """Apply configured directive refinements."""
        if not self.config.directives or not directives:
            return expression

        return apply_directives(expression, directives, self.config.directives)

    def maybe_lazy(self, signature: 'TypeSignature', expression: Expression) -> Expression:
        """Defer the expression if it references an input record."""
        if self.resolver.needs_lazy(signature):
            return expression.lazy()

        return expression

    def is_string(self, name: str) -> bool:
        """Return whether a type name is a string-kind scalar."""
        return (
            self.resolver.resolve(name).kind is TypeKind.SCALAR
            and self.resolver.scalars.primitive_kind(name) == 'string'
        )
