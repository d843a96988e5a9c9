"""Validator expressions.

An expression is the textual form of a composed zod validator, such as
`z.array(z.string().nullable()).nullish()`. Expressions are values: every
helper returns a new expression wrapping or extending the current one and
never mutates it.
"""

from typing import Self

#: Module-level name of the zod namespace in generated code.
ZOD = 'z'

#: Generic "defined, non-null, any" fallback validator.
ANY_SCHEMA = 'definedNonNullAnySchema'


class Expression(str):
    """Immutable zod validator expression.

    Subclasses `str` so that an expression renders directly into
    generated code and compares equal to its text.
    """

    __slots__ = ()

    @classmethod
    def empty(cls) -> Self:
        """Return the empty expression used for unresolvable signatures."""
        return cls('')

    @classmethod
    def zod(cls, method: str, *args: str) -> Self:
        """Build a call on the zod namespace (`z.string()`)."""
        return cls(f'{ZOD}.{method}({", ".join(args)})')

    def chain(self, method: str, *args: str) -> Self:
        """Append a method call (`.min(1)`)."""
        return type(self)(f'{self}.{method}({", ".join(args)})')

    def append(self, suffix: str) -> Self:
        """Append a raw refinement suffix."""
        return type(self)(f'{self}{suffix}')

    def array(self) -> Self:
        """Wrap in a collection-of validator."""
        return type(self).zod('array', self)

    def lazy(self) -> Self:
        """Wrap in a deferred evaluation thunk."""
        return type(self).zod('lazy', f'() => {self}')

    def nullable(self) -> Self:
        return self.chain('nullable')

    def nullish(self) -> Self:
        return self.chain('nullish')

    def optional(self) -> Self:
        return self.chain('optional')


def union(*members: str) -> Expression:
    """Build an any-of validator over ordered alternatives."""
    return Expression.zod('union', f'[{", ".join(members)}]')


def literal(value: str) -> Expression:
    """Build a literal validator for a string value."""
    return Expression.zod('literal', f"'{value}'")


def string_enum(values: 'list[str] | tuple[str, ...]') -> Expression:
    """Build a finite-set membership validator over string literals."""
    return Expression.zod('enum', '[' + ', '.join(f"'{value}'" for value in values) + ']')


def native_enum(name: str) -> Expression:
    """Build a validator keyed to a native TypeScript enum."""
    return Expression.zod('nativeEnum', name)
