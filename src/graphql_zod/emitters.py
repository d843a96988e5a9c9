"""Per-kind declaration emitters.

Every top-level type definition is emitted as one named declaration:

- input and output records as `<Name>Schema()` constructors returning
  a `z.object` over their compiled fields;
- enums as `<Name>Schema` validator values;
- unions as `<Name>Schema()` constructors returning either the single
  member validator or a `z.union` over all members.

Emitted names are recorded in an ordered export list consumed by import
assembly.
"""

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Literal

from pydantic import Field

from graphql_zod.expressions import ANY_SCHEMA, Expression, literal, native_enum, string_enum, union
from graphql_zod.models import SchemaModel
from graphql_zod.names import SCHEMA_SUFFIX, is_root_operation
from graphql_zod.schema import (
    EnumDefinition,
    InputObjectDefinition,
    ObjectDefinition,
    TypeKind,
    UnionDefinition,
)

if TYPE_CHECKING:
    from graphql_zod.compiler import TypeSignatureCompiler
    from graphql_zod.config import CodegenConfig
    from graphql_zod.resolvers import NameResolver
    from graphql_zod.schema import TypeDefinition

INDENT = '  '

IMPORT_ZOD = "import { z } from 'zod'"

type DeclarationKind = Literal['type', 'const', 'function']


def indent(text: str, count: int = 1) -> str:
    """Indent every non-empty line of a text."""
    prefix = INDENT * count

    return '\n'.join(
        f'{prefix}{line}' if line else line
        for line in text.split('\n')
    )


class Declaration(SchemaModel):
    """Named top-level declaration of the generated module."""

    kind: DeclarationKind = Field(
        title='Declaration kind',
        description='TypeScript declaration keyword.',
    )

    name: str = Field(
        title='Declaration name',
        description='Declared name, including any signature suffix.',
    )

    content: str = Field(
        title='Content',
        description='Initializer of a type or const, or body of a function.',
    )

    exported: bool = Field(
        default=True,
        title='Exported',
        description='Whether the declaration is exported from the module.',
    )

    def render(self) -> str:
        """Render the declaration as TypeScript source."""
        prefix = 'export ' if self.exported else ''

        if self.kind == 'function':
            return f'{prefix}function {self.name} {{\n{self.content}\n}}'

        return f'{prefix}{self.kind} {self.name} = {self.content};'


class ExportList:
    """Ordered set of emitted type names."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names = dict.fromkeys(names)

    def add(self, name: str) -> None:
        self._names.setdefault(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __repr__(self) -> str:
        return f'ExportList({list(self._names)!r})'


def emit_initial() -> list[Declaration]:
    """Emit the shared helpers declared once per module.

    Zod has no builtin validator for "anything but null or undefined",
    hence the `isDefinedNonNullAny` predicate backing the fallback.
    """
    return [
        Declaration(
            kind='type',
            name='Properties<T>',
            content='\n'.join((
                'Required<{',
                indent('[K in keyof T]: z.ZodType<T[K], any, T[K]>;'),
                '}>',
            )),
            exported=False,
        ),
        Declaration(
            kind='type',
            name='definedNonNullAny',
            content='{}',
            exported=False,
        ),
        Declaration(
            kind='const',
            name='isDefinedNonNullAny',
            content='(v: any): v is definedNonNullAny => v !== undefined && v !== null',
        ),
        Declaration(
            kind='const',
            name=ANY_SCHEMA,
            content='z.any().refine((v) => isDefinedNonNullAny(v))',
        ),
    ]


def build_imports(exports: ExportList, config: 'CodegenConfig') -> list[str]:
    """Assemble import statements of the generated module."""
    if config.import_from and exports:
        keyword = 'import type' if config.use_type_imports else 'import'
        return [
            IMPORT_ZOD,
            f"{keyword} {{ {', '.join(exports)} }} from '{config.import_from}'",
        ]

    return [IMPORT_ZOD]


class DeclarationEmitter:
    """Emit declarations for top-level type definitions."""

    def __init__(self, compiler: 'TypeSignatureCompiler') -> None:
        self.compiler = compiler

    @property
    def resolver(self) -> 'NameResolver':
        return self.compiler.resolver

    @property
    def config(self) -> 'CodegenConfig':
        return self.compiler.config

    def emit(self, definition: 'TypeDefinition', exports: ExportList) -> Declaration | None:
        """Emit the declaration of a type definition.

        Args:
            definition: Type definition.
            exports: Export list updated with the emitted type name.

        Returns:
            The declaration, or `None` for definitions without a
            validator (scalars, skipped object types, empty unions).
        """
        match definition:
            case InputObjectDefinition():
                return self.emit_input_object(definition, exports)
            case ObjectDefinition():
                return self.emit_object(definition, exports)
            case EnumDefinition():
                return self.emit_enum(definition, exports)
            case UnionDefinition():
                return self.emit_union(definition, exports)

        return None

    def emit_input_object(self, definition: InputObjectDefinition,
                          exports: ExportList) -> Declaration:
        name = self.resolver.resolve(definition.name).display_name
        exports.add(name)

        return self._record(name, [
            self.compiler.compile_field(field)
            for field in definition.fields
        ])

    def emit_object(self, definition: ObjectDefinition,
                    exports: ExportList) -> Declaration | None:
        """Emit an output record constructor.

        Output records accept an optional `__typename` tag matching their
        own name. Root operation types are never emitted.
        """
        if not self.config.with_object_type or is_root_operation(definition.name):
            return None

        name = self.resolver.resolve(definition.name).display_name
        exports.add(name)

        return self._record(name, [
            f'__typename: {literal(definition.name).optional()}',
            *(self.compiler.compile_field(field) for field in definition.fields),
        ])

    def emit_enum(self, definition: EnumDefinition, exports: ExportList) -> Declaration:
        name = self.resolver.resolve(definition.name).display_name
        exports.add(name)

        if self.config.enums_as_types:
            content = string_enum(definition.values)
        else:
            content = native_enum(name)

        return Declaration(kind='const', name=f'{name}{SCHEMA_SUFFIX}', content=content)

    def emit_union(self, definition: UnionDefinition,
                   exports: ExportList) -> Declaration | None:
        """Emit a union constructor.

        A single member is aliased directly; several members are composed
        with `z.union`. Enum members are referenced, other members called.
        """
        if not self.config.with_object_type or not definition.members:
            return None

        name = self.resolver.resolve(definition.name).display_name
        exports.add(name)

        members = [self._member(member) for member in definition.members]
        if len(members) > 1:
            body = union(*members)
        else:
            body = members[0]

        return Declaration(
            kind='function',
            name=f'{name}{SCHEMA_SUFFIX}()',
            content=indent(f'return {body}'),
        )

    def _member(self, member: str) -> Expression:
        kind, display_name = self.resolver.resolve(member)
        if kind is TypeKind.ENUM:
            return Expression(f'{display_name}{SCHEMA_SUFFIX}')

        return Expression(f'{display_name}{SCHEMA_SUFFIX}()')

    @staticmethod
    def _record(name: str, shape: list[str]) -> Declaration:
        properties = f'Properties<{name}>'

        return Declaration(
            kind='function',
            name=f'{name}{SCHEMA_SUFFIX}(): z.ZodObject<{properties}>',
            content='\n'.join((
                indent(f'return z.object<{properties}>({{'),
                ',\n'.join(indent(entry, 2) for entry in shape),
                indent('})'),
            )),
        )
