"""Module generation.

Drives the emitters over a schema document in declaration order and
assembles the generated TypeScript module: imports, shared helpers, and
one declaration per emitted type.
"""

from typing import TYPE_CHECKING

from pydantic import Field

from graphql_zod.compiler import TypeSignatureCompiler
from graphql_zod.emitters import Declaration, DeclarationEmitter, ExportList, build_imports, emit_initial
from graphql_zod.models import SchemaModel
from graphql_zod.resolvers import NameResolver

if TYPE_CHECKING:
    from graphql_zod.config import CodegenConfig
    from graphql_zod.schema import SchemaDocument


class GeneratedModule(SchemaModel):
    """Result of a generation run."""

    imports: tuple[str, ...] = Field(
        title='Imports',
        description='Import statements of the module.',
    )

    helpers: tuple[Declaration, ...] = Field(
        title='Helpers',
        description='Shared declarations emitted once per module.',
    )

    declarations: tuple[Declaration, ...] = Field(
        title='Declarations',
        description='Emitted declarations in schema declaration order.',
    )

    exports: tuple[str, ...] = Field(
        title='Exports',
        description='Names of all types with an emitted declaration.',
    )

    def render(self) -> str:
        """Render the module as TypeScript source."""
        helpers = '\n'.join(helper.render() for helper in self.helpers)
        declarations = '\n\n'.join(declaration.render() for declaration in self.declarations)

        return '\n'.join((*self.imports, '', helpers, '', declarations, ''))


def generate(document: 'SchemaDocument', config: 'CodegenConfig',
             exports: ExportList | None = None) -> GeneratedModule:
    """Generate zod validators for every type of a schema.

    Args:
        document: Schema type definitions.
        config: Generator configuration.
        exports: Export list to extend. A new list is used if omitted.

    Returns:
        The generated module.
    """
    if exports is None:
        exports = ExportList()

    compiler = TypeSignatureCompiler(NameResolver(document, config), config)
    emitter = DeclarationEmitter(compiler)

    declarations = []
    for definition in document.definitions:
        if (declaration := emitter.emit(definition, exports)) is not None:
            declarations.append(declaration)

    return GeneratedModule(
        imports=tuple(build_imports(exports, config)),
        helpers=tuple(emit_initial()),
        declarations=tuple(declarations),
        exports=tuple(exports),
    )
