"""Tests configurations and fixtures."""

import os
from typing import TYPE_CHECKING, Any

import pytest

from graphql_zod.compiler import TypeSignatureCompiler
from graphql_zod.config import ENV_PREFIX, CodegenConfig
from graphql_zod.emitters import DeclarationEmitter
from graphql_zod.loader import load_schema
from graphql_zod.resolvers import NameResolver
from graphql_zod.schema import SchemaDocument

if TYPE_CHECKING:
    from collections.abc import Callable

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


@pytest.fixture(autouse=True)
def clean_environment(mocker: 'MockerFixture') -> None:
    """Hide generator settings of the surrounding environment.

    Configuration is resolved from `GRAPHQL_ZOD_*` variables as well,
    so tests run with those variables removed.
    """
    mocker.patch.dict(os.environ, {
        key: value
        for key, value in os.environ.items()
        if not key.startswith(ENV_PREFIX)
    }, clear=True)


@pytest.fixture
def build_compiler() -> 'Callable[..., TypeSignatureCompiler]':
    """Provide a factory for signature compilers.

    The returned factory accepts optional SDL declaring the types that
    signatures may reference, and configuration options as keyword
    arguments. Builtin scalars are always available.
    """
    def build(sdl: str = '', **options: Any) -> TypeSignatureCompiler:  # noqa: ANN401
        """Build a compiler over a schema and configuration.

        Args:
            sdl: GraphQL SDL with referenced type definitions.
            options: Configuration option values.

        Returns:
            Compiler bound to the schema and configuration.
        """
        config = CodegenConfig(**options)
        document = load_schema(sdl) if sdl else SchemaDocument()

        return TypeSignatureCompiler(NameResolver(document, config), config)

    return build


@pytest.fixture
def build_emitter(build_compiler: 'Callable[..., TypeSignatureCompiler]',
                  ) -> 'Callable[..., tuple[DeclarationEmitter, SchemaDocument]]':
    """Provide a factory for declaration emitters.

    Returns a callable building an emitter for the given SDL and options,
    together with the loaded schema document.
    """
    def build(sdl: str, **options: Any) -> tuple[DeclarationEmitter, SchemaDocument]:  # noqa: ANN401
        compiler = build_compiler(sdl, **options)
        return DeclarationEmitter(compiler), compiler.resolver.document

    return build
