"""Tests for the type signature compiler."""

from typing import TYPE_CHECKING

import pytest

from graphql_zod.errors import CodegenWarning
from graphql_zod.loader import parse_signature
from graphql_zod.signatures import FieldDescriptor

if TYPE_CHECKING:
    from collections.abc import Callable

    from graphql_zod.compiler import TypeSignatureCompiler

RECURSIVE_INPUTS = '''
    input A {
        b: B
        bs: [B!]!
        self: A!
        maybeSelves: [A]
    }

    input B {
        a: A
    }
'''

OUTPUT_TYPES = '''
    enum Role { ADMIN USER }

    type User {
        id: ID!
    }

    union Actor = User
'''


@pytest.mark.parametrize('signature, expected', (
    pytest.param('String', 'z.string().nullish()', id='nullable'),
    pytest.param('String!', 'z.string()', id='non-null'),
    pytest.param('[String]', 'z.array(z.string().nullable()).nullish()', id='list of nullable'),
    pytest.param('[String!]', 'z.array(z.string()).nullish()', id='list of non-null'),
    pytest.param('[String]!', 'z.array(z.string().nullable())', id='non-null list of nullable'),
    pytest.param('[String!]!', 'z.array(z.string())', id='non-null list of non-null'),
    pytest.param(
        '[[Int!]]!',
        'z.array(z.array(z.number()).nullish())',
        id='inner list is not required by outer non-null',
    ),
    pytest.param(
        '[[Int]!]',
        'z.array(z.array(z.number().nullable())).nullish()',
        id='required inner list',
    ),
    pytest.param('Boolean!', 'z.boolean()', id='boolean'),
    pytest.param('Float', 'z.number().nullish()', id='float'),
    pytest.param('ID!', 'z.string()', id='id'),
))
def test_nullability(build_compiler: 'Callable[..., TypeSignatureCompiler]',
                     signature: str, expected: str) -> None:
    """Apply nullability and list wrapping as declared."""
    compiler = build_compiler()

    assert compiler.compile(parse_signature(signature)) == expected


@pytest.mark.parametrize('field, expected', (
    pytest.param('b', 'b: z.lazy(() => BSchema().nullish())', id='nullable reference'),
    pytest.param('bs', 'bs: z.array(z.lazy(() => BSchema()))', id='list element reference'),
    pytest.param('self', 'self: z.lazy(() => ASchema())', id='self reference'),
    pytest.param(
        'maybeSelves',
        'maybeSelves: z.array(z.lazy(() => ASchema().nullable())).nullish()',
        id='nullable list of self references',
    ),
))
def test_recursive_inputs(build_compiler: 'Callable[..., TypeSignatureCompiler]',
                          field: str, expected: str) -> None:
    """Defer references to input types exactly once."""
    compiler = build_compiler(RECURSIVE_INPUTS)
    definition = compiler.resolver.document.get('A')

    descriptor = next(item for item in definition.fields if item.name == field)

    assert compiler.compile_field(descriptor) == expected


def test_mutual_recursion(build_compiler: 'Callable[..., TypeSignatureCompiler]') -> None:
    """Compile mutually recursive inputs from both sides."""
    compiler = build_compiler(RECURSIVE_INPUTS)
    definition = compiler.resolver.document.get('B')

    assert compiler.compile_field(definition.fields[0]) == 'a: z.lazy(() => ASchema().nullish())'


@pytest.mark.parametrize('signature, expected', (
    pytest.param('User!', 'UserSchema()', id='object'),
    pytest.param('[User]', 'z.array(UserSchema().nullable()).nullish()', id='list of objects'),
    pytest.param('Role', 'RoleSchema.nullish()', id='enum'),
    pytest.param('Actor!', 'ActorSchema()', id='union'),
))
def test_output_references(build_compiler: 'Callable[..., TypeSignatureCompiler]',
                           signature: str, expected: str) -> None:
    """Reference objects, enums and unions without deferring them."""
    compiler = build_compiler(OUTPUT_TYPES, with_object_type=True)

    assert compiler.compile(parse_signature(signature)) == expected


def test_idempotence(build_compiler: 'Callable[..., TypeSignatureCompiler]') -> None:
    """Produce identical output for repeated compilation."""
    compiler = build_compiler(RECURSIVE_INPUTS)
    signature = parse_signature('[A!]')

    assert compiler.compile(signature) == compiler.compile(signature)
    assert build_compiler(RECURSIVE_INPUTS).compile(signature) == compiler.compile(signature)


@pytest.mark.parametrize('signature, enabled, expected', (
    pytest.param('String!', True, 'z.string().min(1)', id='enabled'),
    pytest.param('String!', False, 'z.string()', id='disabled'),
    pytest.param('ID!', True, 'z.string().min(1)', id='id is a string'),
    pytest.param('String', True, 'z.string().nullish()', id='nullable is not constrained'),
    pytest.param('Int!', True, 'z.number()', id='non-string'),
    pytest.param('[String!]!', True, 'z.array(z.string().min(1))', id='list elements'),
    pytest.param('Email!', True, 'z.string().email().min(1)', id='custom string scalar'),
))
def test_empty_string_policy(build_compiler: 'Callable[..., TypeSignatureCompiler]',
                             signature: str, enabled: bool, expected: str) -> None:
    """Reject empty strings in non-null string fields when enabled."""
    compiler = build_compiler(
        not_allow_empty_string=enabled,
        scalars={'Email': 'string'},
        scalar_schemas={'Email': 'z.string().email()'},
    )

    assert compiler.compile(parse_signature(signature)) == expected


@pytest.mark.parametrize('signature, expected', (
    pytest.param('String!', 'z.string().min(1).max(10)', id='non-null'),
    pytest.param('String', 'z.string().min(1).max(10).nullish()', id='nullable'),
    pytest.param('[String]', 'z.array(z.string().nullable()).min(1).max(10).nullish()', id='list'),
    pytest.param('[String]!', 'z.array(z.string().nullable())', id='non-null list'),
))
def test_directives(build_compiler: 'Callable[..., TypeSignatureCompiler]',
                    signature: str, expected: str) -> None:
    """Apply directive refinements before marking the slot nullable."""
    compiler = build_compiler(directives={
        'constraint': {
            'minLength': 'min',
            'maxLength': 'max',
        },
    })
    field = FieldDescriptor.model_validate({
        'name': 'title',
        'type': parse_signature(signature),
        'directives': [{
            'name': 'constraint',
            'arguments': {'minLength': 1, 'maxLength': 10},
        }],
    })

    assert compiler.compile_field(field) == f'title: {expected}'


def test_directives_without_mapping(build_compiler: 'Callable[..., TypeSignatureCompiler]') -> None:
    """Ignore directives when no mapping is configured."""
    compiler = build_compiler()
    field = FieldDescriptor.model_validate({
        'name': 'title',
        'type': parse_signature('String!'),
        'directives': [{'name': 'constraint', 'arguments': {'minLength': 1}}],
    })

    assert compiler.compile_field(field) == 'title: z.string()'


def test_unhandled_signature(build_compiler: 'Callable[..., TypeSignatureCompiler]') -> None:
    """Degrade to an empty expression on unknown signature nodes."""
    compiler = build_compiler()

    with pytest.warns(CodegenWarning, match=r'^unhandled type'):
        assert compiler.compile('String') == ''  # type: ignore[arg-type]


def test_unhandled_scalar(build_compiler: 'Callable[..., TypeSignatureCompiler]') -> None:
    """Fall back to the defined non-null validator for unknown scalars."""
    compiler = build_compiler('scalar Date')

    with pytest.warns(CodegenWarning, match=r'^unhandled scalar name: Date$'):
        assert compiler.compile(parse_signature('Date')) == 'definedNonNullAnySchema.nullish()'
