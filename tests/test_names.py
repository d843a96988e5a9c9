"""Tests for name conversion."""

import pytest

from graphql_zod.config import CodegenConfig
from graphql_zod.names import convert_name, is_root_operation, pascal_case


@pytest.mark.parametrize('name, expected', (
    pytest.param('User', 'User', id='already converted'),
    pytest.param('user', 'User', id='lower case'),
    pytest.param('user_role', 'User_Role', id='underscores'),
    pytest.param('__Private', '__Private', id='leading underscores'),
    pytest.param('userRole', 'UserRole', id='camel case'),
    pytest.param('HTTPHeader', 'HttpHeader', id='acronym'),
    pytest.param('ID', 'Id', id='acronym only'),
    pytest.param('Base64Input', 'Base64Input', id='digits'),
    pytest.param('user_ID', 'User_Id', id='acronym segment'),
))
def test_pascal_case(name: str, expected: str) -> None:
    """Capitalize the words of every segment and keep underscores."""
    assert pascal_case(name) == expected


@pytest.mark.parametrize('options, expected', (
    pytest.param({}, 'User_Role', id='default'),
    pytest.param({'naming_convention': 'keep'}, 'user_role', id='keep'),
    pytest.param({'types_prefix': 'T', 'types_suffix': 'Type'}, 'TUser_RoleType', id='prefix and suffix'),
))
def test_convert_name(options: dict, expected: str) -> None:
    """Apply convention, prefix, and suffix."""
    assert convert_name('user_role', CodegenConfig(**options)) == expected


@pytest.mark.parametrize('name, expected', (
    pytest.param('Query', True, id='query'),
    pytest.param('Mutation', True, id='mutation'),
    pytest.param('Subscription', True, id='subscription'),
    pytest.param('QueryResult', False, id='prefix only'),
))
def test_root_operation(name: str, expected: bool) -> None:
    """Detect root operation type names."""
    assert is_root_operation(name) is expected
