"""Zod validator generator for GraphQL schemas.

The `graphql_zod` package compiles the type declarations of a GraphQL
schema into a TypeScript module of zod validators.

Key features:
- one validator constructor per input type, object type and union, and
  one validator value per enum;
- nullability and list nesting reproduced exactly as declared;
- deferred evaluation of recursive input references;
- configurable scalar validators and directive-based refinements.
"""

from .config import CodegenConfig, load_config
from .generator import GeneratedModule, generate
from .loader import load_schema

__all__ = (
    'CodegenConfig',
    'GeneratedModule',
    'generate',
    'load_config',
    'load_schema',
)
