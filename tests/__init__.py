"""Test suite for the graphql-zod package.

This package contains unit and integration tests validating SDL
loading, signature compilation, declaration emission, configuration,
and the command-line interface.
"""
