"""Base Pydantic models for schema definitions and settings.

This module defines the foundational model classes used by all schema
structures and by the generator configuration. Schema models are immutable
and strict, so a loaded schema cannot drift while it is being compiled.
"""

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchemaModel(BaseModel):
    """Base immutable model for all schema elements.

    This class serves as the root for all Pydantic models representing
    schema constructs such as type signatures, fields, directives and
    type definitions.

    Design principles enforced by this model:
        - Immutability: schema elements cannot be modified after creation.
          Compiling the same element twice always yields the same output.
        - Strict schema validation: unknown or extra fields are rejected
          to avoid silent errors caused by typos.

    All schema models must inherit from this class.
    """

    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
    )


class SettingsModel(BaseSettings):
    """Base immutable model for generator settings.

    This class serves as the root for all settings models responsible for
    resolving generator configuration (configuration files, environment
    variables, or explicit overrides).

    Design principles enforced by this model:
        - Immutability: resolved settings cannot be modified after creation.
        - Tolerant schema handling: unknown or extra fields are ignored.
          This allows the surrounding environment to contain unrelated
          variables without breaking configuration resolution.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        extra='ignore',
    )
