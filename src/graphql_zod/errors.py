"""Core exception and warning hierarchy.

This module defines base error and warning types used across the library
to report schema loading failures, configuration failures, and non-fatal
code generation diagnostics in a structured way.
"""

from os import linesep
from typing import TYPE_CHECKING, TypedDict

from yaml.error import MarkedYAMLError

if TYPE_CHECKING:
    from typing import Self

if TYPE_CHECKING:
    from graphql import GraphQLError
    from pydantic import ValidationError

FORMAT_FILENAME = '<unicode string>'
FORMAT_INDENT = 4


class ErrorContext(TypedDict, total=False):
    """Container describing contextual information for error formatting.

    All fields are optional; the formatter adapts output based on
    provided values.
    """

    #: Name of the source file where the error occurred.
    filename: str | None

    #: Line number in the source file (zero-based).
    line_num: int | None
    #: Column number in the source file (zero-based).
    column_num: int | None

    #: Source text used to render a snippet around the location.
    source: str | None

    #: Underlying exception that triggered formatting.
    error: Exception | None


class ErrorFormatter:
    """Utility class for formatting generator errors.

    This formatter is responsible for producing human-readable error
    messages with optional source location and a snippet of the
    offending source line.
    """

    @classmethod
    def format(cls, message: str, context: ErrorContext | None = None) -> str:
        """Format an error message using contextual information.

        Args:
            message: Base human-readable error message.
            context: Optional error context with location and data.

        Returns:
            A fully formatted error message suitable for display.
        """
        if not context:
            return message

        message += linesep
        message += cls.get_location_string(context, indent=FORMAT_INDENT)
        message += cls.get_snippet_string(context, indent=FORMAT_INDENT * 2)

        return message

    @classmethod
    def get_location_string(cls, context: ErrorContext, *,
                            indent: str | int | None = None) -> str:
        """Format source location information.

        Args:
            context: Error context containing location metadata.
            indent: Optional indentation (string or number of spaces).

        Returns:
            A formatted location string including filename, line,
            and column numbers when available.
        """
        indent = cls._ensure_indent(indent)

        filename = context.get('filename')
        if not filename:
            filename = FORMAT_FILENAME

        message = f'{indent}in "{filename}"'
        if (line_num := context.get('line_num')) is not None:
            message += f', line {line_num + 1}'
            if (column_num := context.get('column_num')) is not None:
                message += f', column {column_num + 1}'
        message += linesep

        return message

    @classmethod
    def get_snippet_string(cls, context: ErrorContext, *,
                           indent: str | int | None = None) -> str:
        """Render the offending source line with a column marker.

        Args:
            context: Error context containing source and location.
            indent: Optional indentation (string or number of spaces).

        Returns:
            A two-line snippet, or an empty string if the source line
            is not available.
        """
        indent = cls._ensure_indent(indent)

        source = context.get('source')
        line_num = context.get('line_num')
        if not source or line_num is None:
            return ''

        lines = source.splitlines()
        if not 0 <= line_num < len(lines):
            return ''

        snippet = f'{indent}{lines[line_num]}{linesep}'
        if (column_num := context.get('column_num')) is not None:
            snippet += f'{indent}{" " * column_num}^{linesep}'

        return snippet

    @staticmethod
    def _ensure_indent(indent: str | int | None = None) -> str:
        """Normalize indentation input.

        Args:
            indent: Indentation as string or number of spaces.

        Returns:
            A string consisting of spaces or the provided string.
        """
        if isinstance(indent, int) and indent > 0:
            return ' ' * indent

        if isinstance(indent, str):
            return indent

        return ''


class CodegenWarning(UserWarning):
    """Warning emitted for non-fatal code generation issues.

    Used when a field type signature or a scalar cannot be resolved.
    Generation continues with a best-effort expression.
    """


class CodegenError(Exception, ErrorFormatter):
    """Base exception for all graphql-zod errors.

    All custom exceptions raised by the library inherit from this class
    to allow unified error handling by callers.
    """

    def __init__(self, message: str, *,
                 context: ErrorContext | None = None) -> None:
        """Initialize an error.

        Args:
            message: Human-readable error description.
            context: Error context containing optional location values.
        """
        self.message = message
        self.context = context

        super().__init__(message)

    def __str__(self) -> str:
        """String representation."""
        return self.format(self.message, self.context)


class SchemaLoadError(CodegenError):
    """Error raised when a GraphQL schema document cannot be loaded.

    This exception indicates a syntax error in the SDL or a definition
    the generator cannot represent.
    """

    @classmethod
    def from_graphql_error(cls, error: 'GraphQLError',
                           filename: str | None = None) -> 'Self':
        """Create a schema error from a GraphQL parsing failure.

        Args:
            error: Exception raised by graphql-core.
            filename: Name of the parsed source file, if known.

        Returns:
            SchemaLoadError with the location of the first reported problem.
        """
        error_context = ErrorContext(filename=filename, error=error)

        if error.locations:
            location = error.locations[0]
            error_context['line_num'] = location.line - 1
            error_context['column_num'] = location.column - 1
        if error.source is not None:
            error_context['source'] = error.source.body

        return cls(f'Invalid schema{linesep}{" " * FORMAT_INDENT}{error.message}',
                   context=error_context)


class ConfigError(CodegenError):
    """Error raised when the generator configuration is invalid."""

    @classmethod
    def from_yaml_error(cls, error: MarkedYAMLError,
                        filename: str | None = None,
                        source: str | None = None) -> 'Self':
        """Create a configuration error from a YAML parsing failure.

        Args:
            error: Exception raised by the YAML parser.
            filename: Name of the configuration file, if known.
            source: Configuration text used to render a snippet.

        Returns:
            ConfigError representing the YAML parsing failure.
        """
        error_context = ErrorContext(filename=filename, error=error)

        if (mark := error.problem_mark) is not None:
            error_context['line_num'] = mark.line
            error_context['column_num'] = mark.column
            error_context['source'] = source

        message = 'Invalid YAML'
        if error.problem:
            message += f'{linesep}{" " * FORMAT_INDENT}{error.problem}'

        return cls(message, context=error_context)

    @classmethod
    def from_pydantic_error(cls, error: 'ValidationError',
                            filename: str | None = None) -> 'Self':
        """Create a configuration error from a Pydantic validation failure.

        Args:
            error: ValidationError raised by Pydantic.
            filename: Name of the configuration file, if known.

        Returns:
            ConfigError listing every invalid option.
        """
        message = 'Invalid configuration'
        for item in error.errors(include_url=False, include_input=False):
            location = '.'.join(str(key) for key in item['loc']) or '<root>'
            message += f'{linesep}{" " * FORMAT_INDENT}{location}: {item["msg"]}'

        return cls(message, context=ErrorContext(filename=filename, error=error))
