"""Directive refinements.

Fields may carry directives such as `@constraint(minLength: 3)`. The
configured directive mapping turns every recognised directive argument
into a zod refinement suffix appended to the field validator:

    directives:
      constraint:
        minLength: min                  # .min(3)
        startsWith: [regex, '/^$1/']    # .regex(/^foo/)
        format:
          email: email                  # .email()
          uri: url                      # .url()

Suffixes are appended in the order directives and arguments appear on
the field.
"""

from json import dumps
from re import compile as regexp
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from graphql_zod.config import ArgumentTemplate
    from graphql_zod.expressions import Expression
    from graphql_zod.signatures import DirectiveInvocation

#: Template placeholder referencing a (one-based) argument value.
PLACEHOLDER_PATTERN = regexp(r'\$(\d+)')

#: A JavaScript regular expression literal.
REGEXP_PATTERN = regexp(r'^/.*/[dgimsuy]*$')


def is_regexp(value: Any) -> bool:  # noqa: ANN401
    """Return whether a value is a JavaScript regular expression literal."""
    return isinstance(value, str) and REGEXP_PATTERN.match(value) is not None


def stringify(value: Any, *, quote: bool = True) -> str:  # noqa: ANN401
    """Render a directive argument value as a JavaScript literal.

    Args:
        value: Plain argument value.
        quote: Whether strings are quoted. Regular expression literals
            are never quoted.

    Returns:
        JavaScript source of the value.
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'

    if isinstance(value, (int, float)):
        return f'{value}'

    if isinstance(value, list):
        return ','.join(stringify(item) for item in value)

    if isinstance(value, str) and (is_regexp(value) or not quote):
        return value

    return dumps(value, ensure_ascii=False)


def format_template(template: 'ArgumentTemplate') -> 'list[str] | dict[str, list[str]]':
    """Normalize an argument template.

    A bare method name `m` is shorthand for `[m, '$1']`. In value mappings
    a bare method name takes no arguments.
    """
    if isinstance(template, str):
        return [template, '$1']

    if isinstance(template, dict):
        return {
            value: [item] if isinstance(item, str) else list(item)
            for value, item in template.items()
        }

    return list(template)


def apply_template(template: str, values: list[str]) -> str:
    """Substitute `$N` placeholders with rendered argument values.

    Missing values substitute to an empty string. Inside a regular
    expression template, backslashes of the value are escaped.
    """
    regexp_template = is_regexp(template)

    def replace(match: Any) -> str:  # noqa: ANN401
        index = int(match.group(1)) - 1
        if not 0 <= index < len(values):
            return ''
        if regexp_template:
            return values[index].replace('\\', '\\\\')
        return values[index]

    return PLACEHOLDER_PATTERN.sub(replace, template)


def argument_values(value: Any, *, regexp_template: bool = False) -> list[str]:  # noqa: ANN401
    """Render an argument value into positional template values.

    List values spread over `$1`, `$2`, ...
    """
    if isinstance(value, list):
        return [stringify(item, quote=not regexp_template) for item in value]

    return [stringify(value, quote=not regexp_template)]


def build_refinement(template: list[str], value: Any) -> str:  # noqa: ANN401
    """Build the refinement suffix of a single argument."""
    method, *args = template

    rendered = [
        apply_template(arg, argument_values(value, regexp_template=is_regexp(arg)))
        for arg in args
    ]

    return f'.{method}({", ".join(rendered)})'


def build_directive(mapping: 'Mapping[str, ArgumentTemplate]', directive: 'DirectiveInvocation') -> str:
    """Build refinement suffixes for all mapped arguments of a directive."""
    suffix = ''

    for argument, value in directive.arguments.items():
        if (template := mapping.get(argument)) is None:
            continue

        formatted = format_template(template)
        if isinstance(formatted, dict):
            # value mappings are keyed by the unquoted argument value
            formatted = formatted.get(stringify(value, quote=False))
            if formatted is None:
                continue

        suffix += build_refinement(formatted, value)

    return suffix


def apply_directives(expression: 'Expression',
                     directives: 'Iterable[DirectiveInvocation]',
                     mapping: 'Mapping[str, Mapping[str, ArgumentTemplate]]') -> 'Expression':
    """Append refinement suffixes of all mapped directives.

    Args:
        expression: Base validator expression.
        directives: Directives attached to the field, in declaration order.
        mapping: Configured directive mapping.

    Returns:
        The refined expression, or the input expression unchanged if
        no directive is mapped.
    """
    for directive in directives:
        if (arguments := mapping.get(directive.name)) is not None:
            expression = expression.append(build_directive(arguments, directive))

    return expression
