"""
Custom GraphQL scalars
"""

import re
from typing import Any, NewType

import strawberry
from graphql import GraphQLError, StringValueNode, ValueNode

EMAIL_ADDRESS_REGEX = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)


class ValidationError(GraphQLError):
    """Raised when a value cannot be accepted by a custom scalar."""

    pass


def validate(value: Any) -> str:
    """Return ``value`` unchanged if it is a well-formed email address.

    Raises:
        ValidationError: If the value is not a string, or is a string that
            does not match the address grammar.
    """
    if not isinstance(value, str):
        raise ValidationError(f"Value is not string: {value}")

    if not EMAIL_ADDRESS_REGEX.fullmatch(value):
        raise ValidationError(f"Value is not a valid email address: {value}")

    return value


def parse_literal(ast: ValueNode, _variables: dict[str, Any] | None = None) -> str:
    """Parse an inline document literal, accepting only string literals."""
    if not isinstance(ast, StringValueNode):
        raise ValidationError(
            f"Query error: Can only parse strings as email addresses but got a: {ast.kind}"
        )

    return validate(ast.value)


serialize = validate
parse_value = validate


EmailAddress = strawberry.scalar(
    NewType("EmailAddress", str),
    name="EmailAddress",
    description="A field whose value conforms to the standard internet email address format",
    serialize=serialize,
    parse_value=parse_value,
    parse_literal=parse_literal,
)
