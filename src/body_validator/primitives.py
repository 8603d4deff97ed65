"""Primitive (leaf) validators.

Each primitive wraps one runtime check over JSON-like data:
- string, number, integer, boolean: type checks (bool is never a number)
- null: the value is None
- undefined: the value is the UNDEFINED sentinel (absent)
- exact: strict equality with a captured value
- regex: a string the pattern can be found in
- custom: caller-supplied predicate and message functions
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable

from body_validator.exceptions import SchemaError
from body_validator.messages import (
    display_pattern,
    display_value,
    double_quote,
    not_a,
    should_be,
)
from body_validator.types import UNDEFINED, MessageFunction, Predicate


# =============================================================================
# Runtime Checks
# =============================================================================


def is_string(input: Any) -> bool:
    return isinstance(input, str)


def is_number(input: Any) -> bool:
    return isinstance(input, (int, float)) and not isinstance(input, bool)


def is_integer(input: Any) -> bool:
    """Number with no fractional part. NaN and infinities are not integers."""
    if not is_number(input):
        return False
    return isinstance(input, int) or input.is_integer()


def is_boolean(input: Any) -> bool:
    return isinstance(input, bool)


def is_null(input: Any) -> bool:
    return input is None


def is_undefined(input: Any) -> bool:
    return input is UNDEFINED


def is_array(input: Any) -> bool:
    return isinstance(input, (list, tuple))


def is_object(input: Any) -> bool:
    """Mappings are objects. Arrays also pass, keyed by their index strings."""
    return isinstance(input, Mapping) or is_array(input)


def object_entries(input: Mapping[Any, Any] | list[Any] | tuple[Any, ...]) -> list[tuple[Any, Any]]:
    """Key/value pairs of an object-shaped input, in input order."""
    if isinstance(input, Mapping):
        return list(input.items())
    return [(str(index), value) for index, value in enumerate(input)]


def strictly_equal(left: Any, right: Any) -> bool:
    """Equality without cross-type coercion.

    Booleans only equal booleans, numbers compare by value (so NaN equals
    nothing), strings by value, and everything else by identity.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return left is right
    if is_number(left) and is_number(right):
        return left == right
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    return left is right


# =============================================================================
# Type Validators
# =============================================================================


@dataclass(frozen=True, eq=False)
class TypeValidator:
    """Leaf validator backed by a single runtime check.

    The same predicate drives both ``is_valid`` and ``get_messages``.
    """

    kind: str
    predicate: Predicate = field(repr=False)
    failure: Callable[[str], str] = field(repr=False)

    def is_valid(self, input: Any) -> bool:
        return self.predicate(input)

    def get_messages(self, input: Any, name: str) -> list[str]:
        if self.predicate(input):
            return []
        return [self.failure(name)]


STRING = TypeValidator("string", is_string, lambda name: not_a(name, "a string"))
NUMBER = TypeValidator("number", is_number, lambda name: not_a(name, "a number"))
INTEGER = TypeValidator("integer", is_integer, lambda name: not_a(name, "an integer"))
BOOLEAN = TypeValidator("boolean", is_boolean, lambda name: not_a(name, "a boolean"))
NULL = TypeValidator("null", is_null, lambda name: should_be(name, "null"))
UNDEFINED_VALIDATOR = TypeValidator(
    "undefined", is_undefined, lambda name: should_be(name, "undefined")
)


# =============================================================================
# Parameterized Validators
# =============================================================================


@dataclass(frozen=True, eq=False)
class ExactValidator:
    """Accepts only values strictly equal to ``value``."""

    value: Any

    def is_valid(self, input: Any) -> bool:
        return strictly_equal(input, self.value)

    def get_messages(self, input: Any, name: str) -> list[str]:
        if strictly_equal(input, self.value):
            return []
        return [should_be(name, double_quote(display_value(self.value)))]


@dataclass(frozen=True, eq=False)
class RegexValidator:
    """Accepts strings in which ``pattern`` can be found.

    The pattern is searched for, not fully matched; anchor it with ``^`` and
    ``$`` to require a full match. When ``custom_message`` is set it replaces
    the generated message entirely.
    """

    pattern: re.Pattern[str]
    custom_message: str | None = None

    def is_valid(self, input: Any) -> bool:
        return isinstance(input, str) and self.pattern.search(input) is not None

    def get_messages(self, input: Any, name: str) -> list[str]:
        if self.is_valid(input):
            return []
        if self.custom_message:
            return [self.custom_message]
        return [
            should_be(
                name,
                f"a string that matches {double_quote(display_pattern(self.pattern))}",
            )
        ]


@dataclass(frozen=True, eq=False)
class CustomValidator:
    """Delegates both operations to caller-supplied functions.

    The functions must keep ``is_valid`` and ``get_messages`` consistent;
    nothing here checks that. Exceptions they raise propagate.
    """

    predicate: Predicate = field(repr=False)
    messages: MessageFunction = field(repr=False)

    def is_valid(self, input: Any) -> bool:
        return bool(self.predicate(input))

    def get_messages(self, input: Any, name: str) -> list[str]:
        messages = self.messages(input, name)
        # A lone string is one message, not a sequence of characters
        if isinstance(messages, str):
            return [messages] if messages else []
        return list(messages)


def exact(value: Any) -> ExactValidator:
    return ExactValidator(value)


def regex(
    pattern: str | re.Pattern[str],
    custom_message: str | None = None,
    flags: int = 0,
) -> RegexValidator:
    """Build a regex validator.

    Args:
        pattern: Pattern source or an already compiled pattern
        custom_message: Message returned verbatim on any failure
        flags: ``re`` flags, only allowed with a pattern source

    Raises:
        SchemaError: If the pattern does not compile, or flags are given
            together with a compiled pattern
    """
    if isinstance(pattern, re.Pattern):
        if flags:
            raise SchemaError("flags cannot be combined with a compiled pattern")
        return RegexValidator(pattern, custom_message)

    try:
        compiled = re.compile(pattern, flags)
    except re.error as e:
        raise SchemaError(f"Invalid regular expression {pattern!r}: {e}") from e
    return RegexValidator(compiled, custom_message)


def custom(
    is_valid: Predicate,
    get_messages: MessageFunction,
) -> CustomValidator:
    """Wrap a predicate/message function pair as a validator."""
    if not callable(is_valid) or not callable(get_messages):
        raise SchemaError("custom validators need callable is_valid and get_messages")
    return CustomValidator(is_valid, get_messages)
