"""Message formatting helpers shared by all validators.

The exact text produced here is consumed by API clients, so quoting,
path joining and value rendering must stay stable.
"""

import math
import re
from typing import Any

from body_validator.types import UNDEFINED


# Flag letters in the order JavaScript prints them
_REGEX_FLAGS: tuple[tuple[int, str], ...] = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


def double_quote(text: str) -> str:
    return f'"{text}"'


def index_path(name: str, index: int) -> str:
    """Path of an array element, e.g. ``tags[2]``."""
    return f"{name}[{index}]"


def prefix_path(name: str, message: str) -> str:
    """Prefix a child's message with the quoted parent name."""
    return f"{double_quote(name)}.{message}"


def display_value(value: Any) -> str:
    """Render a value the way it reads in a JSON payload."""
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def display_pattern(pattern: re.Pattern[str]) -> str:
    """Render a compiled regex in slash-delimited form, e.g. ``/^a+$/i``."""
    flags = "".join(letter for flag, letter in _REGEX_FLAGS if pattern.flags & flag)
    return f"/{pattern.pattern}/{flags}"


def not_a(name: str, kind: str) -> str:
    return f"{double_quote(name)} is not {kind}"


def should_be(name: str, expectation: str) -> str:
    return f"{double_quote(name)} should be {expectation}"


def unknown_property(name: str, key: Any) -> str:
    # The trailing space is part of the established message text
    return f"{double_quote(name)} should not have a property named {double_quote(str(key))} "


def one_of_summary(name: str, messages: list[str]) -> str:
    return f"{double_quote(name)}: {', or '.join(messages)}"
