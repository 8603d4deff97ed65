"""Validation entry points built on the validator protocol.

Validators themselves only answer yes/no and produce messages. These
helpers package that into results, exceptions and logs for callers that
gate further processing on a validated body.
"""

import logging
from collections.abc import Iterable
from typing import Any

from body_validator.exceptions import InvalidBodyError
from body_validator.types import ValidationResult, Validator

logger = logging.getLogger(__name__)

DEFAULT_NAME = "input"


def validate(
    validator: Validator,
    value: Any,
    name: str = DEFAULT_NAME,
) -> ValidationResult:
    """Validate a value and collect every message.

    Args:
        validator: The schema to validate against
        value: The untyped value, e.g. a parsed request body
        name: Root name used in messages

    Returns:
        ValidationResult with all messages. ``valid`` follows ``is_valid``.
    """
    if validator.is_valid(value):
        return ValidationResult(valid=True, messages=[], name=name)

    messages = validator.get_messages(value, name)
    logger.debug("%s rejected with %d message(s)", name, len(messages))
    return ValidationResult(valid=False, messages=messages, name=name)


def assert_valid(
    validator: Validator,
    value: Any,
    name: str = DEFAULT_NAME,
) -> Any:
    """Return ``value`` unchanged if it is valid.

    Raises:
        InvalidBodyError: If the validator rejects the value
    """
    result = validate(validator, value, name)
    if not result.valid:
        raise InvalidBodyError(name, result.messages)
    return value


def collect_messages(checks: Iterable[tuple[Validator, Any, str]]) -> list[str]:
    """Run several independent checks and concatenate their messages in order.

    Useful when one request carries more than one untyped part, e.g. a body
    and a query string, that should be reported together.
    """
    messages: list[str] = []
    for validator, value, name in checks:
        messages.extend(validator.get_messages(value, name))
    return messages
