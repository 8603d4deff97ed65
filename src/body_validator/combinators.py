"""Combinators: validators built from other validators.

- ObjectValidator: fixed set of keys, one validator per key
- ArrayValidator: every element checked by one validator
- ObjectValuesValidator: every value of a mapping checked by one validator
- OneOfValidator: union of alternatives, with nullable/optional as sugar

Children are captured at construction and never change afterwards.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from body_validator.exceptions import SchemaError
from body_validator.messages import index_path, not_a, one_of_summary, prefix_path, unknown_property
from body_validator.primitives import (
    NULL,
    UNDEFINED_VALIDATOR,
    ExactValidator,
    is_array,
    is_object,
    object_entries,
)
from body_validator.types import UNDEFINED, Validator, is_validator


def _require_validator(candidate: Any, where: str) -> Validator:
    if not is_validator(candidate):
        raise SchemaError(
            f"{where} must be a validator (an object with is_valid and get_messages), "
            f"got {type(candidate).__name__}"
        )
    return candidate


def accepts_absence(validator: Validator) -> bool:
    """Whether a validator is `undefined`, `exact(UNDEFINED)` or an `optional(...)`.

    Array slots always exist, so such validators make no sense as elements.
    """
    if validator is UNDEFINED_VALIDATOR:
        return True
    if isinstance(validator, ExactValidator):
        return validator.value is UNDEFINED
    if isinstance(validator, OneOfValidator):
        return any(accepts_absence(alternative) for alternative in validator.alternatives)
    return False


def _require_element(candidate: Any, where: str) -> Validator:
    element = _require_validator(candidate, where)
    if accepts_absence(element):
        raise SchemaError(f"{where} cannot be optional; elements are never absent")
    return element


# =============================================================================
# Object
# =============================================================================


@dataclass(frozen=True, eq=False)
class ObjectValidator:
    """Validates an object with a fixed set of known keys.

    Keys missing from the input are checked as UNDEFINED; keys missing from
    the shape are rejected.
    """

    shape: Mapping[str, Validator]

    def __post_init__(self) -> None:
        if not isinstance(self.shape, Mapping):
            raise SchemaError(
                f"object shape must be a mapping of key to validator, got {type(self.shape).__name__}"
            )
        for key, child in self.shape.items():
            _require_validator(child, f"shape entry {key!r}")
        object.__setattr__(self, "shape", MappingProxyType(dict(self.shape)))

    def is_valid(self, input: Any) -> bool:
        if not is_object(input):
            return False

        properties = dict(object_entries(input))
        if any(key not in self.shape for key in properties):
            return False

        return all(
            child.is_valid(properties.get(key, UNDEFINED))
            for key, child in self.shape.items()
        )

    def get_messages(self, input: Any, name: str) -> list[str]:
        if not is_object(input):
            return [not_a(name, "an object")]

        properties = dict(object_entries(input))
        messages = [
            unknown_property(name, key) for key in properties if key not in self.shape
        ]
        for key, child in self.shape.items():
            for message in child.get_messages(properties.get(key, UNDEFINED), key):
                messages.append(prefix_path(name, message))
        return messages


# =============================================================================
# Array / Object Values
# =============================================================================


@dataclass(frozen=True, eq=False)
class ArrayValidator:
    """Validates that every element of an array passes ``element``."""

    element: Validator

    def __post_init__(self) -> None:
        _require_element(self.element, "array element validator")

    def is_valid(self, input: Any) -> bool:
        if not is_array(input):
            return False
        return all(self.element.is_valid(item) for item in input)

    def get_messages(self, input: Any, name: str) -> list[str]:
        if not is_array(input):
            return [not_a(name, "an array")]

        messages: list[str] = []
        for index, item in enumerate(input):
            messages.extend(self.element.get_messages(item, index_path(name, index)))
        return messages


@dataclass(frozen=True, eq=False)
class ObjectValuesValidator:
    """Validates every value of an object, whatever its keys.

    Values are checked as an array in the object's own order, so message
    paths index into that order (``scores[0]``, ``scores[1]``, ...).
    """

    element: Validator
    _values: ArrayValidator = field(init=False, repr=False)

    def __post_init__(self) -> None:
        _require_element(self.element, "object_values element validator")
        object.__setattr__(self, "_values", ArrayValidator(self.element))

    def is_valid(self, input: Any) -> bool:
        if not is_object(input):
            return False
        return self._values.is_valid([value for _, value in object_entries(input)])

    def get_messages(self, input: Any, name: str) -> list[str]:
        if not is_object(input):
            return [not_a(name, "an object")]
        return self._values.get_messages([value for _, value in object_entries(input)], name)


# =============================================================================
# One Of
# =============================================================================


@dataclass(frozen=True, eq=False)
class OneOfValidator:
    """Accepts input that at least one alternative accepts.

    On failure, the messages of every alternative are joined with ", or "
    into a single message.
    """

    alternatives: tuple[Validator, ...]

    def __post_init__(self) -> None:
        alternatives = tuple(self.alternatives)
        if len(alternatives) < 2:
            raise SchemaError(
                f"one_of needs at least two alternatives, got {len(alternatives)}"
            )
        for position, alternative in enumerate(alternatives):
            _require_validator(alternative, f"one_of alternative {position}")
        object.__setattr__(self, "alternatives", alternatives)

    def is_valid(self, input: Any) -> bool:
        return any(alternative.is_valid(input) for alternative in self.alternatives)

    def get_messages(self, input: Any, name: str) -> list[str]:
        if self.is_valid(input):
            return []

        messages = [
            message
            for alternative in self.alternatives
            if not alternative.is_valid(input)
            for message in alternative.get_messages(input, name)
        ]
        return [one_of_summary(name, messages)]


# =============================================================================
# Factories
# =============================================================================


def object_validator(shape: Mapping[str, Validator]) -> ObjectValidator:
    return ObjectValidator(shape)


def array_validator(element: Validator) -> ArrayValidator:
    return ArrayValidator(element)


def object_values_validator(element: Validator) -> ObjectValuesValidator:
    return ObjectValuesValidator(element)


def one_of(*alternatives: Validator) -> OneOfValidator:
    return OneOfValidator(alternatives)


def nullable(validator: Validator) -> OneOfValidator:
    """Accept ``validator``'s values or None."""
    return one_of(validator, NULL)


def optional(validator: Validator) -> OneOfValidator:
    """Accept ``validator``'s values or absence (UNDEFINED)."""
    return one_of(validator, UNDEFINED_VALIDATOR)
