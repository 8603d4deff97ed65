"""Core types for the body_validator package.

This module defines the foundational types shared by every validator:
- Validator: the two-method protocol all primitives and combinators implement
- UNDEFINED: sentinel for "absent", distinct from None (JSON null)
- ValidationResult: outcome of validating one value under one name
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, runtime_checkable


class _Undefined:
    """Marker type for the absent value.

    Object validators pass this to child validators for missing keys, which
    is what lets `optional` children accept them. There is exactly one
    instance: UNDEFINED.
    """

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_Undefined":
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


Predicate = Callable[[Any], bool]
MessageFunction = Callable[[Any, str], list[str]]


@runtime_checkable
class Validator(Protocol):
    """Protocol that all validators must implement.

    Validators are immutable once constructed and hold no per-call state,
    so a single schema can be shared across threads and requests.

    Contract: for every input and name,
    ``is_valid(input) == (len(get_messages(input, name)) == 0)``.
    """

    def is_valid(self, input: Any) -> bool:
        """Return True if the input conforms to this validator."""
        ...

    def get_messages(self, input: Any, name: str) -> list[str]:
        """Describe every violation in the input.

        Args:
            input: The value being validated
            name: Path of the value within the originally validated input

        Returns:
            Diagnostic messages. Empty list means valid.
        """
        ...


def is_validator(candidate: Any) -> bool:
    """Whether ``candidate`` is a validator instance.

    Validator classes also carry ``is_valid`` and ``get_messages``, so they
    pass the protocol check and must be excluded explicitly.
    """
    return isinstance(candidate, Validator) and not isinstance(candidate, type)


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating a value.

    Attributes:
        valid: True if the value conforms to the schema
        messages: Diagnostic messages, empty when valid
        name: The root name the messages are relative to
    """

    valid: bool
    messages: list[str] = field(default_factory=list)
    name: str = "input"

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "messages": list(self.messages),
        }
