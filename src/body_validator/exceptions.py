"""Exceptions raised by body_validator.

Validating a value never raises. These errors come from building a schema
incorrectly, from looking up unknown named schemas, or from the
``assert_valid`` helper when a caller asks for rejection as an exception.
"""


class BodyValidatorError(Exception):
    """Base class for all body_validator errors."""
    pass


class SchemaError(BodyValidatorError, ValueError):
    """A schema was constructed from invalid parts."""
    pass


class SchemaNotFoundError(BodyValidatorError, KeyError):
    """No schema is registered under the requested name."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = available or []
        super().__init__(name)

    def __str__(self) -> str:
        message = f"Schema '{self.name}' is not registered."
        if self.available:
            message += " Available schemas: " + ", ".join(self.available)
        return message


class InvalidBodyError(BodyValidatorError):
    """A value was rejected by its schema.

    Attributes:
        name: Root name used when generating the messages
        messages: Every diagnostic produced for the value
    """

    def __init__(self, name: str, messages: list[str]):
        self.name = name
        self.messages = list(messages)
        super().__init__(f"{name} failed validation: " + "; ".join(self.messages))
