"""Schema registry for body_validator.

Provides registration and lookup of named schemas, so request handlers can
refer to a schema by name instead of importing it from where it is built.
"""

import logging
from typing import Any

from body_validator.exceptions import SchemaError, SchemaNotFoundError
from body_validator.services import validate
from body_validator.types import ValidationResult, Validator, is_validator

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Registry of named schemas.

    Schemas are built and registered once at application startup, then
    looked up per request.

    Example:
        # At startup
        SchemaRegistry.register("createUser", v.object({"name": v.string}))

        # In a handler
        result = SchemaRegistry.validate("createUser", body)
    """

    _schemas: dict[str, Validator] = {}

    @classmethod
    def register(cls, name: str, validator: Validator) -> None:
        """Register a schema by name.

        Idempotent - registering the same validator again is a no-op.

        Args:
            name: Unique identifier for the schema (e.g., "createUser")
            validator: The schema

        Raises:
            SchemaError: If ``validator`` is not a validator, or the name is
                already taken by a different schema
        """
        if not is_validator(validator):
            raise SchemaError(f"Schema '{name}' must be a validator, got {type(validator).__name__}")

        existing = cls._schemas.get(name)
        if existing is validator:
            return
        if existing is not None:
            raise SchemaError(f"Schema '{name}' is already registered")

        cls._schemas[name] = validator
        logger.debug("Registered schema '%s'", name)

    @classmethod
    def get(cls, name: str) -> Validator:
        """Get a registered schema by name.

        Raises:
            SchemaNotFoundError: If no schema is registered under ``name``
        """
        if name not in cls._schemas:
            raise SchemaNotFoundError(name, cls.list_registered())
        return cls._schemas[name]

    @classmethod
    def validate(cls, name: str, value: Any, label: str | None = None) -> ValidationResult:
        """Validate ``value`` against the named schema.

        Args:
            name: Registered schema name
            value: The untyped value
            label: Root name for messages; defaults to the schema name
        """
        return validate(cls.get(name), value, label or name)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._schemas

    @classmethod
    def list_registered(cls) -> list[str]:
        return sorted(cls._schemas)

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations. Primarily for testing."""
        cls._schemas.clear()
