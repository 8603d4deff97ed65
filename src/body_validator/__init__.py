"""Composable runtime validators for untyped request bodies.

Usage:
    import body_validator as v

    create_hero = v.object({
        "name": v.string,
        "age": v.number,
        "cool": v.optional(v.boolean),
        "powers": v.array(v.string),
    })

    create_hero.is_valid({"name": "Superman"})
    # False
    create_hero.get_messages({"name": "Superman"}, "input")
    # ['"input"."age" is not a number', '"input"."powers" is not an array']
"""

from body_validator.combinators import (
    ArrayValidator,
    ObjectValidator,
    ObjectValuesValidator,
    OneOfValidator,
    array_validator,
    nullable,
    object_validator,
    object_values_validator,
    one_of,
    optional,
)
from body_validator.config import ValidationConfig
from body_validator.exceptions import (
    BodyValidatorError,
    InvalidBodyError,
    SchemaError,
    SchemaNotFoundError,
)
from body_validator.primitives import (
    BOOLEAN,
    INTEGER,
    NULL,
    NUMBER,
    STRING,
    UNDEFINED_VALIDATOR,
    CustomValidator,
    ExactValidator,
    RegexValidator,
    TypeValidator,
    custom,
    exact,
    regex,
)
from body_validator.registry import SchemaRegistry
from body_validator.services import assert_valid, collect_messages, validate
from body_validator.types import UNDEFINED, ValidationResult, Validator

# Construction API, read as ``v.object({...})``, ``v.string`` and so on
object = object_validator
array = array_validator
object_values = object_values_validator
string = STRING
number = NUMBER
integer = INTEGER
boolean = BOOLEAN
null = NULL
undefined = UNDEFINED_VALIDATOR

__all__ = [
    # Construction
    "object",
    "array",
    "object_values",
    "string",
    "number",
    "integer",
    "boolean",
    "null",
    "undefined",
    "exact",
    "regex",
    "custom",
    "one_of",
    "nullable",
    "optional",
    # Types
    "UNDEFINED",
    "Validator",
    "ValidationResult",
    "ArrayValidator",
    "CustomValidator",
    "ExactValidator",
    "ObjectValidator",
    "ObjectValuesValidator",
    "OneOfValidator",
    "RegexValidator",
    "TypeValidator",
    # Services
    "validate",
    "assert_valid",
    "collect_messages",
    "SchemaRegistry",
    "ValidationConfig",
    # Errors
    "BodyValidatorError",
    "InvalidBodyError",
    "SchemaError",
    "SchemaNotFoundError",
]
