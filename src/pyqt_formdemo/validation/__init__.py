"""
Table-driven validation.

Rule factories attach pure checks to a FormSchema; the schema evaluates them
against a record on demand and reports failures as ValidationError data.
"""

from .errors import ValidationError, ValidationKind, custom_error
from .schema import FieldPath, FieldRule, FormSchema, SchemaPath
from .validators import (
    is_empty,
    required,
    min_length,
    max_length,
    pattern,
    min_value,
    max_value,
    email,
    validate,
)
from .registration_rules import (
    registration_schema,
    build_registration_schema,
    birthdate_age_check,
    password_match_check,
)

__all__ = [
    "ValidationError",
    "ValidationKind",
    "custom_error",
    "FieldPath",
    "FieldRule",
    "FormSchema",
    "SchemaPath",
    "is_empty",
    "required",
    "min_length",
    "max_length",
    "pattern",
    "min_value",
    "max_value",
    "email",
    "validate",
    "registration_schema",
    "build_registration_schema",
    "birthdate_age_check",
    "password_match_check",
]
