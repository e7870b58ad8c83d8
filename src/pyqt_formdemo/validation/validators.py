"""
Built-in rule factories.

Each factory takes a FieldPath (``path.first_name``) and attaches one rule
to the schema being built. Apart from ``required`` and ``validate``, rules
pass on empty values so an empty field reports only ``required``.
"""

import re
from typing import Any, Callable, Optional, Pattern, Union

from email_validator import EmailNotValidError, validate_email

from pyqt_formdemo.models import RegistrationData
from .errors import ValidationError, ValidationKind
from .schema import FieldPath, FieldRule

CustomCheck = Callable[[Any, RegistrationData], Optional[ValidationError]]


def is_empty(value: Any) -> bool:
    """Type-appropriate emptiness: None, '', 0 and False."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ''
    if isinstance(value, int) and not isinstance(value, bool):
        return value == 0
    return False


def required(path: FieldPath, message: str) -> FieldRule:
    def check(record):
        if is_empty(getattr(record, path.name)):
            return ValidationError(ValidationKind.REQUIRED, message)
        return None
    return path.add_rule(check, 'required')


def min_length(path: FieldPath, length: int, message: str) -> FieldRule:
    def check(record):
        value = getattr(record, path.name)
        if not is_empty(value) and len(value) < length:
            return ValidationError(ValidationKind.MIN_LENGTH, message)
        return None
    return path.add_rule(check, f'minLength({length})')


def max_length(path: FieldPath, length: int, message: str) -> FieldRule:
    def check(record):
        value = getattr(record, path.name)
        if not is_empty(value) and len(value) > length:
            return ValidationError(ValidationKind.MAX_LENGTH, message)
        return None
    return path.add_rule(check, f'maxLength({length})')


def pattern(path: FieldPath, regexp: Union[str, Pattern], message: str) -> FieldRule:
    """
    Fail when the regular expression finds no match (search semantics).

    String patterns are compiled with re.ASCII so \\d and \\w match ASCII only.
    Anchor the end with \\Z: $ also matches before a trailing newline.
    """
    compiled = re.compile(regexp, re.ASCII) if isinstance(regexp, str) else regexp

    def check(record):
        value = getattr(record, path.name)
        if not is_empty(value) and compiled.search(value) is None:
            return ValidationError(ValidationKind.PATTERN, message)
        return None
    return path.add_rule(check, f'pattern({compiled.pattern})')


def min_value(path: FieldPath, minimum: int, message: str) -> FieldRule:
    def check(record):
        value = getattr(record, path.name)
        if not is_empty(value) and value < minimum:
            return ValidationError(ValidationKind.MIN, message)
        return None
    return path.add_rule(check, f'min({minimum})')


def max_value(path: FieldPath, maximum: int, message: str) -> FieldRule:
    def check(record):
        value = getattr(record, path.name)
        if not is_empty(value) and value > maximum:
            return ValidationError(ValidationKind.MAX, message)
        return None
    return path.add_rule(check, f'max({maximum})')


def email(path: FieldPath, message: str) -> FieldRule:
    """Address syntax via email-validator; no DNS lookups."""
    def check(record):
        value = getattr(record, path.name)
        if is_empty(value):
            return None
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return ValidationError(ValidationKind.EMAIL, message)
        return None
    return path.add_rule(check, 'email')


def validate(path: FieldPath, fn: CustomCheck, description: str = 'custom') -> FieldRule:
    """
    Attach a custom check.

    ``fn(value, record)`` receives the field's value and the whole record so
    cross-field rules read siblings from the same record. It always runs,
    including on empty values.
    """
    def check(record):
        return fn(getattr(record, path.name), record)
    return path.add_rule(check, description)
