"""Validation error descriptors."""

from dataclasses import dataclass
from enum import Enum


class ValidationKind(str, Enum):
    """
    Registry of validation error kinds.

    Values match the kind strings reported to the UI layer.
    """
    REQUIRED = 'required'
    MIN_LENGTH = 'minLength'
    MAX_LENGTH = 'maxLength'
    PATTERN = 'pattern'
    MIN = 'min'
    MAX = 'max'
    EMAIL = 'email'

    # Cross-field kinds
    NO_NOTIFICATION = 'noNotification'
    TERMS_REQUIRED = 'termsRequired'

    # Opt-in cross-field kinds (see FormDemoConfig)
    AGE = 'age'
    INVALID_DATE = 'invalidDate'
    FUTURE = 'future'
    PASSWORD_MISMATCH = 'passwordMismatch'


@dataclass(frozen=True)
class ValidationError:
    """Immutable descriptor of one failed check. Never raised."""
    kind: ValidationKind
    message: str


def custom_error(kind: str, message: str) -> ValidationError:
    """Build an error descriptor for a custom rule from its kind string."""
    return ValidationError(ValidationKind(kind), message)
