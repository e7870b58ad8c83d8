"""Validation rules of the registration form."""

import logging
from datetime import date
from typing import Optional

from pyqt_formdemo.models import RegistrationData
from pyqt_formdemo.protocols import FormDemoConfig, get_form_config
from .errors import ValidationError, custom_error
from .schema import FieldPath, FieldRule, FormSchema, SchemaPath
from .validators import (
    email, is_empty, max_length, max_value, min_length, min_value, pattern,
    required, validate,
)

logger = logging.getLogger(__name__)

USERNAME_PATTERN = r'^[a-zA-Z0-9_]+\Z'
# Only anchored at the start: one allowed character after the lookaheads is enough
PASSWORD_PATTERN = r'^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]'

MINIMUM_AGE = 18


def notification_check(value: bool, record: RegistrationData) -> Optional[ValidationError]:
    """At least one of the three notification channels must be selected."""
    if not (record.email_notifications or record.sms_notifications
            or record.push_notifications):
        return custom_error('noNotification',
                            'Please select at least one notification method')
    return None


def terms_check(value: bool, record: RegistrationData) -> Optional[ValidationError]:
    if not value:
        return custom_error('termsRequired', 'You must agree to the terms and conditions')
    return None


def birthdate_age_check(path: FieldPath, today: Optional[date] = None) -> FieldRule:
    """
    Birthdate must not be in the future and must imply an age of 18+.

    Age is the difference of calendar years, ignoring month and day. A value
    that is not an ISO date (YYYY-MM-DD) reports ``invalidDate``.
    """
    def check(value: str, record: RegistrationData) -> Optional[ValidationError]:
        if is_empty(value):
            return None
        try:
            selected = date.fromisoformat(value)
        except ValueError:
            return custom_error('invalidDate', 'Please enter a valid date')
        current = today or date.today()
        if selected > current:
            return custom_error('future', 'Birthdate cannot be in the future')
        if current.year - selected.year < MINIMUM_AGE:
            return custom_error('age', 'You must be at least 18 years old')
        return None
    return validate(path, check, 'birthdateAge')


def password_match_check(path: FieldPath) -> FieldRule:
    def check(value: str, record: RegistrationData) -> Optional[ValidationError]:
        if value != record.password:
            return custom_error('passwordMismatch', 'Passwords do not match')
        return None
    return validate(path, check, 'passwordMatch')


def registration_schema(path: SchemaPath, config: Optional[FormDemoConfig] = None) -> None:
    """Attach every registration rule to ``path``'s schema."""
    config = config or get_form_config()

    # Text inputs - required with length constraints
    required(path.first_name, message='First name is required')
    min_length(path.first_name, 2, message='First name must be at least 2 characters')
    max_length(path.first_name, 50, message='First name must not exceed 50 characters')

    required(path.last_name, message='Last name is required')
    min_length(path.last_name, 2, message='Last name must be at least 2 characters')
    max_length(path.last_name, 50, message='Last name must not exceed 50 characters')

    required(path.username, message='Username is required')
    min_length(path.username, 3, message='Username must be at least 3 characters')
    max_length(path.username, 20, message='Username must not exceed 20 characters')
    pattern(path.username, USERNAME_PATTERN,
            message='Username can only contain letters, numbers, and underscores')

    required(path.email, message='Email is required')
    email(path.email, message='Please enter a valid email address')

    required(path.age, message='Age is required')
    min_value(path.age, MINIMUM_AGE, message='You must be at least 18 years old')
    max_value(path.age, 120, message='Please enter a valid age')

    required(path.birthdate, message='Birthdate is required')
    if config.enable_birthdate_age_check:
        birthdate_age_check(path.birthdate)

    required(path.preferred_time, message='Preferred time is required')

    required(path.bio, message='Bio is required')
    min_length(path.bio, 10, message='Bio must be at least 10 characters')
    max_length(path.bio, 500, message='Bio must not exceed 500 characters')

    required(path.password, message='Password is required')
    min_length(path.password, 8, message='Password must be at least 8 characters')
    pattern(path.password, PASSWORD_PATTERN,
            message='Password must contain uppercase, lowercase, number, and special character')

    required(path.confirm_password, message='Please confirm your password')
    if config.enable_password_match_check:
        password_match_check(path.confirm_password)

    # Reported on the first checkbox of the group
    validate(path.email_notifications, notification_check, 'noNotification')
    validate(path.agree_to_terms, terms_check, 'termsRequired')

    required(path.subscription_plan, message='Please select a subscription plan')
    required(path.country, message='Please select your country')


def build_registration_schema(config: Optional[FormDemoConfig] = None) -> FormSchema:
    config = config or get_form_config()
    schema = FormSchema.build(lambda path: registration_schema(path, config))
    logger.debug(
        f"Registration schema ready (birthdate check={config.enable_birthdate_age_check}, "
        f"password match={config.enable_password_match_check})"
    )
    return schema
