"""Registration record and the static reference data the form consumes."""

import json
from dataclasses import dataclass, asdict, fields, replace
from typing import Any, Dict, Tuple, Type

from pyqt_formdemo.exceptions import UnknownFieldError, FieldTypeError


@dataclass(frozen=True)
class Country:
    """One entry of the country dropdown."""
    code: str
    name: str


COUNTRIES: Tuple[Country, ...] = (
    Country('', 'Select a country'),
    Country('us', 'United States'),
    Country('ca', 'Canada'),
    Country('mx', 'Mexico'),
    Country('uk', 'United Kingdom'),
    Country('de', 'Germany'),
    Country('fr', 'France'),
    Country('es', 'Spain'),
    Country('it', 'Italy'),
    Country('jp', 'Japan'),
    Country('au', 'Australia'),
)

SUBSCRIPTION_PLANS: Tuple[str, ...] = ('basic', 'premium', 'enterprise')


@dataclass(frozen=True)
class RegistrationData:
    """
    The single record edited by the registration form.

    Always fully populated: "empty" is the type's zero value ('', 0, False),
    never None. Instances are immutable; updates produce a new record.
    """

    # Text inputs
    first_name: str = ''
    last_name: str = ''
    username: str = ''

    email: str = ''
    age: int = 0

    # ISO date (YYYY-MM-DD) and time (HH:MM) strings
    birthdate: str = ''
    preferred_time: str = ''

    bio: str = ''

    password: str = ''
    confirm_password: str = ''

    # Checkboxes
    email_notifications: bool = False
    sms_notifications: bool = False
    push_notifications: bool = False
    agree_to_terms: bool = False

    subscription_plan: str = ''
    country: str = ''

    def __post_init__(self):
        for name in self.field_names():
            self.check_value(name, getattr(self, name))

    @classmethod
    def initial(cls) -> 'RegistrationData':
        """All-empty record used at construction and on reset."""
        return cls()

    @classmethod
    def sample(cls) -> 'RegistrationData':
        """Fully valid record used by the fill-sample action."""
        return cls(
            first_name='John',
            last_name='Doe',
            username='johndoe123',
            email='john.doe@example.com',
            age=25,
            birthdate='1999-01-15',
            preferred_time='14:30',
            bio=('I am a software developer passionate about web technologies '
                 'and building amazing user experiences.'),
            password='SecurePass123!',
            confirm_password='SecurePass123!',
            email_notifications=True,
            sms_notifications=False,
            push_notifications=True,
            agree_to_terms=True,
            subscription_plan='premium',
            country='us',
        )

    @classmethod
    def field_types(cls) -> Dict[str, Type]:
        """Map each field name to its declared type, in declaration order."""
        return {f.name: f.type for f in fields(cls)}

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def check_value(cls, field_name: str, value: Any) -> None:
        """
        Fail loud if ``value`` cannot be stored in ``field_name``.

        Raises:
            UnknownFieldError: field is not part of the record
            FieldTypeError: value does not match the declared type
        """
        types = cls.field_types()
        if field_name not in types:
            raise UnknownFieldError(field_name)
        expected = types[field_name]
        # bool is a subclass of int; an age of True is still a contract violation
        if type(value) is bool and expected is not bool:
            raise FieldTypeError(f"{field_name} expects {expected.__name__}, got bool")
        if not isinstance(value, expected):
            raise FieldTypeError(
                f"{field_name} expects {expected.__name__}, got {type(value).__name__}"
            )

    def with_field(self, field_name: str, value: Any) -> 'RegistrationData':
        """Return a copy with one field replaced (type-checked)."""
        self.check_value(field_name, value)
        return replace(self, **{field_name: value})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
