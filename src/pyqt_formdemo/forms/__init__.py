"""
Form controller and the registration demo component.
"""

from .field_state import FieldState
from .form_controller import FormController
from .registration_form import RegistrationFormDemo

__all__ = [
    "FieldState",
    "FormController",
    "RegistrationFormDemo",
]
