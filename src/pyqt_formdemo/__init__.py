"""
pyqt-formdemo: reactive registration form built on PyQt6 signals.

A demonstration of declarative, table-driven form validation: a registration
record with many field types, per-field and cross-field rules, and the
submit / reset / fill-sample actions of a typical form component.

Architecture:
- Tier 1 (Models): RegistrationData record and reference data
- Tier 2 (Validation): Rule factories and the FormSchema rule table
- Tier 3 (Services): ModelStore, FieldChangeDispatcher, flag management
- Tier 4 (Forms): FormController and RegistrationFormDemo

Key Features:
- Validation failures are data (ValidationError), never exceptions
- Mutators report which fields changed validity
- pyqtSignal notifications for field, touched, validity, submit and reset
- Opt-in birthdate and password confirmation rules via FormDemoConfig
"""

__version__ = "0.1.0"

from pyqt_formdemo.protocols import FormDemoConfig, set_form_config, get_form_config
from pyqt_formdemo.models import RegistrationData, COUNTRIES, SUBSCRIPTION_PLANS
from pyqt_formdemo.validation import ValidationError, ValidationKind, build_registration_schema
from pyqt_formdemo.forms import FormController, RegistrationFormDemo

__all__ = [
    "__version__",
    "FormDemoConfig",
    "set_form_config",
    "get_form_config",
    "RegistrationData",
    "COUNTRIES",
    "SUBSCRIPTION_PLANS",
    "ValidationError",
    "ValidationKind",
    "build_registration_schema",
    "FormController",
    "RegistrationFormDemo",
]
