"""Form demo exceptions."""


class FormDemoError(Exception):
    """Base class for errors raised by pyqt-formdemo."""


class UnknownFieldError(FormDemoError, KeyError):
    """Raised when a field name is not part of the registration record."""


class FieldTypeError(FormDemoError, TypeError):
    """Raised when a value does not match the field's declared type."""
