"""Per-field view over a FormController."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Set

from pyqt_formdemo.validation import ValidationError

if TYPE_CHECKING:
    from .form_controller import FormController


class FieldState:
    """
    Read/write handle for one field of the controller's record.

    Holds no state of its own; every accessor reads the controller, so a
    handle stays current across reset and fill-sample.
    """

    def __init__(self, controller: 'FormController', name: str):
        self._controller = controller
        self.name = name

    def __repr__(self) -> str:
        return f"FieldState({self.name!r}, value={self.value()!r}, valid={self.valid()})"

    def value(self) -> Any:
        return getattr(self._controller.model(), self.name)

    def set_value(self, value: Any) -> Set[str]:
        """Write through the dispatcher; returns fields whose validity changed."""
        return self._controller.set_value(self.name, value)

    def errors(self) -> List[ValidationError]:
        return self._controller.field_errors(self.name)

    def valid(self) -> bool:
        return not self.errors()

    def invalid(self) -> bool:
        return not self.valid()

    def touched(self) -> bool:
        return self._controller.is_touched(self.name)

    def mark_as_touched(self) -> None:
        self._controller.mark_touched(self.name)
