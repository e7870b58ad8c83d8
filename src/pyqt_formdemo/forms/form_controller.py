"""Form controller - owns the record, the rules, and the touched flags."""

import logging
from typing import Dict, List, Optional, Set

from PyQt6.QtCore import QObject, pyqtSignal

from pyqt_formdemo.exceptions import UnknownFieldError
from pyqt_formdemo.models import RegistrationData
from pyqt_formdemo.services import (
    FieldChangeDispatcher,
    FieldChangeEvent,
    FlagContextManager,
    ModelStore,
)
from pyqt_formdemo.validation import FormSchema, ValidationError

from .field_state import FieldState

logger = logging.getLogger(__name__)


class FormController(QObject):
    """
    Reactive controller for one record.

    Validity is computed from the schema at query time, never cached. All
    writes go through FieldChangeDispatcher, which returns the set of fields
    whose validity flipped and emits the change signals below.

    Touched is a one-way flag per field (untouched -> touched) cleared only
    by reset(). It affects display policy, never validity.
    """

    field_changed = pyqtSignal(str, object)  # field_name, value
    touched_changed = pyqtSignal(str)        # field_name
    validity_changed = pyqtSignal(bool)      # is_valid
    form_submitted = pyqtSignal(object)      # RegistrationData or None
    form_reset = pyqtSignal()

    def __init__(self, schema: FormSchema,
                 initial: Optional[RegistrationData] = None,
                 sample: Optional[RegistrationData] = None,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        # Flags managed by FlagContextManager
        self._in_reset = False
        self._dispatching = False

        self.schema = schema
        self._initial = initial if initial is not None else RegistrationData.initial()
        self._sample = sample if sample is not None else RegistrationData.sample()
        self.store = ModelStore(self._initial, parent=self)
        self._touched: Set[str] = set()
        self._dispatcher = FieldChangeDispatcher.instance()

    # ========== READ ACCESSORS ==========

    def model(self) -> RegistrationData:
        return self.store.get_model()

    def submitted(self) -> Optional[RegistrationData]:
        return self.store.get_submitted()

    def field_names(self):
        return self.schema.field_names

    def field(self, name: str) -> FieldState:
        self._check_field(name)
        return FieldState(self, name)

    def field_errors(self, name: str) -> List[ValidationError]:
        self._check_field(name)
        return self.schema.errors_for(name, self.model())

    def errors(self) -> Dict[str, List[ValidationError]]:
        """Failing fields only, mapped to their errors in rule order."""
        return {name: errors for name, errors in self.schema.validate(self.model()).items()
                if errors}

    def is_valid(self) -> bool:
        return self.schema.is_valid(self.model())

    def is_touched(self, name: str) -> bool:
        self._check_field(name)
        return name in self._touched

    def touched_fields(self) -> Set[str]:
        return set(self._touched)

    # ========== MUTATORS ==========

    def set_value(self, name: str, value) -> Set[str]:
        """Per-field setter. Returns the fields whose validity changed."""
        return self._dispatcher.dispatch(FieldChangeEvent(name, value, self))

    def set_model(self, record: RegistrationData) -> Set[str]:
        """Replace the record wholesale. Returns the fields whose validity changed."""
        return self._dispatcher.replace_model(self, record)

    def mark_touched(self, name: str) -> None:
        self._check_field(name)
        if name not in self._touched:
            self._touched.add(name)
            self.touched_changed.emit(name)

    def mark_all_touched(self) -> None:
        for name in self.field_names():
            self.mark_touched(name)

    # ========== ACTIONS ==========

    def submit(self) -> bool:
        """
        Mark every field touched, then accept or reject the current record.

        A valid record is copied into the submitted snapshot; an invalid one
        clears it. Repeating the call without edits gives the same outcome.
        """
        self.mark_all_touched()

        if self.is_valid():
            record = self.model()
            self.store.set_submitted(record)
            self.form_submitted.emit(record)
            return True

        logger.debug(f"Submit rejected, invalid fields: {sorted(self.errors())}")
        self.store.set_submitted(None)
        self.form_submitted.emit(None)
        return False

    def reset(self) -> Set[str]:
        """Restore the initial record and clear the snapshot and touched flags."""
        with FlagContextManager.reset_context(self):
            changed = self._dispatcher.replace_model(self, self._initial, is_reset=True)
            self.store.set_submitted(None)
            self._touched.clear()
        self.form_reset.emit()
        return changed

    def fill_sample(self) -> Set[str]:
        """Replace the record with the sample; touched flags and snapshot are kept."""
        return self._dispatcher.replace_model(self, self._sample)

    def flag_state(self) -> Dict[str, bool]:
        return FlagContextManager.get_flag_state(self)

    def _check_field(self, name: str) -> None:
        if name not in self.schema.rules:
            raise UnknownFieldError(name)
