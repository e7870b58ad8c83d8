"""
Unified Field Change Dispatcher.

Centralizes all field writes into a single event-driven dispatcher: every
per-field setter and every wholesale model replacement goes through here, and
the dispatcher reports which fields changed validity as a result.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Set

from pyqt_formdemo.models import RegistrationData
from pyqt_formdemo.protocols import get_form_config
from .flag_context_manager import FlagContextManager, ControllerFlag

if TYPE_CHECKING:
    from pyqt_formdemo.forms.form_controller import FormController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldChangeEvent:
    """Immutable event representing a field change."""
    field_name: str                     # Field of RegistrationData
    value: Any                          # New value
    source: 'FormController'            # Controller owning the record
    is_reset: bool = False              # Part of a reset; bypasses the reset guard


class FieldChangeDispatcher:
    """Singleton dispatcher for all field changes. Stateless."""

    _instance = None

    @classmethod
    def instance(cls) -> 'FieldChangeDispatcher':
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def dispatch(self, event: FieldChangeEvent) -> Set[str]:
        """
        Apply one field change.

        Returns:
            Names of fields whose validity flipped. Cross-field rules mean this
            can include fields other than ``event.field_name``.

        Raises:
            UnknownFieldError, FieldTypeError: contract violations by the caller
        """
        source = event.source
        record = source.store.get_model().with_field(event.field_name, event.value)
        return self._apply(source, record, event.field_name, event.value, event.is_reset)

    def replace_model(self, source: 'FormController', record: RegistrationData,
                      is_reset: bool = False) -> Set[str]:
        """Apply a wholesale record replacement."""
        if not isinstance(record, RegistrationData):
            raise TypeError(f"Expected RegistrationData, got {type(record).__name__}")
        return self._apply(source, record, None, record, is_reset)

    def _apply(self, source: 'FormController', record: RegistrationData,
               field_name: Optional[str], value: Any, is_reset: bool) -> Set[str]:
        debug = get_form_config().debug_dispatcher
        label = field_name or '<model>'

        if debug:
            reset_tag = " [RESET]" if is_reset else ""
            logger.info(f"DISPATCH{reset_tag}: {label} = {repr(value)[:50]}")

        # Reentrancy guard: listeners writing back from a signal are ignored
        if FlagContextManager.is_flag_set(source, ControllerFlag.DISPATCHING):
            logger.warning(f"Dispatch of {label} blocked: already dispatching")
            return set()

        if FlagContextManager.is_flag_set(source, ControllerFlag.IN_RESET) and not is_reset:
            if debug:
                logger.warning(f"Dispatch of {label} blocked: reset in progress")
            return set()

        with FlagContextManager.manage_flags(source, **{ControllerFlag.DISPATCHING.value: True}):
            previous = source.store.get_model()
            before = self._validity(source, previous)
            was_valid = all(before.values())

            # Validate first so a rule that raises leaves the stored record untouched
            after = self._validity(source, record)
            source.store.set_model(record)

            changed = {name for name, valid in after.items() if before[name] != valid}
            now_valid = all(after.values())

            if debug and changed:
                logger.info(f"  validity changed: {sorted(changed)}")

            if field_name is not None:
                source.field_changed.emit(field_name, value)
            else:
                for name in record.field_names():
                    new_value = getattr(record, name)
                    if getattr(previous, name) != new_value:
                        source.field_changed.emit(name, new_value)

            if was_valid != now_valid:
                logger.debug(f"Form validity changed: {was_valid} -> {now_valid}")
                source.validity_changed.emit(now_valid)

        return changed

    @staticmethod
    def _validity(source: 'FormController', record: RegistrationData) -> Dict[str, bool]:
        errors = source.schema.validate(record)
        return {name: not field_errors for name, field_errors in errors.items()}
