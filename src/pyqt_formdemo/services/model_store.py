"""Signal-emitting storage for the current record and the submitted snapshot."""

import logging
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from pyqt_formdemo.models import RegistrationData

logger = logging.getLogger(__name__)


class ModelStore(QObject):
    """
    Holds exactly one current record and one optional submitted snapshot.

    Pure storage: no validation happens here. Every write emits the matching
    signal so listeners can react without polling.
    """

    model_changed = pyqtSignal(object)      # RegistrationData
    submitted_changed = pyqtSignal(object)  # RegistrationData or None

    def __init__(self, initial: Optional[RegistrationData] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._model = initial if initial is not None else RegistrationData.initial()
        self._submitted: Optional[RegistrationData] = None

    def get_model(self) -> RegistrationData:
        return self._model

    def set_model(self, record: RegistrationData) -> None:
        if not isinstance(record, RegistrationData):
            raise TypeError(f"Expected RegistrationData, got {type(record).__name__}")
        self._model = record
        self.model_changed.emit(record)

    def get_submitted(self) -> Optional[RegistrationData]:
        return self._submitted

    def set_submitted(self, record: Optional[RegistrationData]) -> None:
        if record is not None and not isinstance(record, RegistrationData):
            raise TypeError(f"Expected RegistrationData or None, got {type(record).__name__}")
        self._submitted = record
        self.submitted_changed.emit(record)
        logger.debug(f"Submitted snapshot {'set' if record is not None else 'cleared'}")
