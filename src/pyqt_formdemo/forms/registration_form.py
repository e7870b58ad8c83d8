"""Registration form demo component."""

import logging
from typing import Optional, Sequence

from PyQt6.QtCore import QObject

from pyqt_formdemo.models import COUNTRIES, SUBSCRIPTION_PLANS, Country, RegistrationData
from pyqt_formdemo.protocols import FormDemoConfig, get_form_config
from pyqt_formdemo.validation import build_registration_schema

from .form_controller import FormController

logger = logging.getLogger(__name__)


class RegistrationFormDemo(QObject):
    """
    Registration form showcasing every field type and rule of the schema.

    Owns a FormController built from the registration schema and exposes the
    three demo actions (submit, reset, fill sample) plus the reference data a
    view needs to populate its dropdown and radio buttons.
    """

    countries: Sequence[Country] = COUNTRIES
    subscription_plans: Sequence[str] = SUBSCRIPTION_PLANS

    def __init__(self, config: Optional[FormDemoConfig] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.config = config or get_form_config()
        self.controller = FormController(build_registration_schema(self.config), parent=self)

    @property
    def model(self) -> RegistrationData:
        return self.controller.model()

    @property
    def submitted_data(self) -> Optional[RegistrationData]:
        return self.controller.submitted()

    def on_submit(self) -> bool:
        if self.controller.submit():
            logger.info(f"Form submitted successfully for user {self.model.username!r}")
            return True
        logger.info("Form has validation errors")
        return False

    def reset_form(self) -> None:
        self.controller.reset()
        logger.info("Form reset to initial state")

    def fill_sample_data(self) -> None:
        self.controller.fill_sample()
        logger.info("Sample data filled")

    def submitted_json(self) -> Optional[str]:
        """Submitted snapshot rendered as JSON, or None when nothing is accepted."""
        submitted = self.submitted_data
        if submitted is None:
            return None
        return submitted.to_json(indent=self.config.json_indent)
