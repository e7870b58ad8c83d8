"""pytest configuration and fixtures for pyqt-formdemo tests."""

import os

import pytest
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pyqt_formdemo.protocols import set_form_config


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the default FormDemoConfig."""
    set_form_config(None)
    yield
    set_form_config(None)


@pytest.fixture
def schema():
    from pyqt_formdemo.validation import build_registration_schema
    return build_registration_schema()


@pytest.fixture
def controller(qapp, schema):
    from pyqt_formdemo.forms import FormController
    return FormController(schema)


@pytest.fixture
def sample():
    from pyqt_formdemo.models import RegistrationData
    return RegistrationData.sample()
