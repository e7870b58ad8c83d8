"""Tests for core utilities and configuration."""

import logging

import pytest


def test_default_config():
    from pyqt_formdemo.protocols import FormDemoConfig, get_form_config

    config = get_form_config()
    assert isinstance(config, FormDemoConfig)
    assert config.enable_birthdate_age_check is False
    assert config.enable_password_match_check is False


def test_set_form_config():
    from pyqt_formdemo.protocols import FormDemoConfig, get_form_config, set_form_config

    config = FormDemoConfig(json_indent=4)
    set_form_config(config)
    assert get_form_config() is config


def test_setup_logging_console_only():
    from pyqt_formdemo.core import get_current_log_file_path, setup_logging
    from pyqt_formdemo.protocols import FormDemoConfig

    config = FormDemoConfig(log_level="debug", log_root_logger_name="pyqt_formdemo_test_console")
    package_logger = setup_logging(config)
    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 1
    assert get_current_log_file_path(config) is None


def test_setup_logging_with_file(tmp_path):
    from pyqt_formdemo.core import get_current_log_file_path, setup_logging
    from pyqt_formdemo.protocols import FormDemoConfig

    config = FormDemoConfig(log_dir=str(tmp_path / "logs"),
                            log_root_logger_name="pyqt_formdemo_test_file")
    package_logger = setup_logging(config)
    package_logger.info("hello")

    log_path = get_current_log_file_path(config)
    assert log_path is not None
    assert log_path.startswith(str(tmp_path / "logs" / "pyqt_formdemo_"))

    # A second call replaces handlers instead of stacking them
    setup_logging(config)
    assert len(package_logger.handlers) == 2

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()


def test_setup_logging_rejects_unknown_level():
    from pyqt_formdemo.core import setup_logging
    from pyqt_formdemo.protocols import FormDemoConfig

    with pytest.raises(ValueError):
        setup_logging(FormDemoConfig(log_level="chatty", log_root_logger_name="pyqt_formdemo_bad"))


def test_log_file_path_ignores_foreign_handlers(tmp_path):
    from pyqt_formdemo.core import get_current_log_file_path, setup_logging
    from pyqt_formdemo.protocols import FormDemoConfig

    config = FormDemoConfig(log_root_logger_name="pyqt_formdemo_test_foreign")
    setup_logging(config)

    foreign = logging.FileHandler(tmp_path / "other.log")
    logging.getLogger().addHandler(foreign)
    try:
        assert get_current_log_file_path(config) is None
    finally:
        logging.getLogger().removeHandler(foreign)
        foreign.close()
