"""
Core Log Utilities for pyqt-formdemo.

Logger setup and log file discovery driven by FormDemoConfig.
"""

import logging
import time
from pathlib import Path
from typing import Optional

from pyqt_formdemo.protocols import FormDemoConfig, get_form_config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get_log_dir(config: FormDemoConfig) -> Optional[Path]:
    """Return configured log directory, or None when file logging is off."""
    if config.log_dir:
        return Path(config.log_dir)
    return None


def setup_logging(config: Optional[FormDemoConfig] = None) -> logging.Logger:
    """
    Configure the package logger.

    Installs a console handler and, when ``log_dir`` is set, a file handler
    writing to ``<log_dir>/<log_prefix><timestamp>.log``. Calling it again
    replaces the handlers installed by the previous call.

    Args:
        config: Configuration to apply (defaults to the global config)

    Returns:
        The configured package logger
    """
    config = config or get_form_config()
    package_logger = logging.getLogger(config.log_root_logger_name)

    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.log_level!r}")
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    log_dir = _get_log_dir(config)
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"{config.log_prefix}{int(time.time())}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)
        logger.debug(f"Logging to file: {log_file}")

    return package_logger


def get_current_log_file_path(config: Optional[FormDemoConfig] = None) -> Optional[str]:
    """Get the file path of the handler installed by setup_logging, if any."""
    config = config or get_form_config()
    for handler in logging.getLogger(config.log_root_logger_name).handlers:
        if isinstance(handler, logging.FileHandler):
            return handler.baseFilename
    return None
