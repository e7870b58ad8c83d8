"""Base configuration class for the registration form demo.

Provides hooks for applications to customize logging and which optional
cross-field rules are attached to the registration schema.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class FormDemoConfig:
    """Configuration for form demo behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        log_dir: Directory for the log file (None disables file logging)
        log_level: Level name applied to the package logger
        log_prefix: Prefix for generated log file names
        log_root_logger_name: Logger that setup_logging configures
        debug_dispatcher: Verbose per-event logging in FieldChangeDispatcher
        enable_birthdate_age_check: Attach the birthdate age/future rule
        enable_password_match_check: Attach the password confirmation rule
        json_indent: Indentation used when rendering submitted data
    """

    log_dir: Optional[str] = None
    log_level: str = "INFO"
    log_prefix: str = "pyqt_formdemo_"
    log_root_logger_name: str = "pyqt_formdemo"
    debug_dispatcher: bool = False
    enable_birthdate_age_check: bool = False
    enable_password_match_check: bool = False
    json_indent: int = 2


# Global config instance (set by application)
_form_config: Optional[FormDemoConfig] = None


def set_form_config(config: Optional[FormDemoConfig]) -> None:
    """Set the global form demo configuration.

    Args:
        config: FormDemoConfig instance, or None to restore defaults
    """
    global _form_config
    _form_config = config


def get_form_config() -> FormDemoConfig:
    """Get the current form demo configuration.

    Returns:
        Current FormDemoConfig or default if not set
    """
    if _form_config is None:
        return FormDemoConfig()
    return _form_config
