"""
Configuration protocol for the form demo.

Applications register a FormDemoConfig once at startup; every module reads
it through get_form_config().
"""

from .form_config import FormDemoConfig, set_form_config, get_form_config

__all__ = [
    "FormDemoConfig",
    "set_form_config",
    "get_form_config",
]
