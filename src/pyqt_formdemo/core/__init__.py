"""
Core utilities.

Logging setup shared by every layer of the package.
"""

from .log_utils import setup_logging, get_current_log_file_path

__all__ = [
    "setup_logging",
    "get_current_log_file_path",
]
