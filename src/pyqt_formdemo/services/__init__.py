"""
Service layer for form management.

Model storage, field change dispatch, and the flag helper the controller
uses around batch operations.
"""

from .model_store import ModelStore
from .flag_context_manager import FlagContextManager, ControllerFlag
from .field_change_dispatcher import FieldChangeDispatcher, FieldChangeEvent

__all__ = [
    "ModelStore",
    "FlagContextManager",
    "ControllerFlag",
    "FieldChangeDispatcher",
    "FieldChangeEvent",
]
