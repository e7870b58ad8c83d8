"""
Context manager factory for boolean flag management.

Pattern:
    Instead of:
        self._in_reset = True
        try:
            # ... logic
        finally:
            self._in_reset = False

    Use:
        with FlagContextManager.manage_flags(self, _in_reset=True):
            # ... logic

Previous values are restored even when the block raises.
"""

from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Set
import logging

logger = logging.getLogger(__name__)


class ControllerFlag(Enum):
    """
    Registry of valid FormController flags.

    Add new flags here as they're introduced to the codebase.
    """
    IN_RESET = '_in_reset'
    DISPATCHING = '_dispatching'


class FlagContextManager:
    """Context manager factory that sets flags on entry and restores them on exit."""

    VALID_FLAGS: Set[str] = {flag.value for flag in ControllerFlag}

    @staticmethod
    @contextmanager
    def manage_flags(obj: Any, **flags: bool):
        """
        Set flags on ``obj`` for the duration of the block.

        Raises:
            ValueError: If any flag name is not in VALID_FLAGS registry
            AttributeError: If ``obj`` does not initialize the flag
        """
        invalid_flags = set(flags.keys()) - FlagContextManager.VALID_FLAGS
        if invalid_flags:
            raise ValueError(
                f"Invalid flags: {invalid_flags}. "
                f"Valid flags: {FlagContextManager.VALID_FLAGS}. "
                f"Add new flags to ControllerFlag enum."
            )

        # No default: every flag must be initialized in the owner's __init__
        prev_values: Dict[str, bool] = {}
        for flag_name in flags:
            prev_values[flag_name] = getattr(obj, flag_name)

        for flag_name, flag_value in flags.items():
            setattr(obj, flag_name, flag_value)
            logger.debug(f"Setting flag {flag_name}={flag_value} on {type(obj).__name__}")

        try:
            yield
        finally:
            for flag_name, prev_value in prev_values.items():
                setattr(obj, flag_name, prev_value)

    @staticmethod
    @contextmanager
    def reset_context(obj: Any):
        """Mark ``obj`` as resetting; field dispatch is ignored meanwhile."""
        with FlagContextManager.manage_flags(obj, **{ControllerFlag.IN_RESET.value: True}):
            yield

    @staticmethod
    def is_flag_set(obj: Any, flag: ControllerFlag) -> bool:
        return getattr(obj, flag.value)

    @staticmethod
    def get_flag_state(obj: Any) -> Dict[str, bool]:
        """Current state of all registered flags, for debugging and logging."""
        return {flag.value: getattr(obj, flag.value) for flag in ControllerFlag}
