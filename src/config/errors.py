"""
Configuration Errors

Author: lint-todo-config Project
License: MIT
"""

from typing import Any


class TodoConfigError(ValueError):
    """Raised when the resolved `warn` threshold is not below the `error` threshold."""

    def __init__(self, warn: Any, error: Any):
        self.warn = warn
        self.error = error
        super().__init__(
            "The provided todo configuration contains invalid values. "
            f"The `warn` value ({warn}) must be less than the `error` value ({error})."
        )
