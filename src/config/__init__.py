"""
lint-todo-config Configuration Module

Resolves the todo "days to decay" thresholds from package.json, environment
variables and directly supplied values, and validates the result.

Author: lint-todo-config Project
License: MIT
"""

from .errors import TodoConfigError
from .schema import DEFAULT_DAYS_TO_DECAY, DaysToDecay, SourceState
from .todo_config import TodoConfigLoader, get_todo_config

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DAYS_TO_DECAY",
    "DaysToDecay",
    "SourceState",
    "TodoConfigError",
    "TodoConfigLoader",
    "get_todo_config",
]
