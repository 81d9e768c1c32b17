"""
Todo Configuration Loader

Resolves the todo "days to decay" thresholds from three sources, lowest
precedence first:

    1. The project's package.json, under ``lintTodo.daysToDecay``::

        {
          "lintTodo": {
            "daysToDecay": {
              "warn": 5,
              "error": 10
            }
          }
        }

    2. The ``TODO_DAYS_TO_WARN`` and ``TODO_DAYS_TO_ERROR`` environment variables.
    3. Values passed in directly, such as from command line options.

Resolution only reads package.json and the environment. Diagnostic records
go to the ``lint_todo`` loggers at DEBUG level and are silent unless the
host tool calls ``src.utils.logger.setup_logging``.

Author: lint-todo-config Project
License: MIT
"""

import os
import re
import sys
import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .errors import TodoConfigError
from .schema import (
    DAYS_TO_DECAY_FIELDS,
    DEFAULT_DAYS_TO_DECAY,
    ERROR_ENV_VAR,
    MANIFEST_CONFIG_PATH,
    MANIFEST_FILENAME,
    WARN_ENV_VAR,
    DaysToDecay,
    SourceState,
    source_state,
)
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Leading base-10 integer; anything after the digits is ignored ("10x" -> 10).
_INT_PREFIX = re.compile(r"^\s*([+-]?[0-9]+)")

TodoConfigInput = Union[DaysToDecay, Mapping[str, Any], None]


def parse_int_prefix(value: str) -> Optional[int]:
    """
    Parse the integer at the start of a string.

    Args:
        value: Raw string, typically from an environment variable

    Returns:
        The parsed integer, or None if the string has no leading digits
        or if the value does not fit in a double
    """
    match = _INT_PREFIX.match(value)
    if match is None:
        return None
    try:
        number = int(match.group(1))
    except ValueError:
        # Longer than the interpreter's int conversion limit
        return None
    if abs(number) > sys.float_info.max:
        return None
    return number


class TodoConfigLoader:
    """
    Todo configuration resolver.

    Reads the manifest and environment on every call to :meth:`load`; nothing
    is cached between calls.
    """

    def __init__(self, base_dir: Union[str, Path]):
        """
        Initialize the loader.

        Args:
            base_dir: Directory containing the project's package.json
        """
        self.base_dir = Path(base_dir)

    @property
    def manifest_path(self) -> Path:
        return self.base_dir / MANIFEST_FILENAME

    def load(self, todo_config: TodoConfigInput = None) -> DaysToDecay:
        """
        Resolve the todo configuration.

        Args:
            todo_config: Directly supplied partial configuration, highest precedence

        Returns:
            The merged DaysToDecay, which may have zero, one or two fields set

        Raises:
            TodoConfigError: If both thresholds are numbers and warn >= error
        """
        manifest_config = self._load_manifest()
        env_config = self._load_env_vars()
        override_config = _coerce_partial(todo_config)

        merged = _merge(manifest_config, env_config, override_config)
        merged = self._apply_defaults(merged, source_state(manifest_config))
        self._validate(merged)

        logger.debug(f"Resolved todo config for {self.base_dir}: {merged.to_dict()}")
        return merged

    def _load_manifest(self) -> Optional[DaysToDecay]:
        """
        Read the ``lintTodo.daysToDecay`` section of package.json.

        Returns:
            None when the file is missing, unreadable, malformed or lacks the
            section. A present section that is not an object yields an empty
            partial.
        """
        try:
            with open(self.manifest_path, 'r', encoding='utf-8-sig') as f:
                data = json.load(f, parse_constant=_reject_constant)
        except (OSError, ValueError, RecursionError) as e:
            logger.debug(f"No usable manifest at {self.manifest_path}: {e}")
            return None

        node: Any = data
        for key in MANIFEST_CONFIG_PATH:
            if not isinstance(node, dict) or key not in node:
                return None
            node = node[key]

        if isinstance(node, dict):
            return DaysToDecay.from_mapping(node)
        return DaysToDecay()

    def _load_env_vars(self) -> DaysToDecay:
        """
        Read thresholds from ``TODO_DAYS_TO_WARN`` and ``TODO_DAYS_TO_ERROR``.

        Unset, empty or non-numeric variables are omitted.
        """
        config: Dict[str, int] = {}

        for field, env_var in (("warn", WARN_ENV_VAR), ("error", ERROR_ENV_VAR)):
            raw = os.getenv(env_var)
            if not raw:
                continue
            value = parse_int_prefix(raw)
            if value is None:
                logger.debug(f"Ignoring {env_var}={raw!r}: not an integer")
                continue
            config[field] = value

        return DaysToDecay(**config)

    def _apply_defaults(self, merged: DaysToDecay, manifest_state: SourceState) -> DaysToDecay:
        """
        Fall back to the default thresholds when nothing was configured.

        An explicitly empty manifest section opts out of the defaults.
        """
        if merged.is_empty() and manifest_state is SourceState.ABSENT:
            return DaysToDecay(**DEFAULT_DAYS_TO_DECAY)
        return merged

    def _validate(self, config: DaysToDecay) -> None:
        warn, error = config.warn, config.error
        if _is_number(warn) and _is_number(error) and warn >= error:
            raise TodoConfigError(warn, error)


def _coerce_partial(todo_config: TodoConfigInput) -> DaysToDecay:
    if todo_config is None:
        return DaysToDecay()
    if isinstance(todo_config, DaysToDecay):
        return todo_config
    return DaysToDecay.from_mapping(todo_config)


def _merge(*partials: Optional[DaysToDecay]) -> DaysToDecay:
    """Merge partials left to right; present fields overwrite, absent ones are skipped."""
    merged: Dict[str, Any] = {}
    for partial in partials:
        if partial is None:
            continue
        for key in DAYS_TO_DECAY_FIELDS:
            if key in partial.model_fields_set:
                merged[key] = getattr(partial, key)
    return DaysToDecay(**merged)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON literal: {name}")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def get_todo_config(
    base_dir: Union[str, Path],
    todo_config: TodoConfigInput = None
) -> DaysToDecay:
    """
    Convenience function to resolve the todo configuration.

    Args:
        base_dir: Directory containing the project's package.json
        todo_config: Optional directly supplied partial configuration

    Returns:
        Resolved DaysToDecay

    Raises:
        TodoConfigError: If warn is not less than error
    """
    loader = TodoConfigLoader(base_dir)
    return loader.load(todo_config)
