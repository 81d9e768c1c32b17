"""
Configuration Schema and Models

Defines the Pydantic model for the todo "days to decay" configuration along
with the enums and constants shared by the resolver.

Author: lint-todo-config Project
License: MIT
"""

from enum import Enum
from typing import Any, Dict, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field


DAYS_TO_DECAY_FIELDS = ("warn", "error")

DEFAULT_DAYS_TO_DECAY: Dict[str, int] = {"warn": 30, "error": 60}

WARN_ENV_VAR = "TODO_DAYS_TO_WARN"
ERROR_ENV_VAR = "TODO_DAYS_TO_ERROR"

MANIFEST_FILENAME = "package.json"
MANIFEST_CONFIG_PATH = ("lintTodo", "daysToDecay")


class SourceState(str, Enum):
    """Presence of a configuration source partial."""
    ABSENT = "absent"
    EMPTY = "empty"
    CONFIGURED = "configured"


class DaysToDecay(BaseModel):
    """
    Day thresholds after which a todo is flagged as a warning or an error.

    Both fields are optional. A field counts as present only when it was
    explicitly supplied, which is tracked by pydantic's ``model_fields_set``.
    Values are not coerced so that malformed manifest entries pass through
    as-is.
    """

    model_config = ConfigDict(extra="ignore")

    warn: Optional[Any] = Field(
        default=None,
        description="Elapsed days after which a todo is reported as a warning"
    )
    error: Optional[Any] = Field(
        default=None,
        description="Elapsed days after which a todo is reported as an error"
    )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DaysToDecay":
        """Build a partial from any mapping, keeping only the known fields."""
        return cls(**{key: data[key] for key in DAYS_TO_DECAY_FIELDS if key in data})

    @property
    def present_fields(self) -> tuple:
        """Names of the explicitly supplied fields, in declaration order."""
        return tuple(key for key in DAYS_TO_DECAY_FIELDS if key in self.model_fields_set)

    def is_empty(self) -> bool:
        return not self.present_fields

    def to_dict(self) -> Dict[str, Any]:
        """Return the present fields only."""
        return {key: getattr(self, key) for key in self.present_fields}

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DaysToDecay):
            return self.to_dict() == other.to_dict()
        return NotImplemented


def source_state(partial: Optional[DaysToDecay]) -> SourceState:
    """Classify a source partial as absent, empty or configured."""
    if partial is None:
        return SourceState.ABSENT
    if partial.is_empty():
        return SourceState.EMPTY
    return SourceState.CONFIGURED
