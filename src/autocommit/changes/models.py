"""Action models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

from autocommit.git.models import FileChange


class Action(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    RENAME = "rename"
    MOVE = "move"
    MOVE_AND_RENAME = "move and rename"

    def __str__(self) -> str:
        return self.value


@dataclass
class ActionCount:
    """Number of files that share one action."""

    file_count: int


# Insertion order is the order each action was first seen.
ActionCountMap = Dict[Action, ActionCount]


@dataclass
class ChangeSummary:
    """Everything derived from one batch of status lines."""

    changes: List[Tuple[FileChange, Action]] = field(default_factory=list)
    counts: ActionCountMap = field(default_factory=dict)
    message: str = ""

    @property
    def total_files(self) -> int:
        return len(self.changes)
