"""Data models for parsed status lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class LineFormat(str, Enum):
    STATUS = "status"
    DIFF_INDEX = "diff-index"


# Short-format status codes, as documented for `git status --short`.
STATUS_DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    " ": "unmodified",
    "M": "modified",
    "T": "file type changed",
    "A": "added",
    "D": "deleted",
    "R": "renamed",
    "C": "copied",
    "U": "updated but unmerged",
    "?": "untracked",
    "!": "ignored",
})


def describe_code(code: str) -> str:
    """Return the human description of a status code, or ``unknown``."""
    return STATUS_DESCRIPTIONS.get(code, "unknown")


@dataclass(frozen=True)
class FileChange:
    """One file change read from a status or diff-index line."""

    x: str
    y: str
    to: str
    from_: str = ""  # set on renames and moves
