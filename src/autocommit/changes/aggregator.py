"""Count file changes per action."""

from __future__ import annotations

from typing import Iterable

from autocommit.changes.classifier import classify_change
from autocommit.changes.models import Action, ActionCount, ActionCountMap
from autocommit.git.models import FileChange


def count_actions(actions: Iterable[Action]) -> ActionCountMap:
    """Tally already-classified *actions*.

    Keys appear in the order their action is first seen, and only actions
    with at least one file are present.
    """
    counts: ActionCountMap = {}

    for action in actions:
        if action in counts:
            counts[action].file_count += 1
        else:
            counts[action] = ActionCount(1)

    return counts


def count_by_action(changes: Iterable[FileChange]) -> ActionCountMap:
    """Classify *changes* and tally them per action."""
    return count_actions(classify_change(change) for change in changes)
