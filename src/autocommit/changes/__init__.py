"""Action classification and aggregation."""

from autocommit.changes.aggregator import count_actions, count_by_action
from autocommit.changes.classifier import (
    UnrecognizedStatusCode,
    classify_change,
    classify_rename_or_move,
)
from autocommit.changes.models import Action, ActionCount, ActionCountMap, ChangeSummary

__all__ = [
    "Action",
    "ActionCount",
    "ActionCountMap",
    "ChangeSummary",
    "UnrecognizedStatusCode",
    "classify_change",
    "classify_rename_or_move",
    "count_actions",
    "count_by_action",
]
