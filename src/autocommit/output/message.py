"""Render action counts as an English commit message."""

from __future__ import annotations

from typing import Mapping, Sequence

from autocommit.changes.models import Action, ActionCount


def pluralize(count: int, noun: str = "file") -> str:
    return noun if count == 1 else f"{noun}s"


def format_action(action: Action, count: int) -> str:
    """``create 2 files``"""
    return f"{action.value} {count} {pluralize(count)}"


def join_phrases(phrases: Sequence[str]) -> str:
    """Join phrases as an English list: ``a``, ``a and b``, ``a, b and c``."""
    if not phrases:
        return ""
    if len(phrases) == 1:
        return phrases[0]
    return f"{', '.join(phrases[:-1])} and {phrases[-1]}"


def format_message(counts: Mapping[Action, ActionCount]) -> str:
    """Render *counts* in their stored order.

    Example: ``create 1 file, update 2 files and delete 1 file``.
    """
    phrases = [
        format_action(Action(action), entry.file_count)
        for action, entry in counts.items()
    ]
    return join_phrases(phrases)
