"""Map a FileChange to the action it represents."""

from __future__ import annotations

import posixpath

from autocommit.changes.models import Action
from autocommit.git.models import FileChange, describe_code

_SIMPLE_ACTIONS = {
    "A": Action.CREATE,
    "M": Action.UPDATE,
    "D": Action.DELETE,
}


class UnrecognizedStatusCode(Exception):
    """Raised for a status code that has no action."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(
            f"Unrecognized status code {code!r} ({describe_code(code)})"
        )


def classify_rename_or_move(change: FileChange) -> Action:
    """Tell a rename from a move by comparing directory and file name.

    The comparison is lexical; nothing on disk is consulted.
    """
    from_dir, from_name = posixpath.split(change.from_)
    to_dir, to_name = posixpath.split(change.to)

    moved = from_dir != to_dir
    renamed = from_name != to_name

    if moved and renamed:
        return Action.MOVE_AND_RENAME
    if moved:
        return Action.MOVE
    return Action.RENAME


def classify_change(change: FileChange) -> Action:
    """Return the action for *change*, judged by its ``x`` status code."""
    if change.x == "R":
        return classify_rename_or_move(change)
    try:
        return _SIMPLE_ACTIONS[change.x]
    except KeyError:
        raise UnrecognizedStatusCode(change.x) from None
