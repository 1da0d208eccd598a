"""Status line parser — short ``git status`` and ``git diff-index`` lines.

Each function turns exactly one line into a FileChange. Status codes are
carried through untouched; deciding what they mean is the classifier's job.
"""

from __future__ import annotations

import re

from autocommit.git.models import FileChange, LineFormat
from autocommit.log import get_logger

logger = get_logger(__name__)

_ARROW = " -> "
_WHITESPACE_RE = re.compile(r"\s+")
_MIN_LENGTH = 4


class InvalidInputError(Exception):
    """Raised when a line is too short or lacks a path."""


def _check_length(line: str) -> None:
    if len(line) <= _MIN_LENGTH:
        raise InvalidInputError(
            f"Input string must be longer than {_MIN_LENGTH} characters. Got: {line!r}"
        )


def parse_status_line(line: str) -> FileChange:
    """Parse a line from ``git status --short``.

    Layout is ``XY PATH`` or ``XY PATH -> PATH``.
    """
    _check_length(line)

    x = line[0]
    y = line[1]
    paths = line[3:]

    # NOTE: the left side of the arrow is stored as ``to``. Callers that rely
    # on direction should confirm this against their git version first.
    if _ARROW in paths:
        to, from_ = paths.split(_ARROW, 1)
    else:
        to, from_ = paths, ""

    logger.debug("status line %r -> x=%r y=%r to=%r from=%r", line, x, y, to, from_)
    return FileChange(x=x, y=y, to=to, from_=from_)


def parse_diff_index_line(line: str) -> FileChange:
    """Parse a line from ``git diff-index --name-status``.

    Only the first character of the status field is kept, so a rename
    score such as ``R100`` reads as ``R``. This format has no second
    status column; ``y`` is always a space.
    """
    _check_length(line)

    x = line[0]
    y = " "

    segments = _WHITESPACE_RE.split(line.strip())
    if len(segments) < 2:
        raise InvalidInputError(f"No path found in diff-index line: {line!r}")
    from_ = segments[1]
    to = segments[2] if len(segments) >= 3 else ""

    logger.debug("diff-index segments %r -> from=%r to=%r", segments, from_, to)
    return FileChange(x=x, y=y, to=to, from_=from_)


def detect_line_format(line: str) -> LineFormat:
    """diff-index separates fields with tabs; short status never does."""
    return LineFormat.DIFF_INDEX if "\t" in line else LineFormat.STATUS


def parse_line(line: str, line_format: str = "auto") -> FileChange:
    """Parse *line* as *line_format*: ``auto``, ``status`` or ``diff-index``."""
    if line_format == "auto":
        fmt = detect_line_format(line)
    else:
        try:
            fmt = LineFormat(line_format)
        except ValueError:
            raise ValueError(f"Unknown line format: {line_format!r}") from None

    if fmt is LineFormat.DIFF_INDEX:
        return parse_diff_index_line(line)
    return parse_status_line(line)
