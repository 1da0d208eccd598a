"""Pipeline — status lines in, commit message out."""

from __future__ import annotations

from typing import Sequence

from autocommit.changes.aggregator import count_actions
from autocommit.changes.classifier import classify_change
from autocommit.changes.models import ChangeSummary
from autocommit.git.status_parser import parse_line
from autocommit.log import get_logger
from autocommit.output.message import format_message

logger = get_logger(__name__)


class EmptyInputError(Exception):
    """Raised when no status lines are supplied."""


def summarize(lines: Sequence[str], line_format: str = "auto") -> ChangeSummary:
    """Parse, classify and count *lines*, and render the message.

    The first line that fails to parse or classify aborts the whole batch.
    """
    if not lines:
        raise EmptyInputError("No file changes given")

    changes = [parse_line(line, line_format) for line in lines]
    logger.debug("Parsed %d line(s) as %s", len(changes), line_format)

    classified = [(change, classify_change(change)) for change in changes]
    counts = count_actions(action for _, action in classified)
    message = format_message(counts)
    logger.info("Message: %s", message)

    return ChangeSummary(changes=classified, counts=counts, message=message)


def generate_message(lines: Sequence[str], line_format: str = "auto") -> str:
    """Return the commit message for *lines*."""
    return summarize(lines, line_format).message
