"""Message formatting and reporters."""

from autocommit.output.message import (
    format_action,
    format_message,
    join_phrases,
    pluralize,
)

__all__ = ["format_action", "format_message", "join_phrases", "pluralize"]
