"""Git output layer — status line parsing and models."""

from autocommit.git.models import (
    STATUS_DESCRIPTIONS,
    FileChange,
    LineFormat,
    describe_code,
)
from autocommit.git.status_parser import (
    InvalidInputError,
    detect_line_format,
    parse_diff_index_line,
    parse_line,
    parse_status_line,
)

__all__ = [
    "FileChange",
    "InvalidInputError",
    "LineFormat",
    "STATUS_DESCRIPTIONS",
    "describe_code",
    "detect_line_format",
    "parse_diff_index_line",
    "parse_line",
    "parse_status_line",
]
