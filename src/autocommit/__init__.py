"""autocommit — write a commit message from git status output."""

__version__ = "0.1.0"

from autocommit.generate import EmptyInputError, generate_message, summarize  # noqa: E402

__all__ = ["EmptyInputError", "__version__", "generate_message", "summarize"]
