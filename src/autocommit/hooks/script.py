"""prepare-commit-msg hook script — printed by ``autocommit hook``.

The hook, not autocommit, talks to git: it collects the staged changes with
``git diff-index`` and hands them to ``autocommit generate`` as one argument.
"""

from __future__ import annotations

import shlex

HOOK_MARKER = "# autocommit-hook"

_HOOK_TEMPLATE = """\
#!/bin/sh
{marker}
# Fill in an empty commit message from the staged changes.
# Install: autocommit hook > .git/hooks/prepare-commit-msg
#          chmod +x .git/hooks/prepare-commit-msg

COMMIT_MSG_FILE="$1"
COMMIT_SOURCE="$2"

# Leave messages from -m, -F, merges, squashes and amends alone.
[ -n "$COMMIT_SOURCE" ] && exit 0

CHANGES=$(git diff-index --name-status -M --cached HEAD 2>/dev/null)
[ -z "$CHANGES" ] && exit 0

MSG=$({executable} generate --input-format diff-index "$CHANGES") || exit 0

{{ printf '%s\\n' "$MSG"; cat "$COMMIT_MSG_FILE"; }} > "$COMMIT_MSG_FILE.autocommit"
mv "$COMMIT_MSG_FILE.autocommit" "$COMMIT_MSG_FILE"
"""


def render_hook(executable: str = "autocommit") -> str:
    """Return the hook script, calling *executable* for the message."""
    return _HOOK_TEMPLATE.format(marker=HOOK_MARKER, executable=shlex.quote(executable))
