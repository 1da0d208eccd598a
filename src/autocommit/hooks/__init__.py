"""Git hook script."""

from autocommit.hooks.script import HOOK_MARKER, render_hook

__all__ = ["HOOK_MARKER", "render_hook"]
