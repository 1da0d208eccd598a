"""JSON reporter for scripts and editor integrations."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from autocommit.changes.models import ChangeSummary


def to_dict(summary: ChangeSummary) -> Dict[str, Any]:
    """Convert a ChangeSummary to a JSON-serialisable dict."""
    files: List[Dict[str, Any]] = []
    for change, action in summary.changes:
        files.append({
            "x": change.x,
            "y": change.y,
            "from": change.from_,
            "to": change.to,
            "action": action.value,
        })

    return {
        "version": "1.0",
        "message": summary.message,
        "actions": {
            action.value: {"fileCount": entry.file_count}
            for action, entry in summary.counts.items()
        },
        "files": files,
    }


def render(summary: ChangeSummary) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(summary), indent=2)
