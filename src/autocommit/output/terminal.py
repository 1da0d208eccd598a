"""Rich terminal reporter for ``generate --explain``."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from autocommit.changes.models import Action, ChangeSummary
from autocommit.git.models import describe_code

_ACTION_STYLE = {
    Action.CREATE: "bold green",
    Action.UPDATE: "bold yellow",
    Action.DELETE: "bold red",
    Action.RENAME: "bold cyan",
    Action.MOVE: "bold blue",
    Action.MOVE_AND_RENAME: "bold magenta",
}


def _action_pill(action: Action) -> Text:
    return Text(action.value, style=_ACTION_STYLE.get(action, ""))


def _status_cell(code: str) -> str:
    shown = code if code.strip() else "·"
    return f"{shown} {describe_code(code)}"


def render(summary: ChangeSummary, *, console: Optional[Console] = None) -> None:
    """Print each change with its action, followed by the totals."""
    console = console or Console(stderr=True)

    table = Table(
        title="Changes",
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Status", min_width=12)
    table.add_column("From", style="magenta")
    table.add_column("To", style="magenta")
    table.add_column("Action", justify="center")

    for change, action in summary.changes:
        table.add_row(
            _status_cell(change.x),
            change.from_ or "-",
            change.to or "-",
            _action_pill(action),
        )

    console.print(table)
    console.print()
    for action, entry in summary.counts.items():
        console.print(f"[dim]{action.value}:[/dim] {entry.file_count}")
    console.print(f"[dim]Total files:[/dim] {summary.total_files}")
