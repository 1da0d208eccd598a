"""autocommit CLI — Typer application with generate, hook, and init commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from autocommit import __version__

app = typer.Typer(
    name="autocommit",
    help="Write a commit message from git status output.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _collect_lines(args: Optional[List[str]]) -> List[str]:
    """Split every argument (or stdin) into non-blank lines."""
    if args:
        chunks = args
    elif not sys.stdin.isatty():
        chunks = [sys.stdin.read()]
    else:
        chunks = []
    return [line for chunk in chunks for line in chunk.splitlines() if line.strip()]


# ── generate ──────────────────────────────────────────────────────────────────


@app.command()
def generate(
    lines: Optional[List[str]] = typer.Argument(None, help="Status lines; read from stdin when omitted"),
    input_format: Optional[str] = typer.Option(None, "--input-format", "-i", help="Line format: auto | status | diff-index"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: text | json"),
    explain: bool = typer.Option(False, "--explain", "-e", help="Show each change and its action"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .autocommit.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """Print a commit message for the given file changes."""
    from autocommit.changes.classifier import UnrecognizedStatusCode
    from autocommit.config.loader import ConfigError, load_config
    from autocommit.config.schema import INPUT_FORMATS, OUTPUT_FORMATS
    from autocommit.generate import EmptyInputError, summarize
    from autocommit.git.status_parser import InvalidInputError
    from autocommit.log import configure_logger
    from autocommit.output import json_report, terminal

    # --- Load config ---
    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if input_format:
        if input_format not in INPUT_FORMATS:
            console.print(f"[bold red]Invalid input format:[/bold red] {input_format}")
            raise typer.Exit(code=2)
        cfg.input.format = input_format  # type: ignore[assignment]
    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if explain:
        cfg.output.explain = True
    if debug:
        cfg.logging.level = "debug"
    elif verbose:
        cfg.logging.level = "info"

    logger = configure_logger(cfg.logging.level)
    logger.debug("Config: %s", cfg)

    # --- Generate ---
    try:
        summary = summarize(_collect_lines(lines), cfg.input.format)
    except EmptyInputError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc
    except (InvalidInputError, UnrecognizedStatusCode) as exc:
        console.print(f"[bold red]Invalid input:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    # --- Output ---
    if cfg.output.explain:
        terminal.render(summary, console=console)

    if cfg.output.format == "json":
        print(json_report.render(summary))
    else:
        print(summary.message)


# ── hook ──────────────────────────────────────────────────────────────────────


@app.command()
def hook(
    executable: str = typer.Option("autocommit", "--executable", help="Command the hook calls"),
) -> None:
    """Print a prepare-commit-msg hook that fills in the message."""
    from autocommit.hooks.script import render_hook

    sys.stdout.write(render_hook(executable))


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config"),
) -> None:
    """Generate a starter .autocommit.toml in the current directory."""
    from autocommit.config.defaults import DEFAULT_TOML
    from autocommit.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists() and not force:
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"autocommit {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """autocommit — write a commit message from git status output."""
