"""Shared command helpers."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import typer

from gl_parser.core.state import CLIState
from gl_parser.utils.parsing import load_log_entries


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":"), ensure_ascii=False))
        return
    state.console.print_json(data=payload)


def read_entries(text: Optional[str], file: Optional[Path], stdin: bool) -> List[str]:
    """Collect log entries from exactly one of TEXT, --file or --stdin."""
    sources = sum(1 for given in (text is not None, file is not None, stdin) if given)
    if sources == 0:
        raise typer.BadParameter("Provide TEXT, --file, or --stdin")
    if sources > 1:
        raise typer.BadParameter("TEXT, --file and --stdin are mutually exclusive")
    if file is not None and not file.exists():
        raise typer.BadParameter(f"File not found: {file}")

    stdin_text = sys.stdin.read() if stdin else ""
    return load_log_entries(text=text, file_path=file, read_stdin=stdin, stdin_text=stdin_text)


def report_error(state: CLIState, message: str, payload: Optional[dict] = None) -> None:
    """Print an error in the active output mode and exit with code 1."""
    if state.json_output:
        print_json_payload(state, {"status": "error", "message": message, **(payload or {})})
    elif state.plain_output:
        typer.echo("status\terror")
        typer.echo(f"message\t{message}")
    else:
        state.console.print(f"Error: {message}", markup=False)
    raise typer.Exit(code=1)
