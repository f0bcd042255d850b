"""Token stream inspection command."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from gl_parser.commands.common import get_state, print_json_payload, read_entries
from gl_parser.core.models import Token
from gl_parser.core.scanner import scan


def _token_dict(token: Token) -> dict:
    return {
        "kind": token.kind.value,
        "lexeme": token.lexeme,
        "literal": token.literal,
        "line": token.line,
    }


def tokens_command(
    ctx: typer.Context,
    text: Optional[str] = typer.Argument(None, help="Workout log text"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Text file, or JSON/YAML batch of entries"),
    stdin: bool = typer.Option(False, "--stdin", help="Read the log from stdin"),
) -> None:
    """Show the scanner's token stream for a log."""
    state = get_state(ctx)
    entries = read_entries(text, file, stdin)
    scanned = [scan(entry) for entry in entries]

    if state.json_output:
        print_json_payload(
            state,
            [
                {
                    "tokens": [_token_dict(token) for token in tokens],
                    "errors": [error.to_dict() for error in errors],
                }
                for tokens, errors in scanned
            ],
        )
        return

    if state.plain_output:
        typer.echo("line\tkind\tlexeme\tliteral")
        for tokens, errors in scanned:
            for token in tokens:
                literal = "" if token.literal is None else str(token.literal)
                typer.echo(f"{token.line}\t{token.kind.value}\t{token.lexeme!r}\t{literal}")
            for error in errors:
                typer.echo(f"error\t{error.message}")
        return

    for tokens, errors in scanned:
        table = Table(title=f"Tokens ({len(tokens)} total)")
        table.add_column("Line", justify="right")
        table.add_column("Kind")
        table.add_column("Lexeme")
        table.add_column("Literal")
        for token in tokens:
            table.add_row(
                str(token.line),
                token.kind.value,
                repr(token.lexeme),
                "" if token.literal is None else repr(token.literal),
            )
        state.console.print(table)
        for error in errors:
            state.console.print(f"error: {error.message}", markup=False)
