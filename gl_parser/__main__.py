"""Entry point for gl."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gl_parser import __version__
from gl_parser.commands.parse import parse_command
from gl_parser.commands.tokens import tokens_command
from gl_parser.core.config import (
    ConfigError,
    default_config_path,
    load_config,
    parser_config_from,
    resolve_output_format,
)
from gl_parser.core.logging_setup import log_level_for, setup_logging
from gl_parser.core.state import CLIState

app = typer.Typer(
    add_completion=False,
    help="Workout log parser command-line interface",
    invoke_without_command=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output JSON where available"),
    plain_output: bool = typer.Option(
        False,
        "--plain",
        help="Output plain text (no rich formatting/tables)",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Quiet output"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Initialize global CLI state."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if json_output and plain_output:
        typer.echo("Options --json and --plain are mutually exclusive.")
        raise typer.Exit(code=2)

    cfg_path = (config or default_config_path()).expanduser().resolve()
    try:
        cfg = load_config(cfg_path)
        output_format = resolve_output_format(cfg, json_output=json_output, plain_output=plain_output)
        parser_config = parser_config_from(cfg)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}")
        raise typer.Exit(code=2)

    plain = output_format == "plain"
    console = Console(
        quiet=quiet,
        no_color=plain,
        log_time=False,
        log_path=False,
    )
    setup_logging(
        log_level_for(verbose=verbose, quiet=quiet),
        console=Console(stderr=True, no_color=plain),
    )
    ctx.obj = CLIState(
        output_format=output_format,
        parser_config=parser_config,
        strict=bool(cfg["parser"].get("strict", False)),
        console=console,
    )

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


app.command("parse")(parse_command)
app.command("tokens")(tokens_command)


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
