"""Workout log parse command."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from rich.table import Table

from gl_parser.commands.common import get_state, print_json_payload, read_entries, report_error
from gl_parser.core.models import InvalidUnitConfigurationError, ParseResult, ParserConfig
from gl_parser.core.parse import EmptySourceError, StrictParseError, parse
from gl_parser.exporters.json_export import results_payload
from gl_parser.exporters.yaml_export import write_results
from gl_parser.utils.formatting import format_reps, format_volume, format_weight


def _summary(results: List[ParseResult]) -> Dict[str, Any]:
    return {
        "entries": len(results),
        "exercises": sum(len(result.exercises) for result in results),
        "diagnostics": sum(len(result.diagnostics) for result in results),
    }


def parse_command(
    ctx: typer.Context,
    text: Optional[str] = typer.Argument(None, help="Workout log text, e.g. 'Bench @90kg 5/5/5'"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Text file, or JSON/YAML batch of entries"),
    stdin: bool = typer.Option(False, "--stdin", help="Read the log from stdin"),
    unit: Optional[str] = typer.Option(None, "--unit", help="Default weight unit: kg|lbs"),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--lenient",
        help="Fail when the log contains anything that could not be parsed",
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write results to a .json/.yaml file"),
) -> None:
    """Parse workout log entries into exercises."""
    state = get_state(ctx)
    entries = read_entries(text, file, stdin)

    config = state.parser_config
    if unit is not None:
        try:
            config = ParserConfig(default_weight_unit=unit.strip())
        except InvalidUnitConfigurationError as exc:
            raise typer.BadParameter(str(exc), param_hint="--unit") from exc

    if strict is None:
        strict = state.strict

    results: List[ParseResult] = []
    for entry in entries:
        try:
            results.append(parse(entry, config, strict=strict))
        except EmptySourceError as exc:
            report_error(state, str(exc))
        except StrictParseError as exc:
            report_error(
                state,
                str(exc),
                {"diagnostics": [item.to_dict() for item in exc.diagnostics]},
            )

    if not results:
        report_error(state, "no log entries found")

    payload: Dict[str, Any] = {
        "results": results_payload(results),
        "summary": _summary(results),
    }
    if output is not None:
        payload["output"] = str(write_results(output, results))

    if state.json_output:
        print_json_payload(state, payload)
        return

    if state.plain_output:
        typer.echo("entry\tname\tweight\treps")
        for index, result in enumerate(results, start=1):
            for exercise in result.exercises:
                typer.echo(
                    "\t".join(
                        [
                            str(index),
                            exercise.name,
                            format_weight(exercise.weight),
                            "/".join(str(count) for count in exercise.reps) or "-",
                        ]
                    )
                )
            for diagnostic in result.diagnostics:
                typer.echo(f"diagnostic\t{index}\t{diagnostic.message}")
        if output is not None:
            typer.echo(f"output\t{payload['output']}")
        return

    for index, result in enumerate(results, start=1):
        title = "Exercises" if len(results) == 1 else f"Entry {index}"
        table = Table(title=f"{title} ({len(result.exercises)} total)")
        table.add_column("Exercise")
        table.add_column("Weight", justify="right")
        table.add_column("Sets", justify="right")
        table.add_column("Reps")
        table.add_column("Volume", justify="right")

        for exercise in result.exercises:
            table.add_row(
                exercise.name,
                format_weight(exercise.weight),
                str(len(exercise.reps)),
                format_reps(exercise.reps),
                format_volume(exercise.weight, exercise.reps),
            )
        state.console.print(table)

        for diagnostic in result.diagnostics:
            state.console.print(f"warning: {diagnostic.message}", markup=False)

    summary = payload["summary"]
    state.console.print(
        f"Parsed {summary['exercises']} exercises from {summary['entries']} "
        f"{'entry' if summary['entries'] == 1 else 'entries'}"
    )
    if output is not None:
        state.console.print(f"Written to: {payload['output']}", markup=False)
