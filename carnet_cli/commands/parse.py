"""Notes parsing commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from carnet_cli.commands.common import get_state, print_json_payload, print_validation, read_input_text
from carnet_cli.core.config import parser_keywords, resolve_output_dir, set_index_bounds
from carnet_cli.core.constants import OUTPUT_FORMATS, SUPPORTED_FORMATS
from carnet_cli.core.models import WorkoutRecord
from carnet_cli.core.state import CLIState
from carnet_cli.core.tracker import parse_workout_text, trace_workout_text
from carnet_cli.core.validate import validate_workouts
from carnet_cli.exporters.json_export import build_payload, write_json
from carnet_cli.exporters.preview import format_workout_preview
from carnet_cli.utils.dates import parse_date, validate_date
from carnet_cli.utils.formatting import format_set_line
from carnet_cli.utils.parsing import load_notes_text


def saved_filename(records: List[WorkoutRecord]) -> str:
    """Name the saved payload after the first session date."""
    first_date = records[0].date if records else "undated"
    return f"{first_date}-seance.json"


def _print_plain(records: List[WorkoutRecord]) -> None:
    typer.echo(f"sets\t{len(records)}")
    for record in records:
        typer.echo(json.dumps(record.to_dict(), separators=(",", ":"), ensure_ascii=False))


def _print_pretty(state: CLIState, records: List[WorkoutRecord]) -> None:
    exercises = len({record.exercise for record in records})
    state.console.print(f"Parsed {len(records)} set(s) across {exercises} exercise(s)")
    for record in records:
        state.console.print(
            f"{record.date}  {record.exercise}  {format_set_line(record)}",
            markup=False,
            highlight=False,
        )


def parse_command(
    ctx: typer.Context,
    file: Optional[Path] = typer.Argument(None, help="Workout notes file", exists=True, dir_okay=False),
    stdin: bool = typer.Option(False, "--stdin", help="Read notes from stdin"),
    today: Optional[str] = typer.Option(
        None,
        help="Reference date YYYY-MM-DD for headers without a year",
        callback=validate_date,
    ),
    output_format: Optional[str] = typer.Option(None, "--format", help="Output format: pretty|json|preview"),
    save: bool = typer.Option(False, "--save", help="Write the JSON payload to the output directory"),
    output_dir: Optional[Path] = typer.Option(None, help="Output directory for --save"),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 1 when validation fails"),
) -> None:
    """Parse workout notes into structured sets."""
    state = get_state(ctx)
    stdin_text = read_input_text(file, stdin, "notes")

    fmt = output_format or state.config.get("defaults", {}).get("output_format", "pretty")
    if fmt not in OUTPUT_FORMATS:
        raise typer.BadParameter(f"format must be one of {'|'.join(OUTPUT_FORMATS)}")

    try:
        text = load_notes_text(file_path=file, read_stdin=stdin, stdin_text=stdin_text)
    except ValueError as exc:
        raise typer.BadParameter(f"Invalid notes file: {exc}")
    keywords = parser_keywords(state.config)
    reference = parse_date(today) if today else None

    if state.verbose and not state.json_output:
        for kind, line in trace_workout_text(text, today=reference, **keywords):
            state.console.log(f"{kind:<10} {line}", markup=False, highlight=False)

    records = parse_workout_text(text, today=reference, **keywords)
    validation = validate_workouts(records, **set_index_bounds(state.config))
    payload = build_payload(records, validation)

    saved_path: Optional[Path] = None
    if save:
        out_dir = resolve_output_dir(state.config, output_dir)
        saved_path = write_json(out_dir / saved_filename(records), payload)

    if state.json_output or fmt == "json":
        print_json_payload(state, payload)
    elif state.plain_output:
        _print_plain(records)
        print_validation(state, validation)
        if saved_path:
            typer.echo(f"saved\t{saved_path}")
    else:
        if fmt == "preview":
            state.console.print(format_workout_preview(records), markup=False, highlight=False)
        else:
            _print_pretty(state, records)
        print_validation(state, validation)
        if saved_path:
            state.console.print(f"Saved to: {saved_path}", highlight=False)

    if strict and not validation.is_valid:
        raise typer.Exit(code=1)


def formats_command(ctx: typer.Context) -> None:
    """Show the supported notes shorthand."""
    state = get_state(ctx)
    if state.plain_output:
        typer.echo(SUPPORTED_FORMATS)
        return
    state.console.print(SUPPORTED_FORMATS, markup=False, highlight=False)
