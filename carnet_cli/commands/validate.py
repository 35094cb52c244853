"""Record validation command."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from carnet_cli.commands.common import get_state, print_json_payload, print_validation, read_input_text
from carnet_cli.core.config import set_index_bounds
from carnet_cli.core.validate import validate_workouts
from carnet_cli.utils.parsing import load_records_input


def validate_command(
    ctx: typer.Context,
    file: Optional[Path] = typer.Argument(None, help="JSON/YAML file with records", exists=True, dir_okay=False),
    stdin: bool = typer.Option(False, "--stdin", help="Read records from stdin"),
) -> None:
    """Validate previously parsed records."""
    state = get_state(ctx)
    stdin_text = read_input_text(file, stdin, "records")

    try:
        records = load_records_input(file_path=file, read_stdin=stdin, stdin_text=stdin_text)
    except ValueError as exc:
        raise typer.BadParameter(f"Invalid record payload: {exc}")

    result = validate_workouts(records, **set_index_bounds(state.config))

    if state.json_output:
        print_json_payload(state, {"sets": len(records), **result.to_dict()})
    elif state.plain_output:
        typer.echo(f"sets\t{len(records)}")
        print_validation(state, result)
    else:
        state.console.print(f"Checked {len(records)} set(s)")
        print_validation(state, result)

    if not result.is_valid:
        raise typer.Exit(code=1)
