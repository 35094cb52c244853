"""Shared command helpers."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Optional

import typer

from carnet_cli.core.models import ValidationResult
from carnet_cli.core.state import CLIState


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
    state.console.print_json(data=payload, ensure_ascii=False)


def read_input_text(file: Optional[Path], stdin: bool, what: str) -> str:
    """Return stdin text when requested, after checking an input was given."""
    if file is None and not stdin:
        raise typer.BadParameter(f"Provide a {what} FILE or --stdin")
    return sys.stdin.read() if stdin else ""


def print_validation(state: CLIState, validation: ValidationResult) -> None:
    """Report a validation outcome in plain or rich mode."""
    if state.plain_output:
        typer.echo(f"valid\t{str(validation.is_valid).lower()}")
        if not validation.is_valid:
            typer.echo(f"errors\t{validation.message}")
        return

    if validation.is_valid:
        state.console.print("[green]Validation passed[/green]")
    else:
        state.console.print(f"[red]Validation failed:[/red] {validation.message}", highlight=False)
