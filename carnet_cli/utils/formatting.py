"""Formatting helpers used by the preview and console output."""

from __future__ import annotations

from typing import Optional

from carnet_cli.core.models import WorkoutRecord


def format_weight(weight: Optional[float]) -> str:
    """Format load in kg; zero is bodyweight."""
    if weight is None:
        return "-"
    if weight == 0:
        return "bodyweight"
    return f"{weight:g}kg"


def format_reps(reps: Optional[int]) -> str:
    return f"× {reps}" if reps is not None else "× -"


def format_set_line(record: WorkoutRecord) -> str:
    """Format one set as 'Set 1: 24kg × 6 (douleur)'."""
    notes = f" ({record.notes})" if record.notes else ""
    return f"Set {record.set_index}: {format_weight(record.weight)} {format_reps(record.reps)}{notes}"
