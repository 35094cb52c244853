"""Grouped plain-text preview of parsed sets."""

from __future__ import annotations

from typing import Dict, List, Sequence

from carnet_cli.core.models import WorkoutRecord
from carnet_cli.utils.formatting import format_set_line


def group_by_exercise(records: Sequence[WorkoutRecord]) -> Dict[str, List[WorkoutRecord]]:
    """Group records by exercise name, keeping first-appearance order."""
    grouped: Dict[str, List[WorkoutRecord]] = {}
    for record in records:
        grouped.setdefault(record.exercise, []).append(record)
    return grouped


def format_workout_preview(records: Sequence[WorkoutRecord]) -> str:
    """Render records as an exercise-by-exercise preview."""
    blocks: List[str] = []
    for exercise, sets in group_by_exercise(records).items():
        lines = [exercise]
        lines.extend(f"  {format_set_line(record)}" for record in sets)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + ("\n" if blocks else "")
