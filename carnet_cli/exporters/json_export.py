"""JSON export helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from carnet_cli.core.models import ValidationResult, WorkoutRecord


def records_summary(records: Sequence[WorkoutRecord]) -> Dict[str, Any]:
    exercises = list(dict.fromkeys(record.exercise for record in records))
    dates = list(dict.fromkeys(record.date for record in records))
    return {
        "sets": len(records),
        "exercises": len(exercises),
        "dates": dates,
    }


def build_payload(
    records: Sequence[WorkoutRecord],
    validation: Optional[ValidationResult] = None,
) -> Dict[str, Any]:
    """Assemble the records payload used for JSON output and saved files."""
    payload: Dict[str, Any] = {
        "summary": records_summary(records),
        "workouts": [record.to_dict() for record in records],
    }
    if validation is not None:
        payload["validation"] = validation.to_dict()
    return payload


def write_json(path: Path, payload: Any) -> Path:
    """Write payload as pretty JSON and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path
