"""Structural validation of parsed workout records."""

from __future__ import annotations

from typing import List, Sequence

from carnet_cli.core.constants import MAX_SET_INDEX, MIN_SET_INDEX
from carnet_cli.core.models import ValidationResult, WorkoutRecord
from carnet_cli.utils.dates import is_iso_date

NO_SETS = "no sets detected"
INVALID_DATE = "invalid date format"
MISSING_EXERCISE = "missing exercise name"
INVALID_SET_INDEX = "invalid set index"


def validate_workouts(
    records: Sequence[WorkoutRecord],
    min_set_index: int = MIN_SET_INDEX,
    max_set_index: int = MAX_SET_INDEX,
) -> ValidationResult:
    """Check parsed records for soundness without modifying them."""
    if not records:
        return ValidationResult(is_valid=False, errors=[NO_SETS])

    errors: List[str] = []

    if any(not is_iso_date(record.date) for record in records):
        errors.append(INVALID_DATE)

    if any(not isinstance(record.exercise, str) or not record.exercise.strip() for record in records):
        errors.append(MISSING_EXERCISE)

    if any(not min_set_index <= record.set_index <= max_set_index for record in records):
        errors.append(INVALID_SET_INDEX)

    return ValidationResult(is_valid=not errors, errors=errors)
