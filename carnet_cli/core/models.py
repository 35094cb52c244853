"""Lightweight data models shared by the parser, validator and commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class DecodedSet:
    """Load, repetitions and annotation decoded from one set-entry remainder."""

    weight: Optional[float] = None
    reps: Optional[int] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class WorkoutRecord:
    """One performed (or attempted) set.

    ``weight == 0`` means bodyweight; ``weight is None`` means not recorded.
    """

    date: str
    exercise: str
    set_index: int
    weight: Optional[float] = None
    reps: Optional[int] = None
    notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "exercise": self.exercise,
            "set_index": self.set_index,
            "weight": self.weight,
            "reps": self.reps,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WorkoutRecord":
        """Rebuild a record from a serialized mapping."""
        missing = [key for key in ("date", "exercise", "set_index") if key not in data]
        if missing:
            raise ValueError(f"Record is missing field(s): {', '.join(missing)}")

        set_index = data["set_index"]
        if isinstance(set_index, bool) or not isinstance(set_index, int):
            raise ValueError(f"set_index must be an integer, got {set_index!r}")

        weight = data.get("weight")
        if weight is not None:
            if isinstance(weight, bool) or not isinstance(weight, (int, float)):
                raise ValueError(f"weight must be a number or null, got {weight!r}")
            weight = float(weight)

        reps = data.get("reps")
        if reps is not None and (isinstance(reps, bool) or not isinstance(reps, int)):
            raise ValueError(f"reps must be an integer or null, got {reps!r}")

        notes = data.get("notes")
        return cls(
            date=str(data["date"] if data["date"] is not None else ""),
            exercise=str(data["exercise"] if data["exercise"] is not None else ""),
            set_index=set_index,
            weight=weight,
            reps=reps,
            notes=str(notes) if notes is not None else None,
        )


@dataclass
class SessionState:
    """Parse-time accumulator carried from line to line."""

    current_date: Optional[str] = None
    current_exercise: Optional[str] = None
    records: List[WorkoutRecord] = field(default_factory=list)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation pass over parsed records."""

    is_valid: bool
    errors: List[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return "; ".join(self.errors)

    def to_dict(self) -> Dict[str, Any]:
        return {"is_valid": self.is_valid, "errors": list(self.errors)}
