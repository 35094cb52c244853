"""Input loading helpers for notes text and record payloads."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import yaml

from carnet_cli.core.models import WorkoutRecord


def load_notes_text(file_path: Optional[Path], read_stdin: bool, stdin_text: str = "") -> str:
    """Load raw workout notes from a file or stdin text."""
    if file_path:
        try:
            return file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(f"{file_path} is not valid UTF-8 text") from exc
    if read_stdin:
        return stdin_text
    return ""


def records_from_payload(raw_data: Any) -> List[WorkoutRecord]:
    """Build records from a list of mappings or a ``{"workouts": [...]}`` object."""
    if isinstance(raw_data, dict):
        raw_data = raw_data.get("workouts")
    if raw_data is None:
        return []
    if not isinstance(raw_data, list):
        raise ValueError("Record payload must be a list or an object with a 'workouts' list")

    records: List[WorkoutRecord] = []
    for position, item in enumerate(raw_data, 1):
        if not isinstance(item, dict):
            raise ValueError(f"Record #{position} is not an object")
        try:
            records.append(WorkoutRecord.from_dict(item))
        except ValueError as exc:
            raise ValueError(f"Record #{position}: {exc}") from exc
    return records


def _safe_load_yaml(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML: {exc}") from exc


def load_records_input(file_path: Optional[Path], read_stdin: bool, stdin_text: str = "") -> List[WorkoutRecord]:
    """Load serialized records from a JSON/YAML file or stdin text."""
    raw_data: Any
    if file_path:
        text = load_notes_text(file_path, read_stdin=False)
        if file_path.suffix.lower() in {".yaml", ".yml"}:
            raw_data = _safe_load_yaml(text)
        else:
            raw_data = json.loads(text)
    elif read_stdin:
        text = stdin_text.strip()
        if not text:
            return []
        try:
            raw_data = json.loads(text)
        except json.JSONDecodeError:
            raw_data = _safe_load_yaml(text)
    else:
        return []

    return records_from_payload(raw_data)
