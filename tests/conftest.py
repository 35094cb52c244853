from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any, Dict, List

import pytest
from typer.testing import CliRunner

from carnet_cli.core.models import WorkoutRecord


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "carnet-config" / "config.toml"
    monkeypatch.setenv("CARNET_CONFIG_FILE", str(path))
    monkeypatch.delenv("CARNET_OUTPUT_DIR", raising=False)
    return path


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def reference_day() -> date:
    return date(2026, 3, 15)


@pytest.fixture()
def session_notes() -> str:
    return "\n".join(
        [
            "Séance 09/01",
            "DC incliné",
            "1-24kg 6",
            "2-22kg 11",
            "3-20kg",
            "",
            "Tractions",
            "1-à vide 8",
            "2-X",
            "Gainage",
            "1-1min30",
            "Total: 6 séries",
        ]
    )


@pytest.fixture()
def sample_records() -> List[WorkoutRecord]:
    return [
        WorkoutRecord(date="2026-01-09", exercise="DC incliné", set_index=1, weight=24.0, reps=6),
        WorkoutRecord(date="2026-01-09", exercise="DC incliné", set_index=2, weight=22.0, reps=11),
        WorkoutRecord(date="2026-01-09", exercise="Tractions", set_index=1, weight=0.0, reps=8, notes="à vide"),
    ]


@pytest.fixture()
def sample_record_dicts(sample_records: List[WorkoutRecord]) -> List[Dict[str, Any]]:
    return [record.to_dict() for record in sample_records]


@pytest.fixture()
def write_temp_json(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def write_temp_text(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def write_temp_toml(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n", encoding="utf-8")
        return path

    return _write
