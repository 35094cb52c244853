from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import pytest
import typer
from rich.console import Console

from carnet_cli.commands.common import get_state, print_json_payload, print_validation, read_input_text
from carnet_cli.commands.parse import saved_filename
from carnet_cli.core.models import ValidationResult
from carnet_cli.core.state import CLIState


@dataclass
class FakeContext:
    obj: Any


def _state(plain_output: bool = True, config: Dict[str, Any] | None = None) -> CLIState:
    return CLIState(
        json_output=False,
        plain_output=plain_output,
        verbose=False,
        quiet=False,
        config_path=Path("/tmp/config.toml"),
        config=config or {},
        console=Console(record=True, width=120),
    )


def test_get_state_returns_cli_state() -> None:
    state = _state()
    assert get_state(FakeContext(obj=state)) is state


def test_get_state_raises_on_invalid_obj() -> None:
    with pytest.raises(typer.Exit):
        get_state(FakeContext(obj={"not": "state"}))


def test_print_json_payload_plain_is_compact(capsys: pytest.CaptureFixture[str]) -> None:
    print_json_payload(_state(), {"exercise": "DC incliné", "reps": 6})
    assert capsys.readouterr().out.strip() == '{"exercise":"DC incliné","reps":6}'


def test_read_input_text_requires_a_source() -> None:
    with pytest.raises(typer.BadParameter):
        read_input_text(None, False, "notes")
    assert read_input_text(Path("notes.txt"), False, "notes") == ""


def test_print_validation_plain(capsys: pytest.CaptureFixture[str]) -> None:
    print_validation(_state(), ValidationResult(is_valid=False, errors=["no sets detected"]))
    assert capsys.readouterr().out.splitlines() == ["valid\tfalse", "errors\tno sets detected"]


def test_print_validation_rich() -> None:
    state = _state(plain_output=False)
    print_validation(state, ValidationResult(is_valid=False, errors=["a", "b"]))
    assert "Validation failed: a; b" in state.console.export_text()


def test_saved_filename_uses_first_date(sample_records) -> None:
    assert saved_filename(sample_records) == "2026-01-09-seance.json"
    assert saved_filename([]) == "undated-seance.json"
