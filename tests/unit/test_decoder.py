import json

import pytest

from carnet_cli.core.decoder import (
    SET_RULES,
    decode_set,
    match_note_keyword,
    match_rule,
    normalize_duration,
    to_float,
    to_int,
)
from carnet_cli.core.models import DecodedSet


def test_weight_and_reps() -> None:
    assert decode_set("24kg 6") == DecodedSet(weight=24.0, reps=6, notes=None)


def test_weight_without_reps() -> None:
    assert decode_set("20kg") == DecodedSet(weight=20.0, reps=None, notes=None)


def test_decimal_weight_and_uppercase_unit() -> None:
    decoded = decode_set("12.5KG 8")
    assert decoded.weight == 12.5
    assert decoded.reps == 8


def test_reps_only() -> None:
    assert decode_set("8") == DecodedSet(weight=None, reps=8, notes=None)


def test_bodyweight_with_reps() -> None:
    decoded = decode_set("à vide 8")
    assert decoded.weight == 0
    assert decoded.weight is not None
    assert decoded.reps == 8
    assert decoded.notes == "à vide"


@pytest.mark.parametrize("remainder", ["vide", "Vide", "A VIDE", "àvide"])
def test_bodyweight_without_reps(remainder: str) -> None:
    assert decode_set(remainder) == DecodedSet(weight=0.0, reps=None, notes="à vide")


def test_vide_inside_word_is_not_bodyweight() -> None:
    assert match_rule("10 évidemment").name == "default"


@pytest.mark.parametrize("remainder", ["X", "x", "  X  "])
def test_skipped_set(remainder: str) -> None:
    assert decode_set(remainder) == DecodedSet(weight=None, reps=None, notes="non réalisé")


def test_x_after_weight_falls_back_to_default() -> None:
    assert decode_set("26kg X") == DecodedSet(weight=26.0, reps=None, notes=None)


@pytest.mark.parametrize(
    ("remainder", "expected"),
    [
        ("3min", "3min"),
        ("1min30", "1min30s"),
        ("1 min 30", "1min30s"),
        ("2min0", "2min"),
        ("45s", "45s"),
        ("45S", "45s"),
        ("20 sec", "20s"),
        ("30 secondes", "30s"),
        ("1 seconde", "1s"),
    ],
)
def test_duration_notes(remainder: str, expected: str) -> None:
    assert decode_set(remainder) == DecodedSet(weight=None, reps=None, notes=expected)


def test_normalized_duration_is_stable() -> None:
    for raw in ("3min", "1min30", "45s", "20s"):
        normalized = normalize_duration(raw)
        assert normalized is not None
        assert normalize_duration(normalized) == normalized


def test_duration_with_kg_is_not_a_duration() -> None:
    assert normalize_duration("20kg") is None
    assert match_rule("1min 20kg").name == "default"


def test_keyword_note_keeps_written_case() -> None:
    assert decode_set("40kg 10 douleur") == DecodedSet(weight=40.0, reps=10, notes="douleur")
    assert decode_set("12 Difficile").notes == "Difficile"


def test_keyword_without_reps() -> None:
    assert decode_set("35kg allongé") == DecodedSet(weight=35.0, reps=None, notes="allongé")


def test_keyword_list_order_decides_first_hit() -> None:
    assert match_note_keyword("difficile mais normal") == "normal"


def test_custom_note_keywords() -> None:
    assert decode_set("10 lent", note_keywords=["lent"]).notes == "lent"
    assert decode_set("10 douleur", note_keywords=["lent"]).notes is None


def test_alternating_sides() -> None:
    assert decode_set("15/15") == DecodedSet(weight=None, reps=15, notes="15/15")


def test_alternating_overrides_keyword_note() -> None:
    decoded = decode_set("10/12 difficile")
    assert decoded.reps == 10
    assert decoded.notes == "10/12"


def test_alternating_with_weight() -> None:
    assert decode_set("10kg 8/8") == DecodedSet(weight=10.0, reps=8, notes="8/8")


def test_empty_remainder_yields_empty_set() -> None:
    assert decode_set("") == DecodedSet()


def test_rule_order() -> None:
    assert [rule.name for rule in SET_RULES] == ["bodyweight", "skipped", "duration", "default"]


def test_bodyweight_rule_wins_over_duration() -> None:
    assert match_rule("vide 30s").name == "bodyweight"
    assert decode_set("vide 30s").reps == 30


def test_numeric_helpers_reject_unrepresentable_values() -> None:
    assert to_int("12") == 12
    assert to_int("12.9") == 12
    assert to_int("9" * 5000) is None
    assert to_int("9" * 400 + ".5") is None
    assert to_float("12.5") == 12.5
    assert to_float("9" * 400) is None
    assert to_float("inf") is None
    assert to_float("nan") is None


def test_overlong_reps_are_dropped() -> None:
    decoded = decode_set("5kg " + "9" * 5000)
    assert decoded.weight == 5.0
    assert decoded.reps is None


def test_overlong_weight_stays_json_safe() -> None:
    decoded = decode_set("9" * 400 + "kg 5")
    assert decoded.weight is None
    json.dumps(decoded.weight, allow_nan=False)


def test_overlong_bodyweight_reps_are_dropped() -> None:
    assert decode_set("à vide " + "9" * 5000) == DecodedSet(weight=0.0, reps=None, notes="à vide")


def test_overlong_duration_does_not_raise() -> None:
    assert normalize_duration("9" * 5000 + "min") is None
    assert decode_set("9" * 5000 + "min").reps is None
