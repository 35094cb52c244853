"""Set-entry decoding: weight, repetitions and notes from a set remainder."""

from __future__ import annotations

import math
import re
from typing import Callable, List, NamedTuple, Optional, Sequence

from carnet_cli.core.constants import BODYWEIGHT_NOTE, NOTE_KEYWORDS, SKIPPED_NOTE
from carnet_cli.core.models import DecodedSet

_BODYWEIGHT_RE = re.compile(r"à\s*vide|\bvide\b", re.IGNORECASE)
_INTEGER_RE = re.compile(r"\d+")
_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")
_WEIGHT_RE = re.compile(r"(\d+(?:\.\d+)?)\s*kg", re.IGNORECASE)
_ALTERNATING_RE = re.compile(r"(\d+)/(\d+)")
_MINUTES_RE = re.compile(r"^(\d+)\s*min(?:\s*(\d+)\s*(?:s|sec)?)?$", re.IGNORECASE)
_SECONDS_RE = re.compile(r"^(\d+)\s*(?:s|sec|secondes?)$", re.IGNORECASE)


class SetRule(NamedTuple):
    """Ordered decoding rule: first rule whose predicate matches wins."""

    name: str
    matches: Callable[[str], bool]
    extract: Callable[[str, Sequence[str]], DecodedSet]


def normalize_duration(remainder: str) -> Optional[str]:
    """Normalize a pure duration like '1min30' to '1min30s'; None otherwise."""
    text = remainder.strip()
    if "kg" in text.lower():
        return None

    minutes_match = _MINUTES_RE.match(text)
    if minutes_match:
        minutes = to_int(minutes_match.group(1))
        seconds = to_int(minutes_match.group(2) or "0")
        if minutes is None or seconds is None:
            return None
        if seconds > 0:
            return f"{minutes}min{seconds}s"
        return f"{minutes}min"

    seconds_match = _SECONDS_RE.match(text)
    if seconds_match:
        seconds = to_int(seconds_match.group(1))
        return f"{seconds}s" if seconds is not None else None
    return None


def to_float(raw: str) -> Optional[float]:
    """Convert a numeric token, or None when it is not a finite float."""
    try:
        value = float(raw)
    except (ValueError, OverflowError):
        return None
    return value if math.isfinite(value) else None


def to_int(raw: str) -> Optional[int]:
    """Convert a numeric token, truncating decimals; None when out of range."""
    if "." in raw:
        value = to_float(raw)
        return int(value) if value is not None else None
    try:
        return int(raw)
    except (ValueError, OverflowError):
        return None


def _is_bodyweight(remainder: str) -> bool:
    return bool(_BODYWEIGHT_RE.search(remainder))


def _decode_bodyweight(remainder: str, note_keywords: Sequence[str]) -> DecodedSet:
    reps_match = _INTEGER_RE.search(remainder)
    return DecodedSet(
        weight=0.0,
        reps=to_int(reps_match.group(0)) if reps_match else None,
        notes=BODYWEIGHT_NOTE,
    )


def _is_skipped(remainder: str) -> bool:
    return remainder.strip() in {"X", "x"}


def _decode_skipped(remainder: str, note_keywords: Sequence[str]) -> DecodedSet:
    return DecodedSet(notes=SKIPPED_NOTE)


def _is_duration(remainder: str) -> bool:
    return normalize_duration(remainder) is not None


def _decode_duration(remainder: str, note_keywords: Sequence[str]) -> DecodedSet:
    return DecodedSet(notes=normalize_duration(remainder))


def match_note_keyword(remainder: str, note_keywords: Sequence[str] = NOTE_KEYWORDS) -> Optional[str]:
    """Return the first keyword found in the remainder, as written there."""
    for keyword in note_keywords:
        found = re.search(re.escape(keyword), remainder, re.IGNORECASE)
        if found:
            return found.group(0)
    return None


def _decode_default(remainder: str, note_keywords: Sequence[str]) -> DecodedSet:
    weight: Optional[float] = None
    reps: Optional[int] = None

    weight_match = _WEIGHT_RE.search(remainder)
    if weight_match:
        weight = to_float(weight_match.group(1))

    numbers = _NUMBER_RE.findall(remainder)
    if weight is not None:
        if len(numbers) > 1:
            reps = to_int(numbers[1])
    elif numbers:
        reps = to_int(numbers[0])

    notes = match_note_keyword(remainder, note_keywords)

    # Alternating sides override both reps and any keyword note.
    alternating = _ALTERNATING_RE.search(remainder)
    if alternating:
        reps = to_int(alternating.group(1))
        notes = f"{alternating.group(1)}/{alternating.group(2)}"

    return DecodedSet(weight=weight, reps=reps, notes=notes)


SET_RULES: List[SetRule] = [
    SetRule("bodyweight", _is_bodyweight, _decode_bodyweight),
    SetRule("skipped", _is_skipped, _decode_skipped),
    SetRule("duration", _is_duration, _decode_duration),
    SetRule("default", lambda remainder: True, _decode_default),
]


def match_rule(remainder: str, rules: Sequence[SetRule] = SET_RULES) -> Optional[SetRule]:
    """Return the first rule that applies to the remainder."""
    text = remainder.strip()
    for rule in rules:
        if rule.matches(text):
            return rule
    return None


def decode_set(
    remainder: str,
    note_keywords: Sequence[str] = NOTE_KEYWORDS,
    rules: Sequence[SetRule] = SET_RULES,
) -> DecodedSet:
    """Decode the text following '<index>-' into weight, reps and notes."""
    text = remainder.strip()
    rule = match_rule(text, rules)
    if rule is None:
        return DecodedSet()
    return rule.extract(text, note_keywords)
