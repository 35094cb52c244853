"""Line classification and session-state tracking for workout notes."""

from __future__ import annotations

import re
from datetime import date
from typing import Iterator, List, Optional, Sequence, Tuple

from carnet_cli.core.constants import NOTE_KEYWORDS, SUMMARY_KEYWORDS
from carnet_cli.core.decoder import decode_set, to_int
from carnet_cli.core.models import SessionState, WorkoutRecord
from carnet_cli.utils.dates import session_date

_DATE_RE = re.compile(r"(?<!\d)(\d{2})/(\d{2})(?:/(\d{4}))?(?!\d)")
_SET_ENTRY_RE = re.compile(r"^(\d+)-(.+)")


def iter_lines(text: str) -> Iterator[str]:
    """Yield trimmed, non-empty lines."""
    for raw in text.splitlines():
        line = raw.strip()
        if line:
            yield line


def _search_date(line: str) -> Optional[re.Match]:
    # Set entries such as "1-15/15" never carry a session date.
    if _SET_ENTRY_RE.match(line):
        return None
    return _DATE_RE.search(line)


def match_date_header(line: str, today: Optional[date] = None) -> Optional[str]:
    """Return the normalized session date if the line is a date header."""
    match = _search_date(line)
    if not match:
        return None
    day, month, year = match.groups()
    return session_date(day, month, year, today=today)


def match_set_entry(line: str) -> Optional[Tuple[int, str]]:
    """Return (set_index, remainder) for '<index>-<remainder>' lines."""
    match = _SET_ENTRY_RE.match(line)
    if not match:
        return None
    set_index = to_int(match.group(1))
    if set_index is None:
        return None
    return set_index, match.group(2).strip()


def is_summary_line(line: str, summary_keywords: Sequence[str] = SUMMARY_KEYWORDS) -> bool:
    lowered = line.lower()
    return any(lowered.startswith(keyword.lower()) for keyword in summary_keywords)


def classify_line(
    line: str,
    state: SessionState,
    summary_keywords: Sequence[str] = SUMMARY_KEYWORDS,
) -> str:
    """Classify a trimmed line against the current session state."""
    if _search_date(line):
        return "date"
    if match_set_entry(line):
        return "set" if state.current_exercise else "orphan-set"
    if state.current_date is None:
        return "ignored"
    if is_summary_line(line, summary_keywords):
        return "summary"
    return "exercise"


def consume_line(
    state: SessionState,
    line: str,
    today: Optional[date] = None,
    note_keywords: Sequence[str] = NOTE_KEYWORDS,
    summary_keywords: Sequence[str] = SUMMARY_KEYWORDS,
) -> str:
    """Apply one line to the session state and return its kind."""
    kind = classify_line(line, state, summary_keywords)

    if kind == "date":
        state.current_date = match_date_header(line, today=today)
    elif kind == "exercise":
        state.current_exercise = line
    elif kind == "set":
        entry = match_set_entry(line)
        if entry is None:
            raise RuntimeError(f"Set entry no longer matches: {line!r}")
        set_index, remainder = entry
        decoded = decode_set(remainder, note_keywords=note_keywords)
        state.records.append(
            WorkoutRecord(
                date=state.current_date or "",
                exercise=state.current_exercise or "",
                set_index=set_index,
                weight=decoded.weight,
                reps=decoded.reps,
                notes=decoded.notes,
            )
        )
    return kind


def trace_workout_text(
    text: str,
    today: Optional[date] = None,
    note_keywords: Sequence[str] = NOTE_KEYWORDS,
    summary_keywords: Sequence[str] = SUMMARY_KEYWORDS,
) -> List[Tuple[str, str]]:
    """Return (kind, line) for every non-blank line, in input order."""
    state = SessionState()
    return [
        (consume_line(state, line, today, note_keywords, summary_keywords), line)
        for line in iter_lines(text)
    ]


def parse_workout_text(
    text: str,
    today: Optional[date] = None,
    note_keywords: Sequence[str] = NOTE_KEYWORDS,
    summary_keywords: Sequence[str] = SUMMARY_KEYWORDS,
) -> List[WorkoutRecord]:
    """Parse workout notes into set records, in input line order."""
    state = SessionState()
    for line in iter_lines(text):
        consume_line(state, line, today, note_keywords, summary_keywords)
    return state.records
