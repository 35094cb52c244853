"""Session-date normalization and date option helpers."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

import typer

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_date(value: Optional[str]) -> Optional[str]:
    """Typer callback that validates YYYY-MM-DD format for date options."""
    if value is None:
        return value
    if not is_iso_date(value):
        raise typer.BadParameter(
            f"Invalid date '{value}'. Expected format: YYYY-MM-DD (e.g. 2026-01-15)"
        )
    return value


def parse_date(value: str) -> date:
    """Parse YYYY-MM-DD date string."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def is_iso_date(value: object) -> bool:
    """True when value is a YYYY-MM-DD string naming a real calendar day."""
    if not isinstance(value, str) or not _DATE_RE.match(value):
        return False
    try:
        parse_date(value)
    except ValueError:
        return False
    return True


def session_date(day: str, month: str, year: Optional[str] = None, today: Optional[date] = None) -> str:
    """Build the YYYY-MM-DD string for a DD/MM[/YYYY] session header.

    The year defaults to the year of ``today`` (wall clock when omitted).
    Day and month are copied as written, so impossible dates such as
    31/02 survive here and are reported by the validator.
    """
    if year is None:
        year = str((today or date.today()).year)
    return f"{year}-{month}-{day}"
