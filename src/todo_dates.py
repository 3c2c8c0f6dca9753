"""Due-date parsing for the menu prompt.

Input is three whitespace-separated integers ``YYYY MM DD``. Parsing never
raises; callers inspect ``ParseResult.ok`` and re-prompt on failure.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Optional

@dataclass(frozen=True)
class ParseResult:
    ok: bool
    value: Optional[date] = None
    error: str = ""

def parse_due_date(raw: str) -> ParseResult:
    parts = raw.split()
    if len(parts) != 3:
        return ParseResult(False, error="expected YYYY MM DD")
    try:
        year, month, day = (int(p) for p in parts)
    except ValueError:
        return ParseResult(False, error="not a number")
    try:
        return ParseResult(True, value=date(year, month, day))
    except ValueError as exc:
        return ParseResult(False, error=str(exc))
