"""
clock.py

- Wall-clock helpers: "HH:MM" <-> minutes since midnight, day distance to an exam
"""

import re
from datetime import date

_CLOCK_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


class TimeParseError(ValueError):
    """Raised for clock strings that are not a valid 24h HH:MM."""


def parse_clock(value: str) -> int:
    """
    Convert "HH:MM" (24h) into minutes since midnight.

    "9:05" and "09:05" are both accepted; anything else raises TimeParseError.
    """
    match = _CLOCK_RE.match(value) if isinstance(value, str) else None
    if match is None:
        raise TimeParseError(f"Invalid time '{value}', expected HH:MM")

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise TimeParseError(f"Invalid time '{value}', expected HH:MM")
    return hour * 60 + minute


def format_clock(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def days_until(exam_date: date, today: date) -> int:
    return (exam_date - today).days
