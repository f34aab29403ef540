"""
Parsing of clock times and program durations into integer minutes.

Both parsers return ``None`` for malformed input instead of raising, so the
caller can decide how to report the problem.
"""

from __future__ import annotations

import re

from pendulum import DateTime

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

_CLOCK_RE = re.compile(r"^([0-9]{1,2}):([0-9]{1,2})$")
_DURATION_RE = re.compile(r"^([0-9]+)(?::([0-9]{1,2}))?$")


def parse_clock_time(text: str | None) -> int | None:
    """
    Parse ``"HH:MM"`` into minutes since midnight.

    Returns None when the text is empty, has no colon, a component is not a
    number, the hour is outside 0-23 or the minute outside 0-59.
    """
    if not text:
        return None

    match = _CLOCK_RE.match(text.strip())
    if not match:
        return None

    hour = int(match.group(1))
    minute = int(match.group(2))
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return None

    return hour * MINUTES_PER_HOUR + minute


def parse_duration(text: str | None) -> int | None:
    """
    Parse a program duration into minutes.

    Accepts ``"H:MM"``, ``"HH:MM"`` or a bare number of whole hours (``"3"``).
    The hour part is unbounded so multi-day programs like ``"30:00"`` are
    accepted. Returns None for empty or non-numeric text, negative hours and
    minutes outside 0-59.
    """
    if not text:
        return None

    match = _DURATION_RE.match(text.strip())
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2) or 0)
    if minutes > 59:
        return None

    return hours * MINUTES_PER_HOUR + minutes


def minutes_since_midnight(dt: DateTime) -> int:
    """Return the wall-clock time of ``dt`` as minutes since midnight."""
    return dt.hour * MINUTES_PER_HOUR + dt.minute
