"""
Rendering of minute counts as display strings.
"""

from .timeparse import MINUTES_PER_DAY, MINUTES_PER_HOUR


def format_clock_time(minutes: int) -> str:
    """
    Format minutes as a zero-padded ``"HH:MM"`` clock time.

    Values outside a single day wrap around midnight in both directions,
    so -30 renders as ``"23:30"`` and 1500 as ``"01:00"``.
    """
    minutes = minutes % MINUTES_PER_DAY
    hours, mins = divmod(minutes, MINUTES_PER_HOUR)
    return f"{hours:02d}:{mins:02d}"


def format_duration(minutes: int) -> str:
    """Format a non-negative duration, e.g. ``"1 h 30 min"``, ``"2 h"`` or ``"0 min"``."""
    hours, mins = divmod(minutes, MINUTES_PER_HOUR)

    parts = []
    if hours:
        parts.append(f"{hours} h")
    if mins:
        parts.append(f"{mins} min")

    if not parts:
        return "0 min"
    return " ".join(parts)


def format_day_offset(minutes: int) -> str:
    """Describe which day an absolute minute value falls on relative to today."""
    days = minutes // MINUTES_PER_DAY
    if days == 0:
        return ""
    if days == 1:
        return "tomorrow"
    if days == -1:
        return "yesterday"
    return f"{days:+d} days"
