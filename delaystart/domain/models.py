"""
Domain models for delay-start calculations.

All values are plain minute counts. Clock times may run past 1439 when a
program starts or finishes on a following day; formatting wraps them back
into a single day.
"""

from dataclasses import dataclass

from .formatting import format_clock_time, format_day_offset, format_duration
from .timeparse import MINUTES_PER_DAY


@dataclass(frozen=True)
class Schedule:
    """
    Exact (unquantized) result of a schedule calculation.

    Invariant: delay_minutes is never negative.
    """
    delay_minutes: int
    start_minutes: int
    finish_minutes: int

    def __post_init__(self):
        if self.delay_minutes < 0:
            raise ValueError(f"Delay must not be negative, got {self.delay_minutes}")

    @property
    def starts_tomorrow(self) -> bool:
        """Whether the program starts after the next midnight."""
        return self.start_minutes >= MINUTES_PER_DAY

    def start_time(self) -> str:
        return format_clock_time(self.start_minutes)

    def finish_time(self) -> str:
        return format_clock_time(self.finish_minutes)


@dataclass(frozen=True)
class DelayOption:
    """
    One way of running the program: a delay plus the resulting start and finish.
    """
    delay_minutes: int
    start_minutes: int
    finish_minutes: int

    def delay_text(self) -> str:
        return format_duration(self.delay_minutes)

    def start_time(self) -> str:
        return format_clock_time(self.start_minutes)

    def finish_time(self) -> str:
        return format_clock_time(self.finish_minutes)

    def start_day(self) -> str:
        return format_day_offset(self.start_minutes)

    def finish_day(self) -> str:
        return format_day_offset(self.finish_minutes)

    def format_display(self) -> str:
        """
        Format the option for display.
        Format: <delay> delay -> start at HH:MM -> finish at ~HH:MM
        """
        start = self.start_time()
        finish = self.finish_time()
        if self.start_day():
            start = f"{start} ({self.start_day()})"
        if self.finish_day():
            finish = f"{finish} ({self.finish_day()})"
        return f"{self.delay_text()} delay -> start at {start} -> finish at ~{finish}"


@dataclass(frozen=True)
class DelayPlan:
    """
    Exact schedule next to the closest setting the appliance panel offers.
    """
    now_minutes: int
    duration_minutes: int
    exact: DelayOption
    appliance: DelayOption

    @property
    def needs_adjustment(self) -> bool:
        """True when the panel cannot hit the exact delay."""
        return self.exact.delay_minutes != self.appliance.delay_minutes

    @property
    def finish_drift_minutes(self) -> int:
        """How much later (positive) or earlier the appliance setting finishes."""
        return self.appliance.finish_minutes - self.exact.finish_minutes
