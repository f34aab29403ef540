"""
Core business logic for working out how long to delay a program start.

Pure domain logic: no clock, no I/O. The current time is always passed in.
"""

import logging

from .exceptions import DelayOutOfRange, InfeasibleSchedule
from .formatting import format_clock_time, format_duration
from .models import Schedule
from .timeparse import MINUTES_PER_DAY

logger = logging.getLogger(__name__)


class ScheduleCalculator:
    """
    Calculates the exact start delay needed to finish a program on time.

    Algorithm:
    1. A finish time at or before now means the same time tomorrow
    2. Start = finish - duration
    3. Delay = start - now
    4. Reject negative delays (program should already have started)
    5. Reject delays beyond the appliance horizon
    """

    def __init__(self, max_delay_minutes: int = MINUTES_PER_DAY):
        self.max_delay_minutes = max_delay_minutes

    def compute(
        self,
        now_minutes: int,
        duration_minutes: int,
        finish_minutes: int
    ) -> Schedule:
        """
        Compute the schedule for one program run.

        Args:
            now_minutes: Current clock time in minutes since midnight
            duration_minutes: Program duration in minutes
            finish_minutes: Desired finish clock time in minutes since midnight

        Returns:
            Schedule with the exact delay and the derived start and finish

        Raises:
            InfeasibleSchedule: If the program would need to start before now
            DelayOutOfRange: If the delay exceeds max_delay_minutes
        """
        if duration_minutes < 0:
            raise ValueError(f"Duration must not be negative, got {duration_minutes}")

        # Users only enter times of day; anything not after now is tomorrow
        if finish_minutes <= now_minutes:
            finish_minutes += MINUTES_PER_DAY

        start_minutes = finish_minutes - duration_minutes
        delay_minutes = start_minutes - now_minutes

        logger.debug(
            "now=%s duration=%s finish=%d -> start=%d delay=%d",
            format_clock_time(now_minutes),
            format_duration(duration_minutes),
            finish_minutes,
            start_minutes,
            delay_minutes
        )

        if delay_minutes < 0:
            raise InfeasibleSchedule(
                f"A {format_duration(duration_minutes)} program started at "
                f"{format_clock_time(now_minutes)} cannot finish by "
                f"{format_clock_time(finish_minutes)}"
            )

        if delay_minutes > self.max_delay_minutes:
            raise DelayOutOfRange(
                f"Required delay of {format_duration(delay_minutes)} exceeds the "
                f"maximum of {format_duration(self.max_delay_minutes)}"
            )

        return Schedule(
            delay_minutes=delay_minutes,
            start_minutes=start_minutes,
            finish_minutes=finish_minutes
        )


DEFAULT_CALCULATOR = ScheduleCalculator()


def compute_schedule(
    now_minutes: int,
    duration_minutes: int,
    finish_minutes: int
) -> Schedule:
    """Compute a schedule with the default 24-hour delay horizon."""
    return DEFAULT_CALCULATOR.compute(now_minutes, duration_minutes, finish_minutes)
