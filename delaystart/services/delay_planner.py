"""
Application service for planning a delayed program start.

The service reads the current time through a clock adapter, runs the raw
field values through the parser and delegates the arithmetic to the
domain-level ``ScheduleCalculator`` and ``DelayQuantizer``. Keeping the clock
behind a protocol lets tests pin "now" without patching.
"""

from __future__ import annotations

import logging
from typing import Protocol

import pendulum
from pendulum import DateTime

from ..domain.exceptions import ParseError
from ..domain.models import DelayOption, DelayPlan
from ..domain.quantizer import DelayQuantizer
from ..domain.schedule_calculator import ScheduleCalculator
from ..domain.timeparse import minutes_since_midnight, parse_clock_time, parse_duration

logger = logging.getLogger(__name__)


class ClockProtocol(Protocol):
    """Protocol describing the clock behaviour needed by the service."""

    def now(self) -> DateTime:
        """Return the current local date and time."""


class SystemClock:
    """Wall clock in a fixed timezone."""

    def __init__(self, timezone: str = "local"):
        self.timezone = timezone

    def now(self) -> DateTime:
        if self.timezone == "local":
            return pendulum.now()
        return pendulum.now(self.timezone)


class DelayPlannerService:
    """
    Orchestrates parsing, schedule calculation and delay quantization.
    """

    def __init__(
        self,
        clock: ClockProtocol,
        calculator: ScheduleCalculator | None = None,
        quantizer: DelayQuantizer | None = None,
    ) -> None:
        self._clock = clock
        self._calculator = calculator or ScheduleCalculator()
        self._quantizer = quantizer or DelayQuantizer()

    def plan(
        self,
        *,
        duration_text: str,
        finish_text: str,
        now_text: str | None = None,
    ) -> DelayPlan:
        """
        Plan a program run from raw field values.

        Raises:
            ParseError: If any of the fields is not a valid time or duration
            InfeasibleSchedule: If the program cannot finish by the given time
            DelayOutOfRange: If the required delay exceeds the appliance horizon
        """
        if now_text is None:
            now_minutes = minutes_since_midnight(self._clock.now())
        else:
            now_minutes = self._require(parse_clock_time(now_text), "current time", now_text)

        duration_minutes = self._require(parse_duration(duration_text), "duration", duration_text)
        finish_minutes = self._require(parse_clock_time(finish_text), "finish time", finish_text)

        return self.plan_minutes(
            now_minutes=now_minutes,
            duration_minutes=duration_minutes,
            finish_minutes=finish_minutes,
        )

    def plan_minutes(
        self,
        *,
        now_minutes: int,
        duration_minutes: int,
        finish_minutes: int,
    ) -> DelayPlan:
        """Plan a program run from values already converted to minutes."""
        schedule = self._calculator.compute(now_minutes, duration_minutes, finish_minutes)

        exact = DelayOption(
            delay_minutes=schedule.delay_minutes,
            start_minutes=schedule.start_minutes,
            finish_minutes=schedule.finish_minutes,
        )

        snapped_delay = self._quantizer.quantize(schedule.delay_minutes)
        appliance_start = now_minutes + snapped_delay
        appliance = DelayOption(
            delay_minutes=snapped_delay,
            start_minutes=appliance_start,
            finish_minutes=appliance_start + duration_minutes,
        )

        logger.info(
            "Planned delay %d min (exact %d min)",
            appliance.delay_minutes,
            exact.delay_minutes,
        )

        return DelayPlan(
            now_minutes=now_minutes,
            duration_minutes=duration_minutes,
            exact=exact,
            appliance=appliance,
        )

    @staticmethod
    def _require(value: int | None, field: str, text: str | None) -> int:
        if value is None:
            raise ParseError(field, text)
        return value
