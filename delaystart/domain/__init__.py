"""
Domain layer - Pure time arithmetic without external dependencies.
"""

from .exceptions import (
    ConfigError,
    DelayOutOfRange,
    DelayStartError,
    InfeasibleSchedule,
    ParseError,
)
from .formatting import format_clock_time, format_day_offset, format_duration
from .models import DelayOption, DelayPlan, Schedule
from .quantizer import DelayQuantizer, quantize_delay
from .schedule_calculator import ScheduleCalculator, compute_schedule
from .timeparse import minutes_since_midnight, parse_clock_time, parse_duration

__all__ = [
    "ConfigError",
    "DelayOutOfRange",
    "DelayStartError",
    "InfeasibleSchedule",
    "ParseError",
    "format_clock_time",
    "format_day_offset",
    "format_duration",
    "DelayOption",
    "DelayPlan",
    "Schedule",
    "DelayQuantizer",
    "quantize_delay",
    "ScheduleCalculator",
    "compute_schedule",
    "minutes_since_midnight",
    "parse_clock_time",
    "parse_duration",
]
