"""
Service layer helpers that orchestrate the clock and domain logic.
"""

from .delay_planner import ClockProtocol, DelayPlannerService, SystemClock

__all__ = ["ClockProtocol", "DelayPlannerService", "SystemClock"]
