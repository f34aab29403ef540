"""
Snapping of exact delays to the increments an appliance panel supports.

Typical panels offer 30-minute steps up to 10 hours and 1-hour steps beyond
that, with a minimum of 30 minutes and a maximum of 24 hours.
"""

import logging
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DelayQuantizer:
    """
    Rounds delays to the nearest selectable panel value.

    Algorithm:
    1. Clamp the delay to [min_delay, max_delay]
    2. Pick fine_step below coarse_threshold, coarse_step from there on
    3. Round to the nearest multiple of the step, halves round up
    4. Clamp again, since rounding near a bound can overshoot by one step
    """
    min_delay: int = 30
    max_delay: int = 24 * 60
    fine_step: int = 30
    coarse_step: int = 60
    coarse_threshold: int = 10 * 60

    def __post_init__(self):
        if self.fine_step <= 0 or self.coarse_step <= 0:
            raise ValueError("Steps must be greater than zero")
        if self.min_delay >= self.max_delay:
            raise ValueError(
                f"min_delay {self.min_delay} must be below max_delay {self.max_delay}"
            )
        if self.coarse_threshold <= 0:
            raise ValueError("coarse_threshold must be greater than zero")
        if self.coarse_threshold % self.fine_step or self.coarse_threshold % self.coarse_step:
            raise ValueError(
                f"coarse_threshold {self.coarse_threshold} must be a multiple of "
                f"fine_step and coarse_step"
            )

        # Both bounds lie on the step grid that applies to them
        for name in ("min_delay", "max_delay"):
            value = getattr(self, name)
            if value % self.step_for(value):
                raise ValueError(
                    f"{name} {value} must be a multiple of its step ({self.step_for(value)})"
                )

    def clamp(self, delay_minutes: int) -> int:
        """Limit a delay to [min_delay, max_delay]."""
        return min(self.max_delay, max(self.min_delay, delay_minutes))

    def step_for(self, delay_minutes: int) -> int:
        """Return the rounding step that applies to an already clamped delay."""
        if delay_minutes < self.coarse_threshold:
            return self.fine_step
        return self.coarse_step

    def quantize(self, delay_minutes: int) -> int:
        """Snap a delay to the nearest panel value."""
        clamped = self.clamp(delay_minutes)
        step = self.step_for(clamped)

        # Integer round-half-up: floor((2x + step) / 2step) * step
        rounded = (2 * clamped + step) // (2 * step) * step
        snapped = self.clamp(rounded)

        logger.debug(
            "Quantized delay %d -> %d (clamped %d, step %d)",
            delay_minutes, snapped, clamped, step
        )
        return snapped

    def settings(self) -> List[int]:
        """All delay values the panel can be set to, ascending."""
        values: List[int] = []
        current = self.min_delay

        while current <= self.max_delay:
            values.append(current)
            current += self.step_for(current)

        return values


DEFAULT_QUANTIZER = DelayQuantizer()


def quantize_delay(delay_minutes: int) -> int:
    """Snap a delay to the default panel increments (30 min to 24 h)."""
    return DEFAULT_QUANTIZER.quantize(delay_minutes)
