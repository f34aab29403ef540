"""
Domain-specific exception hierarchy for the delay-start calculator.
"""


class DelayStartError(Exception):
    """Base class for all application-level errors."""


class ParseError(DelayStartError):
    """Raised when a time or duration field cannot be parsed."""

    def __init__(self, field: str, value: str | None):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value!r}")


class InfeasibleSchedule(DelayStartError):
    """Raised when the program would have needed to start before now."""


class DelayOutOfRange(DelayStartError):
    """Raised when the required delay exceeds the appliance horizon."""


class ConfigError(DelayStartError, ValueError):
    """Raised when the configuration file is missing or invalid."""
