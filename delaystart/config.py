"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import List

import pendulum
import yaml
from pendulum.tz.exceptions import InvalidTimezone
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .domain.exceptions import ConfigError
from .domain.quantizer import DelayQuantizer
from .domain.schedule_calculator import ScheduleCalculator
from .domain.timeparse import parse_duration


class ApplianceConfig(BaseModel):
    """Delay limits and steps of the appliance control panel."""
    min_delay: int = 30
    max_delay: int = 24 * 60
    fine_step: int = 30
    coarse_step: int = 60
    coarse_threshold: int = 10 * 60

    @field_validator("fine_step", "coarse_step", "coarse_threshold", "min_delay", "max_delay")
    @classmethod
    def validate_positive(cls, value: int) -> int:
        """Ensure steps and limits are positive."""
        if value <= 0:
            raise ValueError(f"Value must be greater than zero, got {value}")
        return value

    @model_validator(mode="after")
    def validate_limits(self) -> "ApplianceConfig":
        """Ensure the delay window is non-empty and every bound lies on a step."""
        if self.max_delay <= self.min_delay:
            raise ValueError("max_delay must be greater than min_delay")
        if self.min_delay % self.fine_step:
            raise ValueError("min_delay must be a multiple of fine_step")
        # Remaining grid checks live with the quantizer
        self.build_quantizer()
        return self

    def build_quantizer(self) -> DelayQuantizer:
        return DelayQuantizer(
            min_delay=self.min_delay,
            max_delay=self.max_delay,
            fine_step=self.fine_step,
            coarse_step=self.coarse_step,
            coarse_threshold=self.coarse_threshold,
        )

    def build_calculator(self) -> ScheduleCalculator:
        return ScheduleCalculator(max_delay_minutes=self.max_delay)


class ProgramPreset(BaseModel):
    """Named program with its typical running time."""
    name: str
    duration: str  # "H:MM" as shown on the appliance display

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, value: str) -> str:
        """Ensure the duration can be parsed."""
        if parse_duration(value) is None:
            raise ValueError(f"Invalid preset duration: {value!r}")
        return value

    def duration_minutes(self) -> int:
        return parse_duration(self.duration)


DEFAULT_PRESETS = (
    ("Cotton", "3:39"),
    ("Cotton Eco", "3:59"),
    ("Minimum iron", "2:09"),
    ("Delicates", "1:49"),
    ("Woollens", "0:39"),
    ("QuickPowerWash", "0:49"),
    ("Express", "0:20"),
)


def _default_presets() -> List[ProgramPreset]:
    return [ProgramPreset(name=name, duration=duration) for name, duration in DEFAULT_PRESETS]


class AppConfig(BaseModel):
    """Application configuration."""
    timezone: str = "local"
    appliance: ApplianceConfig = Field(default_factory=ApplianceConfig)
    presets: List[ProgramPreset] = Field(default_factory=_default_presets)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Ensure the timezone is "local" or a zone pendulum knows."""
        if value == "local":
            return value
        try:
            pendulum.timezone(value)
        except (InvalidTimezone, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value!r}") from exc
        return value

    @field_validator("presets")
    @classmethod
    def validate_presets(cls, value: List[ProgramPreset]) -> List[ProgramPreset]:
        """Ensure preset names are unique."""
        seen: set[str] = set()
        for preset in value:
            key = preset.name.lower()
            if key in seen:
                raise ValueError(f"Duplicate preset name detected: {preset.name}")
            seen.add(key)
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping at the root level.")

        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration in {config_path}:\n{exc}") from exc

    def find_preset(self, name: str) -> ProgramPreset | None:
        """Find a preset by name, ignoring case."""
        for preset in self.presets:
            if preset.name.lower() == name.lower():
                return preset
        return None


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    config_path = Path.cwd() / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        config_path = Path(__file__).parent.parent / "config.yaml"

    return config_path


def load_config(config_path: Path | None = None) -> AppConfig:
    """
    Load an explicit config file, or the default one if it exists.

    Falls back to built-in defaults only when no path was given and no
    default file is present.
    """
    if config_path is not None:
        return AppConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if default_path.exists():
        return AppConfig.load_from_yaml(default_path)
    return AppConfig()
