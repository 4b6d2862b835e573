"""Run configuration for the expedition.

Environment variables (all optional):
    EXPEDITION_SEED: Integer seed for the shared randomness source
    EXPEDITION_STEPS: Number of action phases in the day
    EXPEDITION_LOG_LEVEL: Diagnostic logging level (default WARNING)

Values not fixed by the environment or the command line are drawn from the
run's randomness source when the expedition is built.
"""

from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, Field

from expedition.models.world import WeatherState
from expedition.parameters import (
    DEFAULT_COORDINATOR_NAME,
    DEFAULT_DRONE_NAME,
    DEFAULT_FORECAST,
    DEFAULT_PROSPECTOR_NAME,
    DEFAULT_TECHNICIAN_NAME,
    DEFAULT_TOOL_TITLE,
    DEFAULT_TOOL_WEIGHT,
)

DEFAULT_LOG_LEVEL = "WARNING"


def _get_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def get_seed() -> Optional[int]:
    """Get configured seed from environment."""
    return _get_int("EXPEDITION_SEED")


def get_steps() -> Optional[int]:
    """Get configured number of action phases from environment."""
    return _get_int("EXPEDITION_STEPS")


def get_log_level() -> str:
    """Get configured diagnostic log level from environment."""
    return os.environ.get("EXPEDITION_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


class DayConfig(BaseModel):
    """Parameters of one expedition day.

    Attributes:
        seed: Seed for the shared randomness source (None for OS entropy)
        steps: Action phases in the day (drawn from [3, 4] if None)
        tool_durability: Uses before the prospector's tool breaks (drawn from [1, 3] if None)
        water: Coordinator's starting water (drawn from [0, 4] if None)
        forecast: Fixed forecast table
        initial_weather: Weather before the morning briefing
    """

    seed: Optional[int] = Field(default=None)
    steps: Optional[int] = Field(default=None, ge=0)
    tool_durability: Optional[int] = Field(default=None, ge=0)
    water: Optional[int] = Field(default=None, ge=0)
    forecast: tuple[str, ...] = Field(default=DEFAULT_FORECAST, min_length=1)
    initial_weather: WeatherState = Field(default=WeatherState.CLEAR)

    tool_title: str = Field(default=DEFAULT_TOOL_TITLE, min_length=1)
    tool_weight: float = Field(default=DEFAULT_TOOL_WEIGHT, ge=0.0)
    drone_name: str = Field(default=DEFAULT_DRONE_NAME)
    prospector_name: str = Field(default=DEFAULT_PROSPECTOR_NAME)
    technician_name: str = Field(default=DEFAULT_TECHNICIAN_NAME)
    coordinator_name: str = Field(default=DEFAULT_COORDINATOR_NAME)

    @classmethod
    def from_environment(cls) -> DayConfig:
        """Build a config from the EXPEDITION_* environment variables."""
        return cls(seed=get_seed(), steps=get_steps())
