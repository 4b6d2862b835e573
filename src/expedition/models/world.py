"""Shared world state for one expedition day.

The World is created once per run and passed by reference into every actor
call. It owns:
- current weather and the fixed forecast table
- the shared randomness source and the log sink
- the discovered artifacts (insertion order, no dedup)
- the prospect bonus counter (starts at 0, only increments)
"""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Callable, Optional, Sequence

from expedition.journal import LogEntry, LogSink
from expedition.models.items import Artifact
from expedition.models.outcomes import Outcome
from expedition.parameters import DEFAULT_FORECAST
from expedition.randomness import RandomSource

logger = logging.getLogger(__name__)


class WeatherState(str, Enum):
    """Weather over the dig site."""

    CLEAR = "Clear"
    WINDY = "Windy"
    SANDSTORM = "Sandstorm"


class World:
    """Mutable state shared by the engine and every actor.

    Attributes:
        rng: The run's single randomness source
        sink: Consumer of the expedition log stream
        weather: Current weather (change it with change_weather)
        forecast: Fixed forecast table
        artifacts: Artifacts found so far, in discovery order
        prospect_bonus: Promising sectors found by drone surveys
    """

    def __init__(
        self,
        sink: LogSink,
        rng: RandomSource,
        weather: WeatherState = WeatherState.CLEAR,
        forecast: Sequence[str] = DEFAULT_FORECAST,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.sink = sink
        self.rng = rng
        self._weather = weather
        self._forecast = tuple(forecast)
        self._artifacts: list[Artifact] = []
        self._prospect_bonus = 0
        self._clock = clock or datetime.now

    @property
    def weather(self) -> WeatherState:
        return self._weather

    @property
    def forecast(self) -> tuple[str, ...]:
        return self._forecast

    @property
    def artifacts(self) -> tuple[Artifact, ...]:
        return tuple(self._artifacts)

    @property
    def prospect_bonus(self) -> int:
        return self._prospect_bonus

    def log(self, message: str) -> None:
        """Send a message to the log sink, stamped with the current time."""
        entry = LogEntry(time=self._clock(), message=message)
        try:
            self.sink.log(entry)
        except Exception:
            logger.exception(f"Log sink {type(self.sink).__name__} failed on: {message}")

    def change_weather(self, state: WeatherState) -> None:
        """Set the weather and log it, even when it does not change."""
        self._weather = state
        self.log(f"Weather changed: {state.value}.")

    def add_artifact(self, artifact: Artifact) -> None:
        self._artifacts.append(artifact)

    def record_prospect(self) -> None:
        """Increment the prospect bonus by one."""
        self._prospect_bonus += 1

    def read_forecast(self, index: int) -> Outcome:
        """Look up a forecast entry.

        Returns:
            Successful outcome with the entry, or a failed outcome carrying
            the IndexError when the index is outside the table.
        """
        try:
            return Outcome.ok(self._forecast[index])
        except IndexError as exc:
            logger.debug(f"Forecast index {index} outside table of {len(self._forecast)}")
            return Outcome.fail(exc)
