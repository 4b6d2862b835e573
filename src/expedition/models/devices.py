"""Survey drone operated by the technician.

Status machine:
    Idle -> Surveying          survey starts
    Surveying -> Broken        weather-dependent breakdown
    Surveying -> Idle          survey completes
    Broken -> Idle             explicit repair only

A survey call never returns with the drone still Surveying.
"""

from __future__ import annotations

import logging
import uuid
from enum import Enum
from typing import TYPE_CHECKING, Optional

from expedition.models.entities import Entity
from expedition.parameters import (
    DRONE_BREAK_PROBABILITY,
    DRONE_DEFAULT_BREAK_PROBABILITY,
    SECTOR_FIND_CHANCE,
    SURVEY_SECTOR_RANGE,
)

if TYPE_CHECKING:
    from expedition.models.world import WeatherState, World

logger = logging.getLogger(__name__)


class DroneStatus(str, Enum):
    """Operating status of a survey drone."""

    IDLE = "Idle"
    SURVEYING = "Surveying"
    BROKEN = "Broken"


def break_probability(weather: WeatherState) -> float:
    """Chance that a survey in this weather ends with the drone broken."""
    key = getattr(weather, "value", weather)
    return DRONE_BREAK_PROBABILITY.get(key, DRONE_DEFAULT_BREAK_PROBABILITY)


class SurveyDrone(Entity):
    """Aerial survey drone with identity equality."""

    def __init__(self, name: Optional[str] = None, entity_id: Optional[uuid.UUID] = None):
        super().__init__(name, entity_id)
        self._status = DroneStatus.IDLE

    @property
    def status(self) -> DroneStatus:
        return self._status

    @property
    def is_broken(self) -> bool:
        return self._status == DroneStatus.BROKEN

    def repair(self) -> None:
        """Put the drone back in service. Always succeeds."""
        self._status = DroneStatus.IDLE

    def survey(self, world: World) -> None:
        """Fly one survey over the nearest squares.

        Breaking down is a normal status transition, not an error.
        """
        if self.is_broken:
            world.log(f"{self}: malfunctioning, cannot launch.")
            return

        self._status = DroneStatus.SURVEYING
        world.log(f"{self}: takeoff, surveying the nearest squares...")

        p_break = break_probability(world.weather)
        if world.rng.next_float() < p_break:
            self._status = DroneStatus.BROKEN
            logger.debug(f"{self} broke down (p={p_break}) in {world.weather}")
            world.log(f"{self}: caught in a sand jet and broke down.")
            return

        if world.rng.next_float() < SECTOR_FIND_CHANCE:
            sector = world.rng.next_int(*SURVEY_SECTOR_RANGE)
            world.log(f"{self}: found a promising sector #{sector}.")
            world.record_prospect()
        self._status = DroneStatus.IDLE
