"""Concrete team members for the expedition.

Each member recovers its own expected conditions by logging them; a
condition a member does not know how to handle is raised so the scenario
engine can report it.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Optional

from expedition.crew.base import Character
from expedition.errors import InsufficientSuppliesError, ToolBrokenError
from expedition.models.devices import SurveyDrone
from expedition.models.entities import Role
from expedition.models.items import Artifact, ArtifactKind, InventoryItem
from expedition.models.outcomes import ConditionTier, Outcome
from expedition.models.world import WeatherState
from expedition.parameters import (
    ARTIFACT_WEIGHT_DECIMALS,
    ARTIFACT_WEIGHT_OFFSET,
    ARTIFACT_WEIGHT_SCALE,
    COORDINATOR_WATER_COST,
    DIG_SECTOR_RANGE,
    DISCOVERY_CHANCE,
    FORECAST_INDEX_RANGE,
)

if TYPE_CHECKING:
    from expedition.models.world import World

logger = logging.getLogger(__name__)


class Prospector(Character):
    """Digs for artifacts with a hand tool.

    Sits out sandstorms. A tool that breaks is logged and the turn ends.
    """

    def __init__(self, name: Optional[str], tool: InventoryItem, entity_id: Optional[uuid.UUID] = None):
        super().__init__(name, Role.PROSPECTOR, entity_id)
        self.tool = tool

    def act(self, world: World) -> None:
        if world.weather == WeatherState.SANDSTORM:
            world.log(f"{self}: waiting out the sandstorm.")
            return

        sector = world.rng.next_int(*DIG_SECTOR_RANGE)
        world.log(f"{self}: starts careful clearing of sector {sector} with '{self.tool.title}'.")

        outcome = self.tool.use()
        if not outcome.success:
            if isinstance(outcome.error, ToolBrokenError):
                world.log(f"{self}: {outcome.message}")
                return
            outcome.raise_for_error()

        if world.rng.next_float() < DISCOVERY_CHANCE:
            kind = world.rng.choice(list(ArtifactKind))
            weight = round(
                world.rng.next_float() * ARTIFACT_WEIGHT_SCALE + ARTIFACT_WEIGHT_OFFSET,
                ARTIFACT_WEIGHT_DECIMALS,
            )
            found = Artifact.discover(kind, weight, world.rng)
            world.add_artifact(found)
            world.log(f"{self}: artifact found: {found}.")
        else:
            world.log(f"{self}: thorough inspection, no finds.")


class Technician(Character):
    """Operates the survey drone and repairs it when it breaks."""

    def __init__(self, name: Optional[str], drone: SurveyDrone, entity_id: Optional[uuid.UUID] = None):
        super().__init__(name, Role.TECHNICIAN, entity_id)
        self.drone = drone

    def act(self, world: World) -> None:
        if self.drone.is_broken:
            world.log(f"{self}: repairing the drone...")
            self.drone.repair()
            world.log(f"{self}: drone is ready.")
            return

        if world.weather == WeatherState.SANDSTORM:
            world.log(f"{self}: postponing the drone launch because of the storm.")
            return

        self.drone.survey(world)


class Coordinator(Character):
    """Plans safe routes, spending water and checking the forecast.

    Attributes:
        water: Water units left
    """

    route_name = "Field trip to the far site"

    def __init__(self, name: Optional[str], water: int, entity_id: Optional[uuid.UUID] = None):
        super().__init__(name, Role.COORDINATOR, entity_id)
        if water < 0:
            raise ValueError(f"water must be non-negative, got {water}")
        self._water = water

    @property
    def water(self) -> int:
        return self._water

    def spend_water(self, cost: int = COORDINATOR_WATER_COST) -> Outcome:
        """Deduct ``cost`` water units if there are enough.

        Returns:
            Successful outcome with the remaining balance, or a failed one
            carrying InsufficientSuppliesError (nothing is spent).
        """
        if self._water < cost:
            return Outcome.fail(InsufficientSuppliesError(self.route_name, cost, self._water))
        self._water -= cost
        return Outcome.ok(self._water)

    def act(self, world: World) -> None:
        supplies = self.spend_water()
        if not supplies.success:
            if isinstance(supplies.error, InsufficientSuppliesError):
                world.log(f"{self}: {supplies.message} Decided to stay in camp and replenish supplies.")
                return
            supplies.raise_for_error()

        world.log(
            f"{self}: plans a safe route; water spent {COORDINATOR_WATER_COST}, "
            f"remaining {supplies.value}."
        )

        index = world.rng.next_int(*FORECAST_INDEX_RANGE)
        reading = world.read_forecast(index)
        if reading.success:
            world.log(f"{self}: checked against the forecast: '{reading.value}'.")
        elif reading.tier == ConditionTier.UNEXPECTED:
            logger.debug(f"Forecast lookup failed at index {index}: {reading.error!r}")
            world.log(
                f"{self}: unexpected forecast error (data mismatch): "
                f"{type(reading.error).__name__}. Using the fallback plan."
            )
        else:
            reading.raise_for_error()
