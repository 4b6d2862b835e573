"""Expedition setup and single-day run.

Builds the world and the three-member team from a ``DayConfig`` and runs one
day through the scenario engine. Anything the config leaves open is drawn
from the run's shared randomness source, in this order: tool durability,
team ids, coordinator water, step count.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from expedition.config import DayConfig
from expedition.crew import Character, Coordinator, Prospector, Technician
from expedition.engine import ScenarioEngine
from expedition.journal import LogSink
from expedition.models.devices import SurveyDrone
from expedition.models.items import Tool
from expedition.models.world import World
from expedition.parameters import STEP_RANGE, TOOL_DURABILITY_RANGE, WATER_RANGE
from expedition.randomness import RandomSource

logger = logging.getLogger(__name__)


@dataclass
class Expedition:
    """A fully assembled, not yet run, expedition day.

    Attributes:
        world: Shared world state
        team: Team members in setup order
        engine: Scenario engine over the team
        steps: Number of action phases to run
    """

    world: World
    team: list[Character]
    engine: ScenarioEngine
    steps: int

    def run(self) -> World:
        self.engine.run_day(self.steps)
        return self.world


def build_expedition(
    config: DayConfig,
    sink: LogSink,
    rng: Optional[RandomSource] = None,
) -> Expedition:
    """Assemble world, team and engine for one day.

    Args:
        config: Day parameters
        sink: Consumer of the expedition log
        rng: Randomness source (a new one seeded from config.seed if not provided)

    Returns:
        The assembled Expedition
    """
    rng = rng or RandomSource(config.seed)
    world = World(sink, rng, weather=config.initial_weather, forecast=config.forecast)

    durability = config.tool_durability
    if durability is None:
        durability = rng.next_int(*TOOL_DURABILITY_RANGE)
    tool = Tool(title=config.tool_title, weight=config.tool_weight, durability=durability)
    drone = SurveyDrone(config.drone_name, entity_id=rng.next_uuid())

    prospector = Prospector(config.prospector_name, tool, entity_id=rng.next_uuid())
    technician = Technician(config.technician_name, drone, entity_id=rng.next_uuid())

    water = config.water
    if water is None:
        water = rng.next_int(*WATER_RANGE)
    coordinator = Coordinator(config.coordinator_name, water, entity_id=rng.next_uuid())

    steps = config.steps
    if steps is None:
        steps = rng.next_int(*STEP_RANGE)

    team: list[Character] = [prospector, technician, coordinator]
    logger.debug(
        f"Expedition assembled: seed={config.seed}, steps={steps}, "
        f"durability={durability}, water={water}"
    )
    return Expedition(world=world, team=team, engine=ScenarioEngine(world, team), steps=steps)


def run_expedition(
    config: DayConfig,
    sink: LogSink,
    rng: Optional[RandomSource] = None,
) -> World:
    """Build and run one expedition day.

    Returns:
        The world after the day, holding the artifacts and prospect bonus
    """
    return build_expedition(config, sink, rng).run()
