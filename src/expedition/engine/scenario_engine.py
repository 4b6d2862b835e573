"""Scenario engine for an expedition day.

The engine builds the day's ordered event chain and runs it node by node.

Day structure (steps = n):
1. MORNING BRIEFING - draw the day's weather
2. ACTION PHASES (n) - every member acts once, in shuffled order; a
   sandstorm may roll in afterwards
3. EVENING INVENTORY - summarize the finds

Failure isolation: each node runs inside its own handler. Domain-checked
conditions are logged as handled; anything else is logged as unexpected.
Either way the day continues with the next node.
"""

from __future__ import annotations

import logging
from typing import Iterable

from expedition.crew.base import Character
from expedition.engine.events import EventNode
from expedition.engine.inventory import summarize_inventory
from expedition.errors import DomainCheckedError
from expedition.models.outcomes import ConditionTier, Outcome
from expedition.models.world import WeatherState, World
from expedition.parameters import (
    CLEAR_WEATHER_CEILING,
    SANDSTORM_ONSET_CHANCE,
    WINDY_WEATHER_CEILING,
)

logger = logging.getLogger(__name__)

DAY_START_BANNER = "== Expedition day begins =="
DAY_END_BANNER = "== Expedition day ends =="
MORNING_TITLE = "Morning briefing and weather assessment"
PHASE_TITLE = "Team actions - phase {index}"
EVENING_TITLE = "Evening inventory"


def weather_from_draw(draw: float) -> WeatherState:
    """Map a morning draw in [0, 1) to the day's weather.

    Examples:
        >>> weather_from_draw(0.1)
        <WeatherState.CLEAR: 'Clear'>
        >>> weather_from_draw(0.7)
        <WeatherState.WINDY: 'Windy'>
        >>> weather_from_draw(0.9)
        <WeatherState.SANDSTORM: 'Sandstorm'>
    """
    if draw < CLEAR_WEATHER_CEILING:
        return WeatherState.CLEAR
    if draw < WINDY_WEATHER_CEILING:
        return WeatherState.WINDY
    return WeatherState.SANDSTORM


class ScenarioEngine:
    """Runs one expedition day over a fixed team.

    Attributes:
        world: Shared world state, mutated in place
        actors: Team members, in setup order
    """

    def __init__(self, world: World, actors: Iterable[Character]) -> None:
        self.world = world
        self.actors: list[Character] = list(actors)

    # =========================================================================
    # Public API
    # =========================================================================

    def run_day(self, steps: int) -> None:
        """Run the full day: morning briefing, ``steps`` phases, evening inventory.

        Args:
            steps: Number of action phases

        Raises:
            ValueError: If steps is negative
        """
        nodes = self.build_event_chain(steps)
        logger.info(f"Running expedition day: {len(nodes)} events, {len(self.actors)} actors")

        self.world.log(DAY_START_BANNER)
        for node in nodes:
            self.world.log(f"-- {node.title}")
            self._run_node(node)
        self.world.log(DAY_END_BANNER)

    def build_event_chain(self, steps: int) -> list[EventNode]:
        """Build the ordered chain of ``steps + 2`` event nodes.

        Raises:
            ValueError: If steps is negative
        """
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")

        chain = [EventNode(MORNING_TITLE, self._morning_briefing)]
        for i in range(steps):
            chain.append(EventNode(PHASE_TITLE.format(index=i + 1), self._action_phase))
        chain.append(EventNode(EVENING_TITLE, self._evening_inventory))
        return chain

    # =========================================================================
    # Execution
    # =========================================================================

    def _run_node(self, node: EventNode) -> None:
        """Run one node, reporting any failure without stopping the day."""
        try:
            outcome = node.action()
        except DomainCheckedError as exc:
            self._report(node, Outcome.fail(exc))
        except Exception as exc:
            logger.exception(f"Unexpected failure in '{node.title}'")
            self._report(node, Outcome.fail(exc))
        else:
            if outcome is not None and not outcome.success:
                self._report(node, outcome)

    def _report(self, node: EventNode, outcome: Outcome) -> None:
        if outcome.tier == ConditionTier.DOMAIN:
            logger.warning(f"Domain condition in '{node.title}': {outcome.message}")
            self.world.log(f"Handled domain exception: {outcome.message}")
        else:
            self.world.log(f"Unexpected error: {type(outcome.error).__name__}: {outcome.message}")

    # =========================================================================
    # Event actions
    # =========================================================================

    def _morning_briefing(self) -> None:
        self.world.change_weather(weather_from_draw(self.world.rng.next_float()))

    def _action_phase(self) -> None:
        for actor in self.world.rng.shuffled(self.actors):
            actor.act(self.world)

        if self.world.rng.next_float() < SANDSTORM_ONSET_CHANCE and self.world.weather != WeatherState.SANDSTORM:
            self.world.change_weather(WeatherState.SANDSTORM)

    def _evening_inventory(self) -> None:
        summary = summarize_inventory(self.world.artifacts)
        self.world.log(summary.describe())

