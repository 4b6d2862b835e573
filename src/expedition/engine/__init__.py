"""Scenario engine module for the expedition.

This module contains the day's execution logic:
- events: Event nodes of the day's chain
- inventory: Evening summary of the finds
- scenario_engine: Chain building and per-node failure isolation

Usage:
    from expedition.engine import ScenarioEngine

    engine = ScenarioEngine(world, team)
    engine.run_day(steps=3)
"""

from expedition.engine.events import EventAction, EventNode
from expedition.engine.inventory import InventorySummary, summarize_inventory
from expedition.engine.scenario_engine import (
    DAY_END_BANNER,
    DAY_START_BANNER,
    EVENING_TITLE,
    MORNING_TITLE,
    PHASE_TITLE,
    ScenarioEngine,
    weather_from_draw,
)

__all__ = [
    # Engine
    "ScenarioEngine",
    "EventAction",
    "EventNode",
    "weather_from_draw",
    # Inventory
    "InventorySummary",
    "summarize_inventory",
    # Log headings
    "DAY_START_BANNER",
    "DAY_END_BANNER",
    "MORNING_TITLE",
    "PHASE_TITLE",
    "EVENING_TITLE",
]
