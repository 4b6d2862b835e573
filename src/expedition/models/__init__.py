"""Expedition models.

This module exports the core data structures for the simulation.
"""

from .devices import DroneStatus, SurveyDrone, break_probability
from .entities import Entity, Role
from .items import (
    Artifact,
    ArtifactKind,
    Coordinates,
    InventoryItem,
    Repairable,
    Tool,
)
from .outcomes import ConditionTier, Outcome
from .world import WeatherState, World

__all__ = [
    # Enums
    "ArtifactKind",
    "ConditionTier",
    "DroneStatus",
    "Role",
    "WeatherState",
    # Entities
    "Entity",
    "SurveyDrone",
    # Items
    "Artifact",
    "Coordinates",
    "InventoryItem",
    "Repairable",
    "Tool",
    # State
    "Outcome",
    "World",
    # Functions
    "break_probability",
]
