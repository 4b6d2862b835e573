"""Base team member interface for the expedition.

Every team member is a Character: an identity-bearing Entity with a role tag
and a single capability, ``act(world)``, invoked once per action phase.

Subclasses:
    - Prospector: digs with a hand tool
    - Technician: runs and repairs the survey drone
    - Coordinator: spends water to plan routes against the forecast
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from expedition.models.entities import Entity, Role

if TYPE_CHECKING:
    from expedition.models.world import World


class Character(Entity, ABC):
    """Abstract base class for all team members.

    Characters hold no reference to the world between calls; it is passed
    into every ``act`` call.
    """

    def __init__(self, name: Optional[str], role: Role, entity_id: Optional[uuid.UUID] = None):
        """Initialize a team member.

        Args:
            name: Display name
            role: Role tag
            entity_id: Fixed id (random if not provided)
        """
        super().__init__(name, entity_id)
        self._role = role

    @property
    def role(self) -> Role:
        return self._role

    def __str__(self) -> str:
        return f"{self._role.value}: {self.name} ({self.short_id})"

    @abstractmethod
    def act(self, world: World) -> None:
        """Take this member's turn in an action phase.

        Expected conditions are recovered locally and logged. Anything that
        escapes is reported by the scenario engine.

        Args:
            world: Shared world state
        """
        pass
