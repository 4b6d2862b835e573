"""Team members for the expedition.

All members implement the Character interface: one ``act(world)`` call per
action phase.
"""

from expedition.crew.base import Character
from expedition.crew.members import Coordinator, Prospector, Technician

__all__ = [
    "Character",
    "Coordinator",
    "Prospector",
    "Technician",
]
