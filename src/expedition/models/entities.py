"""Identity-bearing entities of the expedition.

Entities compare and hash by their opaque id only, never by attribute
values. Value types (tools, artifacts) live in ``expedition.models.items``
and use attribute equality instead.
"""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Role tag of a team member."""

    PROSPECTOR = "Prospector"
    TECHNICIAN = "Technician"
    COORDINATOR = "Coordinator"


class Entity:
    """Base class for everything with a stable identity.

    Attributes:
        id: Unique id, fixed at construction
        name: Display name, fixed at construction
    """

    def __init__(self, name: Optional[str] = None, entity_id: Optional[uuid.UUID] = None):
        self._id = entity_id or uuid.uuid4()
        self._name = name if name is not None else "Unnamed"

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def short_id(self) -> str:
        return str(self._id)[:8]

    def __str__(self) -> str:
        return f"{type(self).__name__} '{self._name}' ({self.short_id})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, id={self._id!s})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)
