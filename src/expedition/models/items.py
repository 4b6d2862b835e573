"""Inventory items for the expedition.

Items are value types: two tools with the same title and weight are equal,
as are two artifacts of the same kind, weight and find spot.

Key rules:
- A tool's durability only ever decreases; the use that brings it to zero
  still does the work but reports the tool as broken
- Artifacts are museum pieces; using one always fails
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from expedition.errors import OperationForbiddenError, ToolBrokenError
from expedition.models.outcomes import Outcome
from expedition.parameters import ARTIFACT_WEIGHT_DECIMALS, SITE_GRID_SIZE

if TYPE_CHECKING:
    from expedition.randomness import RandomSource

logger = logging.getLogger(__name__)

WEIGHT_TOLERANCE = 1e-9


@runtime_checkable
class InventoryItem(Protocol):
    """Anything a team member can carry and try to use."""

    @property
    def title(self) -> str: ...

    @property
    def weight(self) -> float: ...

    def use(self) -> Outcome: ...


@runtime_checkable
class Repairable(Protocol):
    """Equipment that can break and be put back in service."""

    @property
    def is_broken(self) -> bool: ...

    def repair(self) -> None: ...


class ArtifactKind(str, Enum):
    """Closed set of artifact kinds that can turn up in a dig."""

    POTTERY = "Pottery"
    TOOL = "Tool"
    TABLET = "Tablet"
    JEWELRY = "Jewelry"


class Coordinates(BaseModel):
    """Find spot on the dig site grid."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(..., ge=0, lt=SITE_GRID_SIZE)
    y: int = Field(..., ge=0, lt=SITE_GRID_SIZE)


class Tool(BaseModel):
    """A hand tool that wears out with use.

    Attributes:
        title: Tool name shown in the log
        weight: Weight in kg
        durability: Remaining uses before the tool breaks
    """

    title: str = Field(..., min_length=1)
    weight: float = Field(default=0.0, ge=0.0)
    durability: int = Field(default=1, ge=0)

    @property
    def is_broken(self) -> bool:
        return self.durability <= 0

    def use(self) -> Outcome:
        """Use the tool once.

        Returns:
            Successful outcome, or a failed one carrying ToolBrokenError if the
            tool was already broken or broke on this use.
        """
        if self.durability <= 0:
            return Outcome.fail(ToolBrokenError(self.title))

        self.durability -= 1
        if self.durability == 0:
            logger.debug(f"{self.title} wore out on its last use")
            return Outcome.fail(ToolBrokenError(self.title))
        return Outcome.ok()

    def __str__(self) -> str:
        return f"{self.title} (weight {self.weight} kg, durability {self.durability})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tool):
            return NotImplemented
        return self.title == other.title and abs(self.weight - other.weight) < WEIGHT_TOLERANCE

    def __hash__(self) -> int:
        return hash((self.title, round(self.weight, 9)))


class Artifact(BaseModel):
    """An immutable find.

    Attributes:
        kind: What was found
        weight: Weight in kg, rounded to 2 decimals at creation
        found_at: Grid coordinates of the find
    """

    model_config = ConfigDict(frozen=True)

    kind: ArtifactKind
    weight: float = Field(..., ge=0.0)
    found_at: Coordinates

    @field_validator("weight", mode="before")
    @classmethod
    def round_weight(cls, v: float) -> float:
        """Round weight to the recorded precision."""
        return round(float(v), ARTIFACT_WEIGHT_DECIMALS)

    @classmethod
    def discover(cls, kind: ArtifactKind, weight: float, rng: RandomSource) -> Artifact:
        """Create an artifact at a random spot on the site grid.

        Draws x then y from the shared source.
        """
        x = rng.next_int(0, SITE_GRID_SIZE)
        y = rng.next_int(0, SITE_GRID_SIZE)
        return cls(kind=kind, weight=weight, found_at=Coordinates(x=x, y=y))

    @property
    def title(self) -> str:
        return self.kind.value

    def use(self) -> Outcome:
        """Artifacts cannot be used; this always fails."""
        return Outcome.fail(
            OperationForbiddenError(f"Artifact '{self.title}' is a museum piece; using it is forbidden.")
        )

    def __str__(self) -> str:
        return f"{self.kind.value} ({self.weight} kg) @ ({self.found_at.x},{self.found_at.y})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Artifact):
            return NotImplemented
        return (
            self.kind == other.kind
            and abs(self.weight - other.weight) < WEIGHT_TOLERANCE
            and self.found_at == other.found_at
        )

    def __hash__(self) -> int:
        return hash((self.kind, round(self.weight, ARTIFACT_WEIGHT_DECIMALS), self.found_at))
