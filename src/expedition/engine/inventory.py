"""Evening inventory of the day's finds."""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, Field

from expedition.models.items import Artifact, ArtifactKind
from expedition.parameters import INVENTORY_WEIGHT_DECIMALS


class InventorySummary(BaseModel):
    """Counts and weight of the artifacts found so far.

    Attributes:
        count: Number of artifacts
        total_weight: Sum of weights in kg, rounded to 3 decimals
        by_kind: Artifacts per kind, kinds in order of first discovery
    """

    count: int = Field(default=0, ge=0)
    total_weight: float = Field(default=0.0, ge=0.0)
    by_kind: dict[ArtifactKind, int] = Field(default_factory=dict)

    def describe(self) -> str:
        """One-line summary for the expedition log."""
        kinds = ", ".join(f"{kind.value}:{n}" for kind, n in self.by_kind.items()) or "none"
        return f"Finds summary: total {self.count}, total weight {self.total_weight} kg; kinds: {kinds}."


def summarize_inventory(artifacts: Iterable[Artifact]) -> InventorySummary:
    """Count artifacts, total their weight and group them by kind."""
    count = 0
    total_weight = 0.0
    by_kind: dict[ArtifactKind, int] = {}
    for artifact in artifacts:
        count += 1
        total_weight += artifact.weight
        by_kind[artifact.kind] = by_kind.get(artifact.kind, 0) + 1

    return InventorySummary(
        count=count,
        total_weight=round(total_weight, INVENTORY_WEIGHT_DECIMALS),
        by_kind=by_kind,
    )
