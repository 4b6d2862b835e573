"""Unit tests for expedition.models.items module.

Tests cover:
- Tool: durability countdown, breakage on the exhausting use, value equality
- Artifact: weight rounding, coordinates drawn from the shared source,
  immutability, value equality, use always forbidden
"""

import pytest
from pydantic import ValidationError

from expedition.errors import OperationForbiddenError, ToolBrokenError
from expedition.models.items import (
    Artifact,
    ArtifactKind,
    Coordinates,
    InventoryItem,
    Tool,
)
from expedition.models.outcomes import ConditionTier
from expedition.randomness import RandomSource
from expedition.testing import ScriptedRandom


class TestTool:
    """Tests for Tool durability and equality."""

    @pytest.mark.parametrize("durability", [1, 2, 3, 5])
    def test_exactly_durability_uses_before_broken(self, durability):
        """The first d-1 uses succeed; the d-th works but reports breakage."""
        tool = Tool(title="Brush", weight=0.2, durability=durability)

        for _ in range(durability - 1):
            assert tool.use().success

        breaking = tool.use()
        assert not breaking.success
        assert isinstance(breaking.error, ToolBrokenError)
        assert tool.durability == 0

        for _ in range(3):
            again = tool.use()
            assert isinstance(again.error, ToolBrokenError)
            assert tool.durability == 0

    def test_broken_tool_state_unchanged(self):
        """Using an already broken tool leaves durability at zero."""
        tool = Tool(title="Brush", weight=0.2, durability=0)
        outcome = tool.use()
        assert outcome.tier == ConditionTier.DOMAIN
        assert "Brush" in outcome.message
        assert tool.durability == 0
        assert tool.is_broken

    def test_negative_durability_rejected(self):
        with pytest.raises(ValidationError):
            Tool(title="Brush", weight=0.2, durability=-1)

    def test_equality_ignores_durability(self):
        """Tools are equal by title and weight."""
        a = Tool(title="Brush", weight=0.2, durability=3)
        b = Tool(title="Brush", weight=0.2, durability=1)
        c = Tool(title="Trowel", weight=0.2, durability=3)
        assert a == b
        assert hash(a) == hash(b)
        assert a != c

    def test_display(self):
        tool = Tool(title="Brush #5", weight=0.2, durability=2)
        assert str(tool) == "Brush #5 (weight 0.2 kg, durability 2)"

    def test_is_inventory_item(self):
        assert isinstance(Tool(title="Brush", weight=0.2, durability=1), InventoryItem)


class TestArtifact:
    """Tests for Artifact construction, equality and use."""

    def test_weight_rounded_at_creation(self):
        artifact = Artifact(kind=ArtifactKind.POTTERY, weight=0.456, found_at=Coordinates(x=1, y=2))
        assert artifact.weight == pytest.approx(0.46)

    def test_discover_draws_x_then_y(self):
        """Coordinates come from the shared source, x first."""
        rng = ScriptedRandom(ints=[7, 49])
        artifact = Artifact.discover(ArtifactKind.TABLET, 1.2, rng)
        assert artifact.found_at == Coordinates(x=7, y=49)
        assert rng.remaining_ints == 0

    def test_discovered_coordinates_in_range(self):
        rng = RandomSource(seed=11)
        for _ in range(200):
            artifact = Artifact.discover(ArtifactKind.JEWELRY, 0.5, rng)
            assert 0 <= artifact.found_at.x < 50
            assert 0 <= artifact.found_at.y < 50

    def test_coordinates_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            Coordinates(x=50, y=0)
        with pytest.raises(ValidationError):
            Coordinates(x=0, y=-1)

    def test_artifact_is_immutable(self):
        artifact = Artifact(kind=ArtifactKind.POTTERY, weight=0.5, found_at=Coordinates(x=1, y=2))
        with pytest.raises(ValidationError):
            artifact.weight = 1.0

    def test_value_equality(self):
        spot = Coordinates(x=3, y=4)
        a = Artifact(kind=ArtifactKind.TOOL, weight=0.7, found_at=spot)
        b = Artifact(kind=ArtifactKind.TOOL, weight=0.70000000001, found_at=Coordinates(x=3, y=4))
        assert a == b
        assert hash(a) == hash(b)
        assert a != Artifact(kind=ArtifactKind.TOOL, weight=0.7, found_at=Coordinates(x=4, y=3))
        assert a != Artifact(kind=ArtifactKind.TABLET, weight=0.7, found_at=spot)

    @pytest.mark.parametrize("kind", list(ArtifactKind))
    @pytest.mark.parametrize("weight", [0.2, 0.95, 1.7])
    def test_use_always_forbidden(self, kind, weight):
        """Artifacts are museum pieces regardless of kind or weight."""
        artifact = Artifact(kind=kind, weight=weight, found_at=Coordinates(x=0, y=0))
        for _ in range(2):
            outcome = artifact.use()
            assert not outcome.success
            assert isinstance(outcome.error, OperationForbiddenError)
            assert outcome.tier == ConditionTier.DOMAIN

    def test_display(self):
        artifact = Artifact(kind=ArtifactKind.TABLET, weight=1.25, found_at=Coordinates(x=12, y=30))
        assert str(artifact) == "Tablet (1.25 kg) @ (12,30)"
        assert artifact.title == "Tablet"
