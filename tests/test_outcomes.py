"""Unit tests for expedition.models.outcomes and expedition.errors."""

import pytest

from expedition.errors import (
    DomainCheckedError,
    InsufficientSuppliesError,
    OperationForbiddenError,
    ToolBrokenError,
)
from expedition.models.outcomes import ConditionTier, Outcome


class TestOutcome:
    """Tests for Outcome construction and tiers."""

    def test_ok_has_no_tier(self):
        outcome = Outcome.ok("clear")
        assert outcome.success
        assert outcome.value == "clear"
        assert outcome.tier is None
        assert outcome.message == ""
        outcome.raise_for_error()

    @pytest.mark.parametrize(
        "error",
        [
            ToolBrokenError("Brush"),
            InsufficientSuppliesError("Route", 2, 1),
            OperationForbiddenError("no"),
        ],
    )
    def test_domain_errors_are_domain_tier(self, error):
        assert Outcome.fail(error).tier == ConditionTier.DOMAIN

    def test_other_errors_are_unexpected_tier(self):
        outcome = Outcome.fail(IndexError("tuple index out of range"))
        assert outcome.tier == ConditionTier.UNEXPECTED
        assert outcome.message == "tuple index out of range"

    def test_raise_for_error_reraises(self):
        with pytest.raises(ToolBrokenError):
            Outcome.fail(ToolBrokenError("Brush")).raise_for_error()

    def test_inconsistent_outcomes_rejected(self):
        with pytest.raises(ValueError):
            Outcome(success=True, error=RuntimeError("x"))
        with pytest.raises(ValueError):
            Outcome(success=False)


class TestErrors:
    """Tests for the domain error hierarchy."""

    def test_insufficient_supplies_carries_amounts(self):
        error = InsufficientSuppliesError("Field trip", requested=2, available=1)
        assert isinstance(error, DomainCheckedError)
        assert error.requested == 2
        assert error.available == 1
        assert "Requested 2, available 1" in str(error)

    def test_tool_broken_names_tool(self):
        error = ToolBrokenError("Brush #5")
        assert error.tool == "Brush #5"
        assert "Brush #5" in str(error)
