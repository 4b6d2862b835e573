"""Explicit outcome values for expedition operations.

Expected failures (a broken tool, a supply shortfall, a forecast lookup that
misses the table) are returned as ``Outcome`` values instead of being raised.
Callers branch on ``Outcome.tier``:

- DOMAIN: the carried error is a ``DomainCheckedError`` (anticipated, named)
- UNEXPECTED: any other error captured at the point of use
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from expedition.errors import DomainCheckedError


class ConditionTier(str, Enum):
    """Failure tier of an unsuccessful outcome."""

    DOMAIN = "domain"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class Outcome:
    """Result of an operation that can fail without raising.

    Attributes:
        success: Whether the operation succeeded
        value: Result payload on success (may be None)
        error: The condition that made the operation fail (None on success)
    """

    success: bool
    value: Any = None
    error: Optional[BaseException] = None

    def __post_init__(self) -> None:
        if self.success and self.error is not None:
            raise ValueError("A successful outcome cannot carry an error")
        if not self.success and self.error is None:
            raise ValueError("A failed outcome must carry an error")

    @classmethod
    def ok(cls, value: Any = None) -> Outcome:
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: BaseException) -> Outcome:
        return cls(success=False, error=error)

    @property
    def tier(self) -> Optional[ConditionTier]:
        """Failure tier, or None for a successful outcome."""
        if self.error is None:
            return None
        if isinstance(self.error, DomainCheckedError):
            return ConditionTier.DOMAIN
        return ConditionTier.UNEXPECTED

    @property
    def message(self) -> str:
        return "" if self.error is None else str(self.error)

    def raise_for_error(self) -> None:
        """Raise the carried error, if any."""
        if self.error is not None:
            raise self.error
