"""Event nodes of an expedition day."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from expedition.models.outcomes import Outcome

EventAction = Callable[[], Optional[Outcome]]


@dataclass(frozen=True)
class EventNode:
    """One independently isolated unit of work in the day's chain.

    Attributes:
        title: Heading logged before the action runs
        action: Work to do; may return an Outcome to report a failure
    """

    title: str
    action: EventAction

    def __str__(self) -> str:
        return f"Event: {self.title}"
