"""Domain-checked error conditions for the expedition.

These are the anticipated, named failure modes of the simulation. They are
usually carried as values inside an ``Outcome`` rather than raised; when one
does escape an actor, the scenario engine reports it on its domain tier.
"""


class DomainCheckedError(Exception):
    """Base class for anticipated, recoverable expedition conditions."""


class ToolBrokenError(DomainCheckedError):
    """A tool's durability is exhausted."""

    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(f"Tool '{tool}' is broken and needs repair or replacement.")


class InsufficientSuppliesError(DomainCheckedError):
    """An operation costs more supplies than are available.

    Attributes:
        what: Name of the operation that was attempted
        requested: Units the operation needs
        available: Units held at the time of the attempt
    """

    def __init__(self, what: str, requested: int, available: int):
        self.what = what
        self.requested = requested
        self.available = available
        super().__init__(
            f"Not enough supplies for operation: {what}. "
            f"Requested {requested}, available {available}."
        )


class OperationForbiddenError(DomainCheckedError):
    """The requested operation is not permitted on this object."""
