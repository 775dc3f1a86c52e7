"""Domain exceptions raised by the projection and alerting services."""

from typing import Optional


class FinanceError(Exception):
    """Base class for all domain errors."""


class InvalidRate(FinanceError, ValueError):
    """An annual rate at or below -100% makes rate conversion undefined."""

    def __init__(self, rate: float, message: Optional[str] = None):
        self.rate = rate
        super().__init__(message or f"Annual rate must be greater than -100% (got {rate!r})")


class InvalidContribution(FinanceError, ValueError):
    """A non-positive contribution cannot converge on a goal."""

    def __init__(self, contribution: float):
        self.contribution = contribution
        super().__init__(
            f"Monthly contribution must be greater than zero (got {contribution!r})"
        )


class StorageFailure(FinanceError):
    """The storage layer could not persist a record.

    The original database error is chained as ``__cause__``.
    """


class NotFound(FinanceError):
    """A record does not exist or belongs to another user."""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")
