"""Errors raised by the lineup and channel stores."""

from typing import Any, Optional


class LineupError(Exception):
    """Base class. Carries the failing operation and lineup id for logging."""

    def __init__(self, message: str, *, operation: str, lineup_id: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.lineup_id = lineup_id


class LineupNotFoundError(LineupError):
    def __init__(self, lineup_id: Optional[int], *, operation: str, message: Optional[str] = None):
        super().__init__(
            message or f"Lineup {lineup_id} not found",
            operation=operation,
            lineup_id=lineup_id,
        )


class LineupValidationError(LineupError):
    """Input rejected before it reached the database."""

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        lineup_id: Optional[int] = None,
        errors: Optional[list[dict[str, Any]]] = None,
    ):
        super().__init__(message, operation=operation, lineup_id=lineup_id)
        self.errors = errors or []


class StorageError(LineupError):
    """Connectivity, constraint violation or any other database failure."""


class CollaboratorError(LineupError):
    """The channel store failed while hydrating a lineup."""
