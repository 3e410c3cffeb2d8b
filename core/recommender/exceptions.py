"""Errors raised by the recommendation engine."""


class RecommendationError(Exception):
    """Base exception for recommendation failures.

    Callers catch this to fall back to a simpler, non-hybrid match.
    """
    pass


class UpstreamReadError(RecommendationError):
    """Raised when a read against the backing store fails."""

    def __init__(self, operation: str, cause: Exception = None):
        self.operation = operation
        self.cause = cause
        message = f"Store read failed during {operation}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class RecommendationTimeout(RecommendationError):
    """Raised when a recommendation request exceeds its time budget."""
    pass
