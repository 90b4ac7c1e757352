"""Exception hierarchy for weight allocation and scoring."""

from __future__ import annotations


class RankingError(Exception):
    """Base exception for all ranking errors.

    Args:
        message: Human-readable error description.
        context: Optional dict of extra context for logging/debugging.
    """

    def __init__(self, message: str = "", context: dict | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class WeightOverflowError(RankingError):
    """Raised when locked weights alone exceed the weight budget."""


class UnknownMethodError(RankingError):
    """Raised when no scoring strategy is registered for a decision method."""


class UnsupportedImpactTypeError(RankingError):
    """Raised when a strategy meets an impact type it has no formula for."""
