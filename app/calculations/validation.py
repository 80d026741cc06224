"""
Input validation for the calculators.

Every check runs before any arithmetic, so a rejected request never produces
partial results or touches a session snapshot.
"""

import math
from typing import Iterable, Optional

NON_NEGATIVE_MESSAGE = "Please enter non-negative values for all inputs."
FINITE_MESSAGE = "Please enter valid numbers for all inputs."


class ValidationError(ValueError):
    """Raised when calculator inputs are rejected. The message is user-facing."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def is_missing(value: Optional[float]) -> bool:
    """True for values that were never supplied or are not a number."""
    return value is None or math.isnan(value)


def require_finite(values: Iterable[float], message: str = FINITE_MESSAGE) -> None:
    """Reject the request if any value is NaN or infinite."""
    if not all(math.isfinite(v) for v in values):
        raise ValidationError(message)


def require_non_negative(
    values: Iterable[float], message: str = NON_NEGATIVE_MESSAGE
) -> None:
    """Reject the request if any value is non-finite or below zero."""
    values = list(values)
    require_finite(values)
    if any(v < 0 for v in values):
        raise ValidationError(message)


def safe_divide(numerator: float, denominator: float, scale: float = 1.0) -> float:
    """
    Divide, returning NaN when the denominator is exactly zero.

    NaN marks a ratio as "not computable"; it is a result, not an error.
    """
    if denominator == 0:
        return float("nan")
    return numerator / denominator * scale
