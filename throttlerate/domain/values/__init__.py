"""Domain value objects - immutable data structures."""

from .rate import (
    MAX_EVENTS,
    MAX_PERIOD_MS,
    MAX_VALUE,
    MIN_PERIOD_MS,
    PRECISION_MULTIPLIERS,
    PRECISION_TARGET,
    ZERO_VALUE,
    Rate,
)
from .rate_result import RateResult, create_rate

__all__ = [
    "Rate",
    "MAX_VALUE",
    "ZERO_VALUE",
    "MAX_EVENTS",
    "MAX_PERIOD_MS",
    "MIN_PERIOD_MS",
    "PRECISION_TARGET",
    "PRECISION_MULTIPLIERS",
    "RateResult",
    "create_rate",
]
