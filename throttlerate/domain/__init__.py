"""Pure domain layer - no infrastructure dependencies."""

from .errors import InvalidRateConfiguration
from .values import (
    MAX_EVENTS,
    MAX_PERIOD_MS,
    MAX_VALUE,
    MIN_PERIOD_MS,
    PRECISION_MULTIPLIERS,
    PRECISION_TARGET,
    ZERO_VALUE,
    Rate,
    RateResult,
    create_rate,
)

__all__ = [
    # Values
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
    # Errors
    "InvalidRateConfiguration",
]
