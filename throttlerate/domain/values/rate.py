"""Rate value object.

A rate is a number of events per period of time in milliseconds. The burst
ceiling given at construction is folded into the stored events/period pair,
so a rate never reports more simultaneous events than its burst allows,
except where a sub-millisecond period is clamped to one millisecond.
The smallest period a rate can hold after burst adjustment is one millisecond.
"""

import math
from dataclasses import dataclass
from typing import ClassVar

from ..errors import InvalidRateConfiguration

# Business rules
PRECISION_TARGET = 0.95
PRECISION_MULTIPLIERS = (1, 10, 100)
MIN_PERIOD_MS = 1
MAX_EVENTS = 2**31 - 1
MAX_PERIOD_MS = 2**63 - 1


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounded up.

    Saturates at ``MAX_PERIOD_MS``.
    """
    if value >= MAX_PERIOD_MS:
        return MAX_PERIOD_MS
    whole = math.floor(value)
    return whole + (value - whole >= 0.5)


def _saturating_events(value: float) -> int:
    """Truncate to an integer event count, saturating at ``MAX_EVENTS``."""
    if value >= MAX_EVENTS:
        return MAX_EVENTS
    return int(value)


@dataclass(frozen=True, slots=True, init=False)
class Rate:
    """Immutable events-per-period rate (value object).

    ``events_raw`` and ``period_raw`` keep full precision. ``events`` and
    ``period`` are the integer counts a limiter consumes; both are scaled by
    the same precision multiplier so their ratio tracks the raw ratio.
    """

    MAX_VALUE: ClassVar["Rate"]
    ZERO_VALUE: ClassVar["Rate"]
    PRECISION_TARGET: ClassVar[float] = PRECISION_TARGET

    events_raw: float
    period_raw: float

    def __init__(self, events: float, period: float, burst: int) -> None:
        """Create a rate.

        Args:
            events: Number of events per period.
            period: Period length in milliseconds.
            burst: Maximum number of events allowed simultaneously.

        Raises:
            InvalidRateConfiguration: If an input is negative or not finite,
                or the burst ceiling cannot be met because period or burst
                is zero.
        """
        for name, value in (("events", events), ("period", period), ("burst", burst)):
            if isinstance(value, float) and not math.isfinite(value):
                problem = "must be finite"
            elif value < 0:
                problem = "must not be negative"
            else:
                continue
            raise InvalidRateConfiguration(
                events,
                period,
                burst,
                message=(
                    f"Rate {name} {problem}: {events} events per {period} ms "
                    f"with {burst} burst events"
                ),
            )

        if burst < events:
            if period == 0 or burst == 0:
                raise InvalidRateConfiguration(events, period, burst)

            new_period = period * burst / events
            if math.isinf(new_period):
                new_period = period * (burst / events)
            # Sub-millisecond windows can't be timed; hand out more events per ms instead
            if new_period < MIN_PERIOD_MS:
                scaled = burst * (1 / new_period) if new_period else math.inf
                burst = _saturating_events(scaled)
                new_period = MIN_PERIOD_MS

            events, period = burst, new_period

        object.__setattr__(self, "events_raw", float(events))
        object.__setattr__(self, "period_raw", float(period))

    @property
    def precision_multiplier(self) -> int:
        """Smallest multiplier keeping truncated events above the precision target.

        The search is bounded to ``PRECISION_MULTIPLIERS``; the largest one is
        used when none of them is precise enough.
        """
        for multiplier in PRECISION_MULTIPLIERS:
            candidate = self.events_raw * multiplier
            # 0/0 never meets the target
            if candidate and int(candidate) / candidate > PRECISION_TARGET:
                return multiplier
        return PRECISION_MULTIPLIERS[-1]

    @property
    def events(self) -> int:
        """Events per period, scaled by the precision multiplier and truncated.

        Saturates at ``MAX_EVENTS``.
        """
        return _saturating_events(self.events_raw * self.precision_multiplier)

    @property
    def period(self) -> int:
        """Period in milliseconds, scaled by the precision multiplier and rounded."""
        return _round_half_up(self.period_raw * self.precision_multiplier)

    @property
    def events_per_second(self) -> float:
        """Throughput in events per second."""
        if self.events_raw == 0:
            return 0.0
        if self.period_raw == 0:
            return math.inf
        return self.events_raw * 1000 / self.period_raw


MAX_VALUE = Rate(MAX_EVENTS, MIN_PERIOD_MS, MAX_EVENTS)
ZERO_VALUE = Rate(0, MIN_PERIOD_MS, 1)

Rate.MAX_VALUE = MAX_VALUE
Rate.ZERO_VALUE = ZERO_VALUE
