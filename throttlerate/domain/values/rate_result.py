"""Non-raising rate construction."""

from dataclasses import dataclass

from ..errors import InvalidRateConfiguration
from .rate import Rate


@dataclass(frozen=True, slots=True)
class RateResult:
    """Outcome of building a rate: exactly one of ``rate`` or ``error`` is set."""

    rate: Rate | None = None
    error: InvalidRateConfiguration | None = None

    def __post_init__(self) -> None:
        if (self.rate is None) == (self.error is None):
            raise ValueError("Exactly one of rate or error must be set")

    @property
    def ok(self) -> bool:
        return self.rate is not None

    def unwrap(self) -> Rate:
        """Return the rate, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.rate


def create_rate(events: float, period: float, burst: int) -> RateResult:
    """Build a rate, reporting configuration errors instead of raising them."""
    try:
        return RateResult(rate=Rate(events, period, burst))
    except InvalidRateConfiguration as e:
        return RateResult(error=e)
