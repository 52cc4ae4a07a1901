"""Rate catalog - named rates resolved from configuration."""

import logging
from collections.abc import Iterator

from throttlerate.config import RateConfig, ThrottleConfig
from throttlerate.domain import MAX_VALUE, InvalidRateConfiguration, Rate

logger = logging.getLogger(__name__)

DEFAULT_NAME = "default"


class RateCatalog:
    """Read-only lookup of normalized rates by name.

    Unknown names resolve to the default rate, which is unlimited
    unless configured otherwise.
    """

    def __init__(self, rates: dict[str, Rate] | None = None, default: Rate = MAX_VALUE) -> None:
        self._rates = dict(rates or {})
        self._default = default

    @classmethod
    def from_config(cls, config: ThrottleConfig) -> "RateCatalog":
        """Build every configured rate.

        Raises:
            InvalidRateConfiguration: If any entry can't be normalized.
        """
        rates = {name: _build(name, entry) for name, entry in config.rates.items()}
        default = _build(DEFAULT_NAME, config.default) if config.default else MAX_VALUE
        logger.info("Rate catalog loaded rates=%d", len(rates))
        return cls(rates, default)

    @property
    def default(self) -> Rate:
        return self._default

    @property
    def names(self) -> list[str]:
        """Configured rate names, sorted."""
        return sorted(self._rates)

    def get(self, name: str) -> Rate:
        """Get rate by name, or the default if not configured."""
        return self._rates.get(name, self._default)

    def items(self) -> Iterator[tuple[str, Rate]]:
        for name in self.names:
            yield name, self._rates[name]

    def __contains__(self, name: object) -> bool:
        return name in self._rates

    def __len__(self) -> int:
        return len(self._rates)


def _build(name: str, entry: RateConfig) -> Rate:
    try:
        rate = entry.to_rate()
    except InvalidRateConfiguration as e:
        raise InvalidRateConfiguration(
            e.events, e.period, e.burst, message=f"Rate '{name}': {e}"
        ) from e

    if rate.events_raw != entry.events or rate.period_raw != entry.period_ms:
        logger.info(
            "Burst adjusted rate name=%s requested=%s/%sms burst=%d normalized=%s/%sms",
            name,
            entry.events,
            entry.period_ms,
            entry.burst,
            rate.events_raw,
            rate.period_raw,
        )
    logger.debug(
        "Rate built name=%s events=%d period=%dms per_second=%.3f",
        name,
        rate.events,
        rate.period,
        rate.events_per_second,
    )
    return rate
