"""Configuration loading and validation using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, Field

from .domain import Rate
from .infrastructure.config import YAMLConfigLoader
from .infrastructure.config.yaml_loader import DEFAULT_CONFIG_PATH


class RateConfig(BaseModel):
    """One configured rate."""

    events: float = Field(ge=0, allow_inf_nan=False)
    period_ms: float = Field(default=1000.0, ge=0, allow_inf_nan=False)
    burst: int = Field(ge=0)

    def to_rate(self) -> Rate:
        """Build the normalized rate.

        Raises:
            InvalidRateConfiguration: If the burst ceiling can't be met.
        """
        return Rate(self.events, self.period_ms, self.burst)


class ThrottleConfig(BaseModel):
    """Throttle configuration."""

    default: RateConfig | None = None
    rates: dict[str, RateConfig] = Field(default_factory=dict)


def load_config(config_path: Path | str = DEFAULT_CONFIG_PATH) -> ThrottleConfig:
    """Load configuration from YAML file."""
    data = YAMLConfigLoader(config_path).load()
    return ThrottleConfig.model_validate(data)
