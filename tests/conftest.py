"""Shared test fixtures and configuration."""

import pytest

from throttlerate.domain import Rate

# ============= Domain Fixtures =============


@pytest.fixture
def unadjusted_rate():
    """Rate whose burst already covers its events."""
    return Rate(5, 1000, 10)


@pytest.fixture
def burst_adjusted_rate():
    """Rate whose period shrinks to fit the burst."""
    return Rate(100, 1000, 10)


@pytest.fixture
def fractional_rate():
    """Rate needing a precision multiplier."""
    return Rate(0.2, 1, 1)


# ============= Config Fixtures =============

SAMPLE_CONFIG = """\
default:
  events: 100
  period_ms: 1000
  burst: 10
rates:
  search:
    events: 0.2
    period_ms: 1
    burst: 1
  bulk:
    events: 1000
    period_ms: 1
    burst: 1
  reports:
    events: 5
    burst: 10
"""


@pytest.fixture
def write_config(tmp_path):
    """Write YAML text to a config file and return its path."""

    def write(text: str, name: str = "throttle.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return write


@pytest.fixture
def sample_config_path(write_config):
    """Config file with a default and three named rates."""
    return write_config(SAMPLE_CONFIG)
