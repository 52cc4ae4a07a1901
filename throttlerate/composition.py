"""Composition root - the ONLY place where dependencies are wired."""

from pathlib import Path

from throttlerate.application.services import RateCatalog
from throttlerate.config import load_config
from throttlerate.infrastructure.config.yaml_loader import DEFAULT_CONFIG_PATH


def create_catalog(config_path: Path | str = DEFAULT_CONFIG_PATH) -> RateCatalog:
    """Create the rate catalog from a config file.

    Args:
        config_path: Path to config file.

    Returns:
        Catalog with every configured rate normalized.
    """
    return RateCatalog.from_config(load_config(config_path))
