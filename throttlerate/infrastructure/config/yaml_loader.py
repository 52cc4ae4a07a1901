"""YAML configuration loader."""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "throttle.yaml"


class YAMLConfigLoader:
    """Load throttle configuration from YAML files."""

    def __init__(self, config_path: Path | str = DEFAULT_CONFIG_PATH) -> None:
        self._config_path = Path(config_path)

    def load(self) -> dict[str, Any]:
        """Load raw configuration data from YAML.

        Returns:
            Configuration dictionary, empty dict if file not found.

        Raises:
            ValueError: If the document is not a mapping.
        """
        if not self._config_path.exists():
            logger.debug("Config file not found path=%s", self._config_path)
            return {}

        with open(self._config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping: {self._config_path}")
        return data

    def reload(self) -> dict[str, Any]:
        """Reload configuration from file."""
        return self.load()

    @property
    def path(self) -> Path:
        """Get configuration file path."""
        return self._config_path
