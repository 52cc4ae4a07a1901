"""Tests for YAMLConfigLoader."""

import pytest

from throttlerate.infrastructure.config import YAMLConfigLoader


class TestYAMLConfigLoader:
    """Tests for YAMLConfigLoader."""

    def test_missing_file_returns_empty(self, tmp_path):
        """Test that a missing file loads as an empty dict."""
        loader = YAMLConfigLoader(tmp_path / "missing.yaml")
        assert loader.load() == {}

    def test_empty_file_returns_empty(self, write_config):
        """Test that an empty file loads as an empty dict."""
        loader = YAMLConfigLoader(write_config(""))
        assert loader.load() == {}

    def test_load_mapping(self, sample_config_path):
        """Test loading a config mapping."""
        data = YAMLConfigLoader(sample_config_path).load()

        assert data["default"] == {"events": 100, "period_ms": 1000, "burst": 10}
        assert set(data["rates"]) == {"search", "bulk", "reports"}

    def test_non_mapping_root_raises(self, write_config):
        """Test that a list document is rejected."""
        loader = YAMLConfigLoader(write_config("- 1\n- 2\n"))
        with pytest.raises(ValueError, match="must be a mapping"):
            loader.load()

    def test_reload_reads_changes(self, write_config):
        """Test that reload picks up file changes."""
        path = write_config("rates: {}\n")
        loader = YAMLConfigLoader(path)
        assert loader.load() == {"rates": {}}

        path.write_text("default: {events: 1, burst: 1}\n", encoding="utf-8")
        assert loader.reload() == {"default": {"events": 1, "burst": 1}}

    def test_path_property(self, tmp_path):
        """Test that the configured path is exposed."""
        path = tmp_path / "throttle.yaml"
        assert YAMLConfigLoader(str(path)).path == path
