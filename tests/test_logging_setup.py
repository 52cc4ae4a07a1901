"""Tests for logging setup."""

import logging

import pytest

from throttlerate.logging_setup import LOG_LEVEL_ENV, setup_logging_from_env


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


class TestSetupLoggingFromEnv:
    """Tests for setup_logging_from_env."""

    def test_level_from_env(self, monkeypatch):
        """Test that the env var sets the root level."""
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        setup_logging_from_env()
        assert logging.getLogger().level == logging.DEBUG

    def test_default_level(self, monkeypatch):
        """Test that INFO is used when unset."""
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        setup_logging_from_env()
        assert logging.getLogger().level == logging.INFO

    def test_unknown_level_falls_back(self, monkeypatch):
        """Test that an unknown level falls back to INFO."""
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        setup_logging_from_env()
        assert logging.getLogger().level == logging.INFO
