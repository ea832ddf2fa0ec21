"""Tests for configuration module."""

import os
from unittest.mock import patch

import pytest

from steam_deals.config import (
    CheapSharkConfig,
    LoggingConfig,
    Settings,
    SteamAPIConfig,
)
from steam_deals.stores import STORE_ICON_BASE_URL


class TestCheapSharkConfig:
    """Tests for CheapShark configuration."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            config = CheapSharkConfig()

        assert config.base_url == "https://www.cheapshark.com/api/1.0"
        assert config.icon_base_url == STORE_ICON_BASE_URL
        assert config.page_size == 60
        assert config.timeout_seconds == 30

    def test_page_size_bounds(self) -> None:
        """Test page_size validation bounds."""
        with patch.dict(os.environ, {"CHEAPSHARK_PAGE_SIZE": "0"}), pytest.raises(ValueError):
            CheapSharkConfig()

        with patch.dict(os.environ, {"CHEAPSHARK_PAGE_SIZE": "61"}), pytest.raises(ValueError):
            CheapSharkConfig()


class TestSteamAPIConfig:
    """Tests for Steam API configuration."""

    def test_optional_credentials(self) -> None:
        """Test that Steam credentials are optional."""
        with patch.dict(os.environ, {}, clear=True):
            config = SteamAPIConfig()

        assert config.api_key is None
        assert config.steam_id is None
        assert config.is_configured is False

    def test_configured(self) -> None:
        """Test fully configured Steam credentials."""
        with patch.dict(
            os.environ,
            {"STEAM_API_KEY": "secret_key_123", "STEAM_STEAM_ID": "76561197960287930"},
            clear=True,
        ):
            config = SteamAPIConfig()

        assert config.is_configured is True
        assert config.api_key is not None
        assert "secret_key_123" not in repr(config.api_key)
        assert config.api_key.get_secret_value() == "secret_key_123"

    def test_invalid_steam_id(self) -> None:
        """Test that malformed SteamIDs are rejected."""
        with (
            patch.dict(os.environ, {"STEAM_STEAM_ID": "gaben"}, clear=True),
            pytest.raises(ValueError, match="Invalid SteamID64"),
        ):
            SteamAPIConfig()


class TestLoggingConfig:
    """Tests for logging configuration."""

    def test_valid_levels(self) -> None:
        """Test valid log levels."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            with patch.dict(os.environ, {"LOG_LEVEL": level}):
                config = LoggingConfig()
                assert config.level == level

    def test_invalid_format(self) -> None:
        """Test that unknown formats are rejected."""
        with patch.dict(os.environ, {"LOG_FORMAT": "xml"}), pytest.raises(ValueError):
            LoggingConfig()


class TestSettings:
    """Tests for aggregated settings."""

    def test_is_production(self) -> None:
        """Test production flag."""
        with patch.dict(os.environ, {"ENVIRONMENT": "production"}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.is_production is True
        assert settings.steam.is_configured is False
