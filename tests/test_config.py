"""Tests for configuration module."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from recast.config import Settings, get_settings


def test_settings_defaults():
    """Test that settings use sensible defaults."""
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings(_env_file=None)

        assert settings.host == "0.0.0.0"
        assert settings.port == 8080
        assert settings.fetch_timeout_seconds == 15.0
        assert settings.fetch_deadline_seconds == 60.0
        assert settings.max_feed_bytes == 10 * 1024 * 1024
        assert settings.follow_redirects is True
        assert settings.user_agent.startswith("recast/")
        assert settings.log_level == "INFO"
        assert settings.env == "dev"


def test_settings_env_override():
    """Test that environment variables override defaults."""
    with patch.dict(
        os.environ,
        {
            "RECAST_PORT": "9090",
            "RECAST_FETCH_TIMEOUT_SECONDS": "2.5",
            "RECAST_MAX_FEED_BYTES": "1024",
            "RECAST_FOLLOW_REDIRECTS": "false",
            "RECAST_ENV": "prod",
        },
        clear=True,
    ):
        settings = Settings(_env_file=None)

        assert settings.port == 9090
        assert settings.fetch_timeout_seconds == 2.5
        assert settings.max_feed_bytes == 1024
        assert settings.follow_redirects is False
        assert settings.env == "prod"


@pytest.mark.parametrize(
    "env",
    [
        {"RECAST_ENV": "staging"},
        {"RECAST_LOG_LEVEL": "verbose"},
        {"RECAST_FETCH_TIMEOUT_SECONDS": "0"},
        {"RECAST_FETCH_DEADLINE_SECONDS": "-5"},
        {"RECAST_MAX_FEED_BYTES": "-1"},
    ],
)
def test_settings_validation_error(env):
    """Test that out-of-range values are rejected."""
    with patch.dict(os.environ, env, clear=True):
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


def test_get_settings_singleton():
    """Test that get_settings returns the same instance."""
    with patch.dict(os.environ, {}, clear=True):
        # Clear the singleton
        import recast.config

        recast.config._settings = None

        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2
