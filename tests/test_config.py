# ABOUTME: Tests for startup configuration loading.
# ABOUTME: Covers API key precedence, the missing-key failure, and optional overrides.

import pytest

from openweather_tools.config import DEFAULT_BASE_URL, load_settings, resolve_api_key
from openweather_tools.errors import ConfigurationError


class TestResolveApiKey:
    def test_first_variable_wins(self):
        assert resolve_api_key({"OPENWEATHER_API_KEY": "primary", "WEATHER_API_KEY": "fallback"}) == "primary"

    def test_falls_back_to_second_variable(self):
        """An empty first variable does not block the fallback.

        Implementation: Sets OPENWEATHER_API_KEY to blank and WEATHER_API_KEY to a value.
        Passing implies: "First non-empty wins" rather than "first defined wins".
        """
        assert resolve_api_key({"OPENWEATHER_API_KEY": "  ", "WEATHER_API_KEY": "fallback"}) == "fallback"

    def test_missing_key_is_configuration_error(self):
        with pytest.raises(ConfigurationError, match="OPENWEATHER_API_KEY or WEATHER_API_KEY"):
            resolve_api_key({})


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings({"WEATHER_API_KEY": "k"})
        assert settings.openweather_api_key == "k"
        assert settings.openweather_base_url == DEFAULT_BASE_URL
        assert settings.log_level == "INFO"
        assert settings.openrouter_api_key is None

    def test_overrides(self):
        settings = load_settings(
            {
                "OPENWEATHER_API_KEY": "k",
                "OPENWEATHER_BASE_URL": "http://localhost:8080",
                "LOG_LEVEL": "debug",
                "OPENROUTER_MODEL": "mistralai/ministral-14b-2512",
            }
        )
        assert settings.openweather_base_url == "http://localhost:8080"
        assert settings.log_level == "DEBUG"
        assert settings.openrouter_model == "mistralai/ministral-14b-2512"

    def test_missing_key_fails(self):
        with pytest.raises(ConfigurationError):
            load_settings({"LOG_LEVEL": "INFO"})
