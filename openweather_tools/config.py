# ABOUTME: Startup configuration loaded from the environment (and an optional .env file).
# ABOUTME: The only place in the package that reads process environment variables.

import os

from dotenv import load_dotenv
from pydantic import BaseModel

from openweather_tools.errors import ConfigurationError

API_KEY_ENV_VARS = ("OPENWEATHER_API_KEY", "WEATHER_API_KEY")
DEFAULT_BASE_URL = "https://api.openweathermap.org"


class Settings(BaseModel):
    """Resolved runtime settings."""

    openweather_api_key: str
    openweather_base_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"
    openrouter_api_key: str | None = None
    openrouter_model: str = "anthropic/claude-sonnet-4-5"


def resolve_api_key(environ=None) -> str:
    """Return the first non-empty API key among the recognized variables.

    Raises ConfigurationError when none of them is set.
    """
    environ = os.environ if environ is None else environ
    for name in API_KEY_ENV_VARS:
        value = (environ.get(name) or "").strip()
        if value:
            return value
    raise ConfigurationError(
        "Missing OpenWeatherMap API key. Set OPENWEATHER_API_KEY or WEATHER_API_KEY environment variable."
    )


def load_settings(environ=None, dotenv: bool = True) -> Settings:
    """Build Settings from the environment, loading .env first when asked."""
    if dotenv and environ is None:
        load_dotenv()
    environ = os.environ if environ is None else environ

    overrides = {
        "openweather_base_url": environ.get("OPENWEATHER_BASE_URL"),
        "log_level": (environ.get("LOG_LEVEL") or "").upper() or None,
        "openrouter_api_key": environ.get("OPENROUTER_API_KEY"),
        "openrouter_model": environ.get("OPENROUTER_MODEL"),
    }
    return Settings(
        openweather_api_key=resolve_api_key(environ),
        **{k: v for k, v in overrides.items() if v},
    )
