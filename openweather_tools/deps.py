# ABOUTME: Dependency container shared by the tool facade and both hosts (agent and MCP).
# ABOUTME: Holds the pooled httpx.AsyncClient and the OpenWeatherMap API key.

import httpx
from pydantic import BaseModel, ConfigDict

from openweather_tools.config import Settings


class WeatherDeps(BaseModel):
    """Dependencies injected into tools via RunContext or the MCP lifespan context."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    http_client: httpx.AsyncClient
    api_key: str


def create_http_client(base_url: str) -> httpx.AsyncClient:
    """Create the shared httpx client for the provider.

    No retry transport and no timeout: a failed call surfaces immediately, and the
    caller's cancellation is the only bound on a slow one.
    """
    return httpx.AsyncClient(base_url=base_url, timeout=None)


def create_deps(settings: Settings) -> WeatherDeps:
    """Build WeatherDeps once at startup from resolved settings."""
    return WeatherDeps(
        http_client=create_http_client(settings.openweather_base_url),
        api_key=settings.openweather_api_key,
    )
