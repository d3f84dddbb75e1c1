# ABOUTME: Helpers for building mocked httpx.AsyncClient instances in tests.
# ABOUTME: Responses are real httpx.Response objects so status and JSON handling are exercised.

from unittest.mock import AsyncMock

import httpx

from openweather_tools.deps import WeatherDeps

GEOCODE_LONDON = [{"name": "London", "lat": 51.5073, "lon": -0.1277, "country": "GB", "state": "England"}]


def make_response(json_data=None, status_code: int = 200, text: str | None = None) -> httpx.Response:
    """Build an httpx.Response carrying JSON (or raw text) for a GET request."""
    request = httpx.Request("GET", "https://test")
    if text is not None:
        return httpx.Response(status_code=status_code, text=text, request=request)
    return httpx.Response(status_code=status_code, json=json_data, request=request)


def mock_client(*responses: httpx.Response) -> httpx.AsyncClient:
    """Create a mock httpx.AsyncClient whose successive get() calls return ``responses``."""
    mock = AsyncMock(spec=httpx.AsyncClient)
    mock.get.side_effect = list(responses)
    return mock


def mock_deps(*responses: httpx.Response) -> WeatherDeps:
    return WeatherDeps(http_client=mock_client(*responses), api_key="test-key")
