# ABOUTME: Tool facade shared by the pydantic-ai agent and the MCP server.
# ABOUTME: Applies caller-facing defaults, delegates to the service layer, and logs failures before re-raising.

import logging

from openweather_tools.deps import WeatherDeps
from openweather_tools.forecast import MAX_DAYS
from openweather_tools.models import AlertsResult, CurrentConditions, ForecastResult
from openweather_tools.weather_service import get_alerts, get_current_weather, get_forecast

logger = logging.getLogger(__name__)

DEFAULT_UNITS = "metric"
DEFAULT_FORECAST_DAYS = 3
MIN_TOOL_FORECAST_DAYS = 3


def normalize_forecast_days(days: int) -> int:
    """Raise the requested day count to at least 3, then cap it at 5.

    The floor applies to tool callers only; the service keeps its own 1-5 clamp.
    """
    return min(max(days, MIN_TOOL_FORECAST_DAYS), MAX_DAYS)


async def current_weather(
    deps: WeatherDeps,
    city: str,
    country_code: str | None = None,
    units: str = DEFAULT_UNITS,
) -> CurrentConditions:
    try:
        return await get_current_weather(deps.http_client, deps.api_key, city, country_code, units)
    except Exception:
        logger.exception("Error getting current weather for %s %s", city, country_code)
        raise


async def weather_forecast(
    deps: WeatherDeps,
    city: str,
    country_code: str | None = None,
    units: str = DEFAULT_UNITS,
    days: int = DEFAULT_FORECAST_DAYS,
) -> ForecastResult:
    try:
        return await get_forecast(
            deps.http_client, deps.api_key, city, country_code, units, normalize_forecast_days(days)
        )
    except Exception:
        logger.exception("Error getting forecast for %s %s", city, country_code)
        raise


async def weather_alerts(deps: WeatherDeps, city: str, country_code: str | None = None) -> AlertsResult:
    try:
        return await get_alerts(deps.http_client, deps.api_key, city, country_code)
    except Exception:
        logger.exception("Error getting alerts for %s %s", city, country_code)
        raise
