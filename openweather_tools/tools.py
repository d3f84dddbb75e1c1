# ABOUTME: Agent tool definitions for weather data retrieval.
# ABOUTME: Registers current weather, forecast, and alert tools on the agent via decorators.

from pydantic_ai import RunContext

from openweather_tools.agent import agent
from openweather_tools.deps import WeatherDeps
from openweather_tools.facade import current_weather, weather_alerts, weather_forecast


@agent.tool
async def get_current_weather(
    ctx: RunContext[WeatherDeps],
    city: str,
    country_code: str | None = None,
    units: str = "metric",
) -> dict:
    """Get current weather conditions for a city.

    Args:
        ctx: Agent run context with HTTP client and API key.
        city: City name (e.g. "London").
        country_code: Optional ISO 3166 country code (e.g. "GB", "US").
        units: "metric", "imperial", or "standard".
    """
    result = await current_weather(ctx.deps, city, country_code, units)
    return result.model_dump(mode="json")


@agent.tool
async def get_weather_forecast(
    ctx: RunContext[WeatherDeps],
    city: str,
    country_code: str | None = None,
    units: str = "metric",
    days: int = 3,
) -> dict:
    """Get a multi-day forecast (at least 3 days, at most 5) for a city.

    Args:
        ctx: Agent run context with HTTP client and API key.
        city: City name (e.g. "Tokyo").
        country_code: Optional ISO 3166 country code (e.g. "JP").
        units: "metric", "imperial", or "standard".
        days: Number of days to include (3-5, default 3).
    """
    result = await weather_forecast(ctx.deps, city, country_code, units, days)
    return result.model_dump(mode="json")


@agent.tool
async def get_weather_alerts(
    ctx: RunContext[WeatherDeps],
    city: str,
    country_code: str | None = None,
) -> dict:
    """Get active weather alerts and warnings for a city, if the provider has any.

    Args:
        ctx: Agent run context with HTTP client and API key.
        city: City name (e.g. "New York").
        country_code: Optional ISO 3166 country code (e.g. "US").
    """
    result = await weather_alerts(ctx.deps, city, country_code)
    return result.model_dump(mode="json")
