# ABOUTME: MCP server exposing the weather tools over stdio via FastMCP.
# ABOUTME: Builds shared dependencies once in the server lifespan and delegates each tool to the facade.

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from mcp.server.fastmcp import Context, FastMCP

from openweather_tools.config import Settings, load_settings
from openweather_tools.deps import WeatherDeps, create_deps
from openweather_tools.facade import current_weather, weather_alerts, weather_forecast

logger = logging.getLogger(__name__)

SERVER_NAME = "WeatherMcpServer"


def create_server(settings: Settings) -> FastMCP:
    """Create the FastMCP app with GetCurrentWeather, GetWeatherForecast and GetWeatherAlerts."""

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[WeatherDeps]:
        deps = create_deps(settings)
        try:
            yield deps
        finally:
            await deps.http_client.aclose()

    server = FastMCP(SERVER_NAME, lifespan=lifespan)

    @server.tool(
        name="GetCurrentWeather",
        description="Gets current weather for a specified location using OpenWeatherMap.",
    )
    async def get_current_weather(
        ctx: Context,
        city: str,
        countryCode: str | None = None,  # noqa: N803
        units: str = "metric",
    ) -> dict:
        result = await current_weather(ctx.request_context.lifespan_context, city, countryCode, units)
        return result.model_dump(mode="json")

    @server.tool(
        name="GetWeatherForecast",
        description="Gets a multi-day weather forecast (at least 3 days, at most 5) for a specified location.",
    )
    async def get_weather_forecast(
        ctx: Context,
        city: str,
        countryCode: str | None = None,  # noqa: N803
        units: str = "metric",
        days: int = 3,
    ) -> dict:
        result = await weather_forecast(ctx.request_context.lifespan_context, city, countryCode, units, days)
        return result.model_dump(mode="json")

    @server.tool(
        name="GetWeatherAlerts",
        description="Gets weather alerts/warnings for a specified location (if available).",
    )
    async def get_weather_alerts(
        ctx: Context,
        city: str,
        countryCode: str | None = None,  # noqa: N803
    ) -> dict:
        result = await weather_alerts(ctx.request_context.lifespan_context, city, countryCode)
        return result.model_dump(mode="json")

    return server


def main() -> None:
    """Console entry point: load settings, log to stderr, and serve over stdio."""
    settings = load_settings()
    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting %s", SERVER_NAME)
    create_server(settings).run(transport="stdio")


if __name__ == "__main__":
    main()
