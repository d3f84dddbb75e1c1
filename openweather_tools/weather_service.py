# ABOUTME: Service layer for OpenWeatherMap API calls and response parsing.
# ABOUTME: Handles geocoding, current conditions, 5-day forecast, and One Call alerts.

import logging
from datetime import datetime, timezone

import httpx

from openweather_tools.errors import InvalidCity, InvalidUnits, LocationNotFound, MalformedResponse, UpstreamError
from openweather_tools.forecast import aggregate_forecast, as_float, clamp_days, first_description, get_path, parse_samples
from openweather_tools.models import (
    AlertsResult,
    CurrentConditions,
    ForecastResult,
    GeoLocation,
    Units,
    WeatherAlert,
)

logger = logging.getLogger(__name__)

GEOCODING_PATH = "/geo/1.0/direct"
CURRENT_PATH = "/data/2.5/weather"
FORECAST_PATH = "/data/2.5/forecast"
ONECALL_PATH = "/data/3.0/onecall"

VALID_UNITS = ("standard", "metric", "imperial")
ALERTS_EXCLUDE = "minutely,hourly,daily,current"


def validate_units(units: str) -> Units:
    """Return the canonical lowercase form of ``units`` or raise InvalidUnits."""
    normalized = (units or "").strip().lower()
    if normalized not in VALID_UNITS:
        raise InvalidUnits(f"Units must be one of: {', '.join(VALID_UNITS)} (got {units!r})")
    return normalized


def _check_status(resp: httpx.Response, what: str, message: str) -> None:
    if not resp.is_success:
        logger.warning("%s API failed: %s %s", what, resp.status_code, resp.text)
        raise UpstreamError(message, status_code=resp.status_code, body=resp.text)


def _json_body(resp: httpx.Response, message: str):
    try:
        return resp.json()
    except ValueError as e:
        raise MalformedResponse(message) from e


async def geocode(client: httpx.AsyncClient, api_key: str, city: str, country_code: str | None = None) -> GeoLocation:
    """Resolve a city (and optional ISO country code) to the provider's best match."""
    if not city or not city.strip():
        raise InvalidCity("City name must not be empty.")
    query = city.strip()
    if country_code and country_code.strip():
        query = f"{query},{country_code.strip()}"

    resp = await client.get(GEOCODING_PATH, params={"q": query, "limit": 1, "appid": api_key})
    _check_status(resp, "Geocoding", "Failed to geocode the requested location.")
    data = _json_body(resp, "Unexpected response from geocoding service.")
    if not isinstance(data, list):
        raise MalformedResponse("Unexpected response from geocoding service.")
    if not data:
        raise LocationNotFound(
            f"Location not found: {query!r}. Please provide a valid city name and optional country code."
        )

    r = data[0]
    lat, lon = as_float(get_path(r, "lat")), as_float(get_path(r, "lon"))
    if lat is None or lon is None:
        raise MalformedResponse("Geocoding result is missing coordinates.")
    name = get_path(r, "name")
    return GeoLocation(
        name=name if isinstance(name, str) and name else city.strip(),
        latitude=lat,
        longitude=lon,
        country_code=_optional_str(get_path(r, "country")),
        state=_optional_str(get_path(r, "state")),
    )


async def get_current_weather(
    client: httpx.AsyncClient,
    api_key: str,
    city: str,
    country_code: str | None,
    units: str,
) -> CurrentConditions:
    """Fetch current conditions for a city from the /weather endpoint."""
    units = validate_units(units)
    geo = await geocode(client, api_key, city, country_code)

    resp = await client.get(
        CURRENT_PATH,
        params={"lat": geo.latitude, "lon": geo.longitude, "appid": api_key, "units": units},
    )
    _check_status(resp, "Current weather", "Failed to retrieve current weather.")
    data = _json_body(resp, "Unexpected response from weather service.")
    if not isinstance(data, dict):
        raise MalformedResponse("Unexpected response from weather service.")

    return parse_current(data, geo, units)


def parse_current(data: dict, geo: GeoLocation, units: Units) -> CurrentConditions:
    """Extract a CurrentConditions snapshot from a /weather response body."""
    return CurrentConditions(
        location_name=geo.name,
        country_code=geo.country_code,
        units=units,
        temperature=as_float(get_path(data, "main", "temp")),
        conditions=first_description(data),
        humidity=as_float(get_path(data, "main", "humidity")),
        wind_speed=as_float(get_path(data, "wind", "speed")),
        wind_gust=as_float(get_path(data, "wind", "gust")),
        pressure=as_float(get_path(data, "main", "pressure")),
        cloudiness=as_float(get_path(data, "clouds", "all")),
        visibility_meters=as_float(get_path(data, "visibility")),
    )


async def get_forecast(
    client: httpx.AsyncClient,
    api_key: str,
    city: str,
    country_code: str | None,
    units: str,
    days: int,
) -> ForecastResult:
    """Fetch the 3-hourly forecast and roll it up into at most ``days`` calendar days (1-5)."""
    units = validate_units(units)
    days = clamp_days(days)
    geo = await geocode(client, api_key, city, country_code)

    resp = await client.get(
        FORECAST_PATH,
        params={"lat": geo.latitude, "lon": geo.longitude, "appid": api_key, "units": units},
    )
    _check_status(resp, "Forecast", "Failed to retrieve weather forecast.")
    data = _json_body(resp, "Unexpected response from forecast service.")
    items = get_path(data, "list")
    if not isinstance(items, list):
        raise MalformedResponse("Forecast list missing from response.")

    return ForecastResult(
        location_name=geo.name,
        country_code=geo.country_code,
        units=units,
        days=aggregate_forecast(parse_samples(items), units, days),
    )


async def get_alerts(client: httpx.AsyncClient, api_key: str, city: str, country_code: str | None = None) -> AlertsResult:
    """Fetch active alerts from One Call 3.0.

    A non-2xx answer is logged and yields an empty result, since many plans and
    regions do not offer alerts.
    """
    geo = await geocode(client, api_key, city, country_code)

    resp = await client.get(
        ONECALL_PATH,
        params={"lat": geo.latitude, "lon": geo.longitude, "appid": api_key, "exclude": ALERTS_EXCLUDE},
    )
    if not resp.is_success:
        logger.warning("Alerts API failed: %s %s", resp.status_code, resp.text)
        return AlertsResult(location_name=geo.name, country_code=geo.country_code, alerts=[])

    data = _json_body(resp, "Unexpected response from alerts service.")
    raw_alerts = get_path(data, "alerts")
    alerts = [parse_alert(a) for a in raw_alerts if isinstance(a, dict)] if isinstance(raw_alerts, list) else []
    return AlertsResult(location_name=geo.name, country_code=geo.country_code, alerts=alerts)


def parse_alert(raw: dict) -> WeatherAlert:
    """Map one One Call alert entry to a WeatherAlert, applying defaults for absent fields."""
    return WeatherAlert(
        sender=_str_or(raw.get("sender_name"), "Unknown"),
        event=_str_or(raw.get("event"), "Alert"),
        description=_str_or(raw.get("description"), ""),
        start=_from_timestamp(raw.get("start")),
        end=_from_timestamp(raw.get("end")),
        tags=join_tags(raw.get("tags")),
    )


def join_tags(tags) -> str | None:
    """Join non-blank tags with ", ". No usable tags gives None rather than an empty string."""
    if not isinstance(tags, list):
        return None
    kept = [t for t in tags if isinstance(t, str) and t.strip()]
    return ", ".join(kept) if kept else None


def _str_or(value, default: str) -> str:
    return value if isinstance(value, str) else default


def _from_timestamp(value) -> datetime | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        logger.warning("Ignoring out-of-range alert timestamp: %s", value)
        return None


def _optional_str(value) -> str | None:
    return value if isinstance(value, str) and value else None
