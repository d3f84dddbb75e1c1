# ABOUTME: Pydantic BaseModels for geocoding, current weather, forecast, and alert results.
# ABOUTME: Absent provider fields are None, never a fabricated number.

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

Units = Literal["standard", "metric", "imperial"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class GeoLocation(_Frozen):
    """Best-match location returned by the geocoding endpoint."""

    name: str
    latitude: float
    longitude: float
    country_code: str | None = None
    state: str | None = None


class CurrentConditions(_Frozen):
    """Snapshot of current weather for a resolved location."""

    location_name: str
    country_code: str | None = None
    units: Units
    temperature: float | None = None
    conditions: str = "unknown"
    humidity: float | None = None
    wind_speed: float | None = None
    wind_gust: float | None = None
    pressure: float | None = None
    cloudiness: float | None = None
    visibility_meters: float | None = None


class DailySample(_Frozen):
    """One forecast data point tagged with its calendar date. Internal to aggregation."""

    date: date
    temp_min: float | None = None
    temp_max: float | None = None
    description: str = "unknown"


class DailyForecast(_Frozen):
    """Calendar-day rollup of forecast samples."""

    date: date
    units: Units
    min_temp: float | None = None
    max_temp: float | None = None
    summary: str


class ForecastResult(_Frozen):
    location_name: str
    country_code: str | None = None
    units: Units
    days: list[DailyForecast] = []


class WeatherAlert(_Frozen):
    """One active alert. ``tags`` is a single comma-joined string, or None when there are none."""

    sender: str = "Unknown"
    event: str = "Alert"
    description: str = ""
    start: datetime | None = None
    end: datetime | None = None
    tags: str | None = None


class AlertsResult(_Frozen):
    location_name: str
    country_code: str | None = None
    alerts: list[WeatherAlert] = []
