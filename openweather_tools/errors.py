# ABOUTME: Exception taxonomy for the weather tool adapter.
# ABOUTME: Raised by the service layer and re-raised unchanged by the tool facade.


class WeatherError(Exception):
    """Base class for all weather adapter errors."""


class ConfigurationError(WeatherError):
    """Required configuration (the API key) is missing. Fatal at startup."""


class InvalidUnits(WeatherError, ValueError):
    """Caller-supplied units are not one of standard, metric, imperial."""


class InvalidCity(WeatherError, ValueError):
    """Caller-supplied city name is empty."""


class LocationNotFound(WeatherError):
    """The geocoding endpoint returned no match for the query."""


class UpstreamError(WeatherError):
    """The provider answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class MalformedResponse(WeatherError):
    """The provider answered 2xx but the body lacks the expected structure."""
