"""Exceptions raised by weather lookups.

Each carries the generic, client-safe message returned by the API; upstream
response bodies are never included.
"""


class WeatherServiceError(Exception):
    """Base class for lookup failures."""

    status_code = 500
    public_message = "Internal server error"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.public_message)


class InvalidLocationError(WeatherServiceError, ValueError):
    """Location text is empty or longer than allowed."""

    status_code = 400
    public_message = "Invalid location"


class MissingApiKeyError(WeatherServiceError):
    """No provider API key has been configured."""

    public_message = "API key not configured"


class UpstreamStatusError(WeatherServiceError):
    """Provider answered with a non-2xx status; the status is passed through."""

    public_message = "Location not found"

    def __init__(self, status_code: int, detail: str | None = None):
        super().__init__(detail)
        self.status_code = status_code


class UpstreamUnavailableError(WeatherServiceError):
    """Provider could not be reached or returned an unreadable body."""

    status_code = 502
    public_message = "Weather service unavailable"
