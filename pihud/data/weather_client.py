"""OpenWeatherMap API client."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
import math
from typing import Any

import requests

OPENWEATHER_API_BASE = "https://api.openweathermap.org"
FORECAST_MAX_POINTS = 8


class FetchErrorKind(Enum):
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    PARSE = "parse"
    VALIDATION = "validation"


class WeatherClientError(Exception):
    """Raised when a weather request fails or returns unusable data."""

    def __init__(self, kind: FetchErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True)
class Weather:
    """Conditions at a single point in time."""

    timestamp: datetime
    icon: str
    temperature: int  # degrees Celsius
    description: str


class WeatherClient:
    """Thin wrapper around the OpenWeatherMap 2.5 API using requests."""

    def __init__(self, api_key: str, latitude: float, longitude: float) -> None:
        self._api_key = api_key
        self._latitude = latitude
        self._longitude = longitude
        self._timeout_seconds = 10

    def get_current(self) -> Weather:
        """Fetch the current conditions."""
        response_json = self._get("/data/2.5/weather")
        return _parse_weather(response_json)

    def get_forecast(self, limit: int = FORECAST_MAX_POINTS) -> list[Weather]:
        """Fetch upcoming 3-hourly predictions, oldest first."""
        response_json = self._get("/data/2.5/forecast", params={"cnt": limit})
        entries = response_json.get("list")
        if not isinstance(entries, list) or not entries:
            raise WeatherClientError(
                FetchErrorKind.VALIDATION, "Forecast response contained no predictions"
            )
        forecast = sorted((_parse_weather(entry) for entry in entries), key=lambda w: w.timestamp)
        return forecast[:limit]

    def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        url = f"{OPENWEATHER_API_BASE}{path}"
        query = {
            "lat": self._latitude,
            "lon": self._longitude,
            "units": "metric",
            "appid": self._api_key,
        }
        if params:
            query.update(params)
        try:
            response = requests.get(url, params=query, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            raise WeatherClientError(
                FetchErrorKind.TRANSPORT, f"Weather API request failed: {exc}"
            ) from exc

        if response.status_code != 200:
            body_text = response.text.strip()
            detail = f"Status {response.status_code}"
            if body_text:
                detail = f"{detail}, Body: {body_text}"
            raise WeatherClientError(
                FetchErrorKind.HTTP_STATUS, f"Weather API request failed: {detail}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise WeatherClientError(
                FetchErrorKind.PARSE, "Weather API response was not valid JSON"
            ) from exc

        if not isinstance(data, dict):
            raise WeatherClientError(
                FetchErrorKind.VALIDATION, "Weather API response must be a JSON object"
            )
        return data


def _parse_weather(entry: Any) -> Weather:
    if not isinstance(entry, dict):
        raise WeatherClientError(FetchErrorKind.VALIDATION, "Weather entry must be an object")
    try:
        conditions = entry["weather"][0]
        icon = conditions["icon"]
        description = conditions["description"]
        temperature = entry["main"]["temp"]
        timestamp = entry["dt"]
    except (KeyError, IndexError, TypeError) as exc:
        raise WeatherClientError(
            FetchErrorKind.VALIDATION, f"Weather entry is missing field: {exc}"
        ) from exc

    if not isinstance(icon, str) or not isinstance(description, str):
        raise WeatherClientError(FetchErrorKind.VALIDATION, "Weather icon and description must be strings")
    if isinstance(temperature, bool) or not isinstance(temperature, (int, float)):
        raise WeatherClientError(FetchErrorKind.VALIDATION, "Weather temperature must be a number")
    if not math.isfinite(temperature):
        raise WeatherClientError(FetchErrorKind.VALIDATION, "Weather temperature must be finite")
    if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
        raise WeatherClientError(FetchErrorKind.VALIDATION, "Weather timestamp must be a number")

    try:
        when = datetime.fromtimestamp(timestamp)
    except (OverflowError, OSError, ValueError) as exc:
        raise WeatherClientError(
            FetchErrorKind.VALIDATION, f"Weather timestamp out of range: {timestamp}"
        ) from exc

    return Weather(
        timestamp=when,
        icon=icon,
        temperature=round(temperature),
        description=description.capitalize(),
    )


__all__ = [
    "FORECAST_MAX_POINTS",
    "FetchErrorKind",
    "Weather",
    "WeatherClient",
    "WeatherClientError",
]
