"""Configuration loader for the Pi HUD app."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any

from dotenv import find_dotenv, load_dotenv
import yaml


@dataclass(frozen=True)
class WeatherConfig:
    """Weather provider configuration."""

    api_key: str
    latitude: float
    longitude: float
    current_refresh_seconds: int
    forecast_refresh_seconds: int


@dataclass(frozen=True)
class DisplayConfig:
    """Screen, frame rate and page rotation configuration."""

    width: int
    height: int
    fps: int
    page_switch_seconds: float
    click_throttle_seconds: float
    resources_dir: str


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str
    log_dir: str


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    weather: WeatherConfig
    display: DisplayConfig
    log: LoggingConfig


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise ValueError(f"Missing required key '{key}' in {context} config")
    return mapping[key]


def load_config(path: str = "config/config.yaml") -> AppConfig:
    """Load application configuration from a YAML file and the environment."""
    load_dotenv(find_dotenv(usecwd=True))
    api_key = os.environ.get("OPENWEATHER_API_KEY", "")
    if not api_key:
        raise ValueError("OPENWEATHER_API_KEY is not set")

    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    weather_section = _require_key(data, "weather", "weather")
    display_section = _require_key(data, "display", "display")
    logging_section = _require_key(data, "logging", "logging")

    if not isinstance(weather_section, dict):
        raise ValueError("'weather' config must be a mapping")
    if not isinstance(display_section, dict):
        raise ValueError("'display' config must be a mapping")
    if not isinstance(logging_section, dict):
        raise ValueError("'logging' config must be a mapping")

    weather = WeatherConfig(
        api_key=api_key,
        latitude=float(_require_key(weather_section, "latitude", "weather")),
        longitude=float(_require_key(weather_section, "longitude", "weather")),
        current_refresh_seconds=_require_key(weather_section, "current_refresh_seconds", "weather"),
        forecast_refresh_seconds=_require_key(weather_section, "forecast_refresh_seconds", "weather"),
    )

    display = DisplayConfig(
        width=_require_key(display_section, "width", "display"),
        height=_require_key(display_section, "height", "display"),
        fps=_require_key(display_section, "fps", "display"),
        page_switch_seconds=_require_key(display_section, "page_switch_seconds", "display"),
        click_throttle_seconds=_require_key(display_section, "click_throttle_seconds", "display"),
        resources_dir=display_section.get("resources_dir", "resources"),
    )

    logging = LoggingConfig(
        level=_require_key(logging_section, "level", "logging"),
        log_dir=_require_key(logging_section, "log_dir", "logging"),
    )

    return AppConfig(weather=weather, display=display, log=logging)
