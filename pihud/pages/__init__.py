"""Pages shown by the HUD and the carousel that rotates them."""

from __future__ import annotations

from pihud.config import WeatherConfig
from pihud.data.weather_client import WeatherClient
from pihud.pages.base import Page
from pihud.pages.carousel import Carousel
from pihud.pages.clock import ClockPage
from pihud.pages.forecast import ForecastPage
from pihud.pages.weather import CurrentWeatherPage
from pihud.rendering.resources import ImageCache

PageVariant = ClockPage | CurrentWeatherPage | ForecastPage


def build_pages(
    client: WeatherClient,
    weather: WeatherConfig,
    icons: ImageCache,
) -> list[PageVariant]:
    """Build the fixed page rotation, in display order."""
    return [
        ClockPage(),
        CurrentWeatherPage(client, weather.current_refresh_seconds, icons),
        ForecastPage(client, weather.forecast_refresh_seconds),
    ]


__all__ = [
    "Carousel",
    "ClockPage",
    "CurrentWeatherPage",
    "ForecastPage",
    "Page",
    "PageVariant",
    "build_pages",
]
