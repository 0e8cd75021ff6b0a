"""Current conditions page."""

from __future__ import annotations

from datetime import datetime
import logging

from pihud.data.cell import AutoRefreshingData
from pihud.data.weather_client import Weather, WeatherClient, WeatherClientError
from pihud.pages.base import draw_loading, draw_refresh_footer
from pihud.rendering.resources import FontCache, ImageCache
from pihud.rendering.surface import COLOR_RAYWHITE, Surface

logger = logging.getLogger(__name__)

TEMP_FONT_SIZE = 96
UNIT_FONT_SIZE = 64
DESCRIPTION_FONT_SIZE = 48
TEMP_PADDING = 8


class CurrentWeatherPage:
    """Displays the current weather, refreshing it in the background."""

    def __init__(
        self,
        client: WeatherClient,
        refresh_seconds: float,
        icons: ImageCache,
    ) -> None:
        self._client = client
        self._icons = icons
        self.current_weather: AutoRefreshingData[Weather] = AutoRefreshingData(
            refresh_seconds, self._fetch, name="current weather"
        )

    @property
    def cells(self) -> tuple[AutoRefreshingData, ...]:
        return (self.current_weather,)

    def _fetch(self) -> Weather:
        try:
            weather = self._client.get_current()
        except WeatherClientError as exc:
            logger.warning("Current weather refresh failed (%s): %s", exc.kind.value, exc)
            raise
        logger.info("Current weather: %d°C, %s", weather.temperature, weather.description)
        return weather

    def on_tick(self, now: datetime) -> None:
        self.current_weather.on_tick(now)

    def draw(self, surface: Surface, fonts: FontCache, now: datetime) -> None:
        weather = self.current_weather.data
        if weather is None:
            draw_loading(surface, fonts, "Loading weather...")
            return

        self._draw_weather(surface, fonts, weather)
        draw_refresh_footer(surface, fonts, self.current_weather)

    def _draw_weather(self, surface: Surface, fonts: FontCache, weather: Weather) -> None:
        icon = self._icons.get(f"icons/{weather.icon}.png")
        if icon is not None:
            surface.image(icon, surface.width * 5 // 24, surface.height // 2 - 72)

        temp_text = str(weather.temperature)
        unit_text = "°C"
        temp_font = fonts.bold(TEMP_FONT_SIZE)
        unit_font = fonts.main(UNIT_FONT_SIZE)

        temp_w, _ = surface.text_size(temp_text, temp_font)
        unit_w, _ = surface.text_size(unit_text, unit_font)

        temp_x = surface.width * 5 // 8
        temp_y = surface.height // 2 - 48
        unit_x = temp_x + temp_w / 2 + TEMP_PADDING + unit_w / 2
        unit_y = temp_y - 8
        desc_x = temp_x - temp_w / 2 + (temp_w + TEMP_PADDING + unit_w) / 2
        desc_y = temp_y + 64

        surface.text(temp_text, font=temp_font, color=COLOR_RAYWHITE, center=(temp_x, temp_y))
        surface.text(unit_text, font=unit_font, color=COLOR_RAYWHITE, center=(unit_x, unit_y))
        surface.text(
            weather.description,
            font=fonts.light(DESCRIPTION_FONT_SIZE),
            color=COLOR_RAYWHITE,
            center=(desc_x, desc_y),
        )


__all__ = ["CurrentWeatherPage"]
