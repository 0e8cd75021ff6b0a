"""Forecast page: upcoming temperatures as a line chart."""

from __future__ import annotations

from datetime import datetime
import logging

from pihud.data.cell import AutoRefreshingData
from pihud.data.weather_client import FORECAST_MAX_POINTS, Weather, WeatherClient, WeatherClientError
from pihud.logic.forecast_layout import layout_points
from pihud.pages.base import draw_loading, draw_refresh_footer
from pihud.rendering.resources import FontCache
from pihud.rendering.surface import COLOR_GRAY, COLOR_LIGHTGRAY, COLOR_RAYWHITE, Surface

logger = logging.getLogger(__name__)

TITLE_Y = 44
TITLE_FONT_SIZE = 32
TEMP_LABEL_FONT_SIZE = 24
TEMP_LABEL_OFFSET = 22
HOUR_LABEL_Y = 240
HOUR_LABEL_FONT_SIZE = 20
MARKER_RADIUS = 5
LINE_WIDTH = 3


def format_hour(dt: datetime) -> str:
    value = dt.strftime("%I%p")
    return value.lstrip("0") if value.startswith("0") else value


class ForecastPage:
    """Displays the multi-point forecast, refreshing it in the background."""

    def __init__(
        self,
        client: WeatherClient,
        refresh_seconds: float,
        max_points: int = FORECAST_MAX_POINTS,
    ) -> None:
        self._client = client
        self._max_points = max_points
        self.forecast: AutoRefreshingData[list[Weather]] = AutoRefreshingData(
            refresh_seconds, self._fetch, name="forecast"
        )

    @property
    def cells(self) -> tuple[AutoRefreshingData, ...]:
        return (self.forecast,)

    def _fetch(self) -> list[Weather]:
        try:
            forecast = self._client.get_forecast(self._max_points)
        except WeatherClientError as exc:
            logger.warning("Forecast refresh failed (%s): %s", exc.kind.value, exc)
            raise
        logger.info("Forecast: %d predictions from %s", len(forecast), forecast[0].timestamp)
        return forecast

    def on_tick(self, now: datetime) -> None:
        self.forecast.on_tick(now)

    def draw(self, surface: Surface, fonts: FontCache, now: datetime) -> None:
        forecast = self.forecast.data
        if forecast is None:
            draw_loading(surface, fonts, "Loading forecast...")
            return

        self._draw_forecast(surface, fonts, forecast[: self._max_points])
        draw_refresh_footer(surface, fonts, self.forecast)

    def _draw_forecast(self, surface: Surface, fonts: FontCache, forecast: list[Weather]) -> None:
        surface.text(
            "Forecast",
            font=fonts.main(TITLE_FONT_SIZE),
            color=COLOR_RAYWHITE,
            center=(surface.width / 2, TITLE_Y),
        )

        points = layout_points([prediction.temperature for prediction in forecast])

        # Lines first so the markers sit on top of them.
        for start, end in zip(points, points[1:]):
            surface.line((start.x, start.y), (end.x, end.y), color=COLOR_GRAY, width=LINE_WIDTH)

        temp_font = fonts.bold(TEMP_LABEL_FONT_SIZE)
        hour_font = fonts.light(HOUR_LABEL_FONT_SIZE)
        for point, prediction in zip(points, forecast):
            surface.circle((point.x, point.y), MARKER_RADIUS, color=COLOR_RAYWHITE)
            surface.text(
                f"{point.temperature}°",
                font=temp_font,
                color=COLOR_RAYWHITE,
                center=(point.x, point.y - TEMP_LABEL_OFFSET),
            )
            surface.text(
                format_hour(prediction.timestamp),
                font=hour_font,
                color=COLOR_LIGHTGRAY,
                center=(point.x, HOUR_LABEL_Y),
            )


__all__ = ["ForecastPage", "format_hour"]
