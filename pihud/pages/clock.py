"""Date and time page."""

from __future__ import annotations

from datetime import datetime

from pihud.pages.base import format_clock, format_date
from pihud.rendering.resources import FontCache
from pihud.rendering.surface import COLOR_RAYWHITE, Surface

DATE_FONT_SIZE = 72
TIME_FONT_SIZE = 96


class ClockPage:
    """Displays the current date above the current time."""

    cells = ()

    def on_tick(self, now: datetime) -> None:
        pass

    def draw(self, surface: Surface, fonts: FontCache, now: datetime) -> None:
        surface.text(
            format_date(now),
            font=fonts.main(DATE_FONT_SIZE),
            color=COLOR_RAYWHITE,
            center=(surface.width / 2, surface.height / 2 - 48),
        )
        surface.text(
            format_clock(now),
            font=fonts.bold(TIME_FONT_SIZE),
            color=COLOR_RAYWHITE,
            center=(surface.width / 2, surface.height / 2 + 40),
        )


__all__ = ["ClockPage"]
