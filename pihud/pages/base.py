"""Shared page interface and the helpers weather pages draw with."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from pihud.data.cell import AutoRefreshingData, RefreshStatus
from pihud.rendering.resources import FontCache
from pihud.rendering.surface import COLOR_LIGHTGRAY, COLOR_RAYWHITE, COLOR_RED, Surface

FOOTER_OFFSET = 48
FOOTER_FONT_SIZE = 24
LOADING_FONT_SIZE = 48


class Page(Protocol):
    """One screen in the carousel rotation."""

    @property
    def cells(self) -> tuple[AutoRefreshingData, ...]: ...

    def on_tick(self, now: datetime) -> None: ...

    def draw(self, surface: Surface, fonts: FontCache, now: datetime) -> None: ...


def format_clock(dt: datetime) -> str:
    value = dt.strftime("%I:%M")
    return value.lstrip("0") if value.startswith("0") else value


def format_date(dt: datetime) -> str:
    return f"{dt:%a} {dt.month}/{dt:%d}"


def draw_loading(surface: Surface, fonts: FontCache, message: str) -> None:
    surface.text(
        message,
        font=fonts.main(LOADING_FONT_SIZE),
        color=COLOR_RAYWHITE,
        center=(surface.width / 2, surface.height / 2),
    )


def draw_refresh_footer(surface: Surface, fonts: FontCache, cell: AutoRefreshingData) -> None:
    """Show when the data was refreshed, or that the last refresh failed."""
    if cell.status is RefreshStatus.LOADED:
        text = f"Last refreshed at {format_clock(cell.last_refresh_time)}"
        color = COLOR_LIGHTGRAY
    elif cell.status is RefreshStatus.ERROR:
        text = "Last refresh failed"
        color = COLOR_RED
    else:
        return

    surface.text(
        text,
        font=fonts.light(FOOTER_FONT_SIZE),
        color=color,
        center=(surface.width / 2, surface.height - FOOTER_OFFSET),
    )


__all__ = ["Page", "draw_loading", "draw_refresh_footer", "format_clock", "format_date"]
