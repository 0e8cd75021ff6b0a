"""Rotates through pages on a timer or on click."""

from __future__ import annotations

from datetime import datetime, timedelta
import logging
from typing import Sequence

from pihud.pages.base import Page
from pihud.rendering.resources import FontCache
from pihud.rendering.surface import Surface

logger = logging.getLogger(__name__)

PAGE_SWITCH_SECONDS = 15
CLICK_THROTTLE_SECONDS = 0.5


class Carousel:
    """Shows one page at a time while keeping every page ticking.

    Non-visible pages still receive `on_tick` so their background refreshes
    keep progressing; only the current page is drawn.
    """

    def __init__(
        self,
        pages: Sequence[Page],
        now: datetime,
        page_switch_seconds: float = PAGE_SWITCH_SECONDS,
        click_throttle_seconds: float = CLICK_THROTTLE_SECONDS,
    ) -> None:
        if not pages:
            raise ValueError("Carousel requires at least one page")
        self._pages = tuple(pages)
        self._page_switch_duration = timedelta(seconds=page_switch_seconds)
        self._click_throttle_duration = timedelta(seconds=click_throttle_seconds)
        self._current_index = 0
        self._page_start_time = now
        self._last_click_time: datetime | None = None

    @property
    def pages(self) -> tuple[Page, ...]:
        return self._pages

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_page(self) -> Page:
        return self._pages[self._current_index]

    @property
    def page_start_time(self) -> datetime:
        return self._page_start_time

    @property
    def last_click_time(self) -> datetime | None:
        return self._last_click_time

    def on_tick(self, now: datetime, clicked: bool = False) -> None:
        """Advance at most once, then tick every page."""
        if now - self._page_start_time > self._page_switch_duration:
            self._advance(now)
        elif clicked and self._click_allowed(now):
            self._last_click_time = now
            self._advance(now)

        for page in self._pages:
            page.on_tick(now)

    def draw(self, surface: Surface, fonts: FontCache, now: datetime) -> None:
        self.current_page.draw(surface, fonts, now)

    def _click_allowed(self, now: datetime) -> bool:
        if self._last_click_time is None:
            return True
        return now - self._last_click_time >= self._click_throttle_duration

    def _advance(self, now: datetime) -> None:
        self._current_index = (self._current_index + 1) % len(self._pages)
        self._page_start_time = now
        logger.info("Showing page %d (%s)", self._current_index, type(self.current_page).__name__)


__all__ = ["CLICK_THROTTLE_SECONDS", "PAGE_SWITCH_SECONDS", "Carousel"]
