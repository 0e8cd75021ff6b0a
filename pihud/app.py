"""Render loop that ticks the carousel and draws one frame per iteration."""

from __future__ import annotations

from datetime import datetime
import logging
from pathlib import Path
import time
from typing import Callable

from PIL import Image

from pihud.config import AppConfig
from pihud.data.weather_client import WeatherClient
from pihud.display.window import FrameInput, HudWindow
from pihud.pages import Carousel, Page, build_pages
from pihud.rendering import FontCache, ImageCache, Surface, save_frame
from pihud.rendering.surface import COLOR_BLACK

logger = logging.getLogger(__name__)


class HudApp:
    """Drives the carousel from a single-threaded, fixed-rate loop."""

    def __init__(
        self,
        carousel: Carousel,
        surface: Surface,
        fonts: FontCache,
        fps: int,
        window: HudWindow | None = None,
        frame_path: str | Path | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._carousel = carousel
        self._surface = surface
        self._fonts = fonts
        self._fps = fps
        self._window = window
        self._frame_path = frame_path
        self._clock = clock

    @property
    def carousel(self) -> Carousel:
        return self._carousel

    def run_frame(self, now: datetime, clicked: bool = False) -> Image.Image:
        """Tick every page, then draw the current one."""
        self._carousel.on_tick(now, clicked)
        self._surface.begin_frame(COLOR_BLACK)
        self._carousel.draw(self._surface, self._fonts, now)
        return self._surface.end_frame()

    def render_page(self, page: Page, now: datetime) -> Image.Image:
        """Draw `page` regardless of which page the carousel is showing."""
        self._surface.begin_frame(COLOR_BLACK)
        page.draw(self._surface, self._fonts, now)
        return self._surface.end_frame()

    def run(self) -> None:
        """Loop until the window is closed or the process is interrupted."""
        logger.info("Starting render loop at %d fps", self._fps)
        try:
            while True:
                frame_input = self._window.poll() if self._window else FrameInput()
                if frame_input.quit_requested:
                    logger.info("Quit requested")
                    break

                image = self.run_frame(self._clock(), frame_input.clicked)
                if self._frame_path is not None:
                    save_frame(image, self._frame_path)

                if self._window is not None:
                    self._window.show(image)
                    self._window.wait_frame(self._fps)
                else:
                    time.sleep(1 / self._fps)
        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            if self._window is not None:
                self._window.close()
        logger.info("Render loop stopped")


def create_app(
    config: AppConfig,
    window: HudWindow | None = None,
    frame_path: str | Path | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> HudApp:
    """Wire the weather client, caches, pages and carousel from config."""
    display = config.display
    resources_dir = Path(display.resources_dir)

    client = WeatherClient(
        api_key=config.weather.api_key,
        latitude=config.weather.latitude,
        longitude=config.weather.longitude,
    )
    fonts = FontCache(resources_dir / "fonts")
    icons = ImageCache(resources_dir)

    carousel = Carousel(
        build_pages(client, config.weather, icons),
        now=clock(),
        page_switch_seconds=display.page_switch_seconds,
        click_throttle_seconds=display.click_throttle_seconds,
    )
    return HudApp(
        carousel=carousel,
        surface=Surface(display.width, display.height),
        fonts=fonts,
        fps=display.fps,
        window=window,
        frame_path=frame_path,
        clock=clock,
    )


__all__ = ["HudApp", "create_app"]
