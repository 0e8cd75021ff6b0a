from __future__ import annotations

from datetime import datetime, timedelta
from unittest.mock import MagicMock

from PIL import Image

from pihud.app import HudApp, create_app
from pihud.config import AppConfig, DisplayConfig, LoggingConfig, WeatherConfig
from pihud.display.window import FrameInput
from pihud.pages import Carousel, ClockPage
from pihud.rendering.surface import Surface

T0 = datetime(2024, 3, 14, 9, 5, 0)


def _app(pages, fonts, window=None, frame_path=None, clock=lambda: T0) -> HudApp:
    return HudApp(
        carousel=Carousel(pages, now=T0),
        surface=Surface(480, 320),
        fonts=fonts,
        fps=1000,
        window=window,
        frame_path=frame_path,
        clock=clock,
    )


def test_run_frame_draws_current_page(fonts) -> None:
    app = _app([ClockPage()], fonts)

    image = app.run_frame(T0)

    assert isinstance(image, Image.Image)
    assert image.size == (480, 320)
    assert image.getbbox() is not None


def test_run_frame_forwards_clicks(fonts) -> None:
    pages = [MagicMock(), MagicMock()]
    app = _app(pages, fonts)

    app.run_frame(T0 + timedelta(seconds=1), clicked=True)

    assert app.carousel.current_index == 1
    pages[1].draw.assert_called_once()
    pages[0].draw.assert_not_called()


def test_render_page_ignores_rotation(fonts) -> None:
    pages = [MagicMock(), MagicMock()]
    app = _app(pages, fonts)

    app.render_page(pages[1], T0)

    pages[1].draw.assert_called_once()
    pages[0].on_tick.assert_not_called()


def test_run_stops_when_window_requests_quit(fonts, tmp_path) -> None:
    window = MagicMock()
    window.poll.side_effect = [
        FrameInput(),
        FrameInput(clicked=True),
        FrameInput(quit_requested=True),
    ]
    pages = [MagicMock(), MagicMock()]
    frame_path = tmp_path / "frame.png"
    app = _app(pages, fonts, window=window, frame_path=frame_path)

    app.run()

    assert window.show.call_count == 2
    assert window.wait_frame.call_count == 2
    window.close.assert_called_once()
    assert app.carousel.current_index == 1
    assert frame_path.exists()


def test_create_app_wires_pages_from_config(tmp_path) -> None:
    config = AppConfig(
        weather=WeatherConfig(
            api_key="key",
            latitude=1.0,
            longitude=2.0,
            current_refresh_seconds=600,
            forecast_refresh_seconds=1800,
        ),
        display=DisplayConfig(
            width=480,
            height=320,
            fps=10,
            page_switch_seconds=20,
            click_throttle_seconds=1,
            resources_dir=str(tmp_path),
        ),
        log=LoggingConfig(level="INFO", log_dir=str(tmp_path / "logs")),
    )

    app = create_app(config, clock=lambda: T0)

    assert [type(page).__name__ for page in app.carousel.pages] == [
        "ClockPage",
        "CurrentWeatherPage",
        "ForecastPage",
    ]
    assert app.carousel.page_start_time == T0
    assert app._clock() == T0
