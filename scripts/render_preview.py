"""Render every page once, using live weather data, to PNG files."""

from __future__ import annotations

import argparse
from datetime import datetime
from pathlib import Path
import time

from pihud.app import create_app
from pihud.config import load_config
from pihud.logging_setup import setup_logging
from pihud.rendering import save_frame


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default="config/config.yaml")
    parser.add_argument("--output-dir", default="emulator_output")
    parser.add_argument(
        "--timeout",
        type=float,
        default=15.0,
        help="Seconds to wait for weather data before rendering anyway",
    )
    args = parser.parse_args()

    config = load_config(args.config)
    setup_logging(config.log)
    app = create_app(config)
    pages = app.carousel.pages

    deadline = time.monotonic() + args.timeout
    app.run_frame(datetime.now())
    while time.monotonic() < deadline and any(
        cell.is_refreshing for page in pages for cell in page.cells
    ):
        time.sleep(0.1)
        app.run_frame(datetime.now())

    output_dir = Path(args.output_dir)
    now = datetime.now()
    for idx, page in enumerate(pages):
        path = save_frame(
            app.render_page(page, now),
            output_dir / f"page_{idx}_{type(page).__name__}.png",
        )
        print("preview_saved", str(path), flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
