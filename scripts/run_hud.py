"""Run the Pi HUD in a window or headless, writing frames to disk."""

from __future__ import annotations

import argparse
from dataclasses import replace
import logging

from pihud.app import create_app
from pihud.config import load_config
from pihud.display import HudWindow
from pihud.logging_setup import setup_logging
from pihud.rendering.emulator import DEFAULT_FRAME_PATH


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default="config/config.yaml", help="Path to YAML config")
    parser.add_argument(
        "--output",
        choices=["window", "emulator", "both"],
        default="window",
        help="Frame output target",
    )
    parser.add_argument("--fullscreen", action="store_true", help="Open the window fullscreen")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )
    args = parser.parse_args()

    try:
        config = load_config(args.config)
    except ValueError as exc:
        parser.exit(2, f"config_error: {exc}\n")

    log_config = replace(config.log, level=args.log_level) if args.log_level else config.log
    log_path = setup_logging(log_config)
    logger = logging.getLogger("pihud")
    logger.info("Logging to %s", log_path)

    window = None
    if args.output in {"window", "both"}:
        window = HudWindow(config.display.width, config.display.height, fullscreen=args.fullscreen)
    frame_path = DEFAULT_FRAME_PATH if args.output in {"emulator", "both"} else None

    app = create_app(config, window=window, frame_path=frame_path)
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
