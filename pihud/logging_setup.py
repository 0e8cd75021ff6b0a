"""Root logger configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from pihud.config import LoggingConfig

LOG_FORMAT = "%(asctime)s  %(levelname)-7s  %(name)s  %(message)s"
LOG_FILENAME = "pihud.log"


def setup_logging(config: LoggingConfig) -> Path:
    """Send log records to the console and to a file under `log_dir`."""
    level = getattr(logging, config.level.upper(), logging.INFO)
    log_path = Path(config.log_dir) / LOG_FILENAME
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_path, encoding="utf-8"),
        ],
        force=True,
    )
    return log_path


__all__ = ["setup_logging"]
