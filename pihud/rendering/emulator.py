"""Headless frame output: writes each frame to a PNG on disk."""

from __future__ import annotations

import os
from pathlib import Path

from PIL import Image

DEFAULT_FRAME_PATH = "emulator_output/frame.png"


def save_frame(image: Image.Image, path: str | Path = DEFAULT_FRAME_PATH) -> Path:
    """Write `image` as a PNG, replacing any previous frame atomically."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    partial_path = output_path.with_name(f".{output_path.name}.partial")
    image.save(partial_path, format="PNG")
    os.replace(partial_path, output_path)
    return output_path


__all__ = ["DEFAULT_FRAME_PATH", "save_frame"]
