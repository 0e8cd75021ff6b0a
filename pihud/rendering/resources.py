"""Load-once caches for fonts and images.

Fonts are restricted to a small family set to discourage mixing too many
faces across pages. Sizes are not restricted. Nothing is ever evicted: the
set of keys is bounded by what the pages actually request.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from PIL import Image, ImageFont

from pihud.rendering.surface import Font

logger = logging.getLogger(__name__)

FONT_MAIN = "RobotoCondensed-Regular.ttf"
FONT_LIGHT = "RobotoCondensed-Light.ttf"
FONT_BOLD = "RobotoCondensed-Bold.ttf"

FontLoader = Callable[[Path, int], Font]
ImageLoader = Callable[[Path], Image.Image]


def _load_truetype(path: Path, size: int) -> Font:
    if not path.exists():
        raise FileNotFoundError(
            f"Font file not found at {path}. "
            "Download Roboto Condensed and place the .ttf files in resources/fonts/."
        )
    return ImageFont.truetype(str(path), size)


def _load_image(path: Path) -> Image.Image:
    with Image.open(path) as image:
        return image.convert("RGBA")


class FontCache:
    """Memoise fonts by (family, size)."""

    def __init__(self, font_dir: str | Path, loader: FontLoader = _load_truetype) -> None:
        self._font_dir = Path(font_dir)
        self._loader = loader
        self._cache: dict[tuple[str, int], Font] = {}

    def main(self, size: int) -> Font:
        return self.get(FONT_MAIN, size)

    def light(self, size: int) -> Font:
        return self.get(FONT_LIGHT, size)

    def bold(self, size: int) -> Font:
        return self.get(FONT_BOLD, size)

    def get(self, family: str, size: int) -> Font:
        key = (family, size)
        if key not in self._cache:
            logger.debug("Loading font %s at %dpx", family, size)
            self._cache[key] = self._loader(self._font_dir / family, size)
        return self._cache[key]

    def __len__(self) -> int:
        return len(self._cache)


class ImageCache:
    """Memoise images by path relative to the resources directory.

    A missing file is remembered as None, so it is only reported once.
    """

    def __init__(self, resources_dir: str | Path, loader: ImageLoader = _load_image) -> None:
        self._resources_dir = Path(resources_dir)
        self._loader = loader
        self._cache: dict[str, Image.Image | None] = {}

    def get(self, path: str) -> Image.Image | None:
        if path not in self._cache:
            try:
                self._cache[path] = self._loader(self._resources_dir / path)
            except FileNotFoundError:
                logger.warning("Image not found: %s", self._resources_dir / path)
                self._cache[path] = None
        return self._cache[path]

    def __len__(self) -> int:
        return len(self._cache)


__all__ = ["FONT_BOLD", "FONT_LIGHT", "FONT_MAIN", "FontCache", "ImageCache"]
