"""Pillow-backed drawing surface for composing HUD frames."""

from __future__ import annotations

from PIL import Image, ImageDraw, ImageFont

Color = tuple[int, int, int]
Point = tuple[float, float]
Font = ImageFont.FreeTypeFont | ImageFont.ImageFont

COLOR_BLACK = (0, 0, 0)
COLOR_WHITE = (255, 255, 255)
COLOR_RAYWHITE = (245, 245, 245)
COLOR_LIGHTGRAY = (200, 200, 200)
COLOR_GRAY = (130, 130, 130)
COLOR_RED = (230, 41, 55)


class Surface:
    """Accepts primitive draw calls between `begin_frame` and `end_frame`."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._image: Image.Image | None = None
        self._draw: ImageDraw.ImageDraw | None = None

    def begin_frame(self, background: Color = COLOR_BLACK) -> None:
        self._image = Image.new("RGB", (self.width, self.height), background)
        self._draw = ImageDraw.Draw(self._image)

    def end_frame(self) -> Image.Image:
        image = self._frame()
        self._image = None
        self._draw = None
        return image

    def text_size(self, text: str, font: Font) -> tuple[int, int]:
        bbox = self._canvas().textbbox((0, 0), text, font=font)
        return bbox[2] - bbox[0], bbox[3] - bbox[1]

    def text(self, text: str, font: Font, color: Color, center: Point) -> None:
        """Draw text whose bounding box is centred on `center`."""
        draw = self._canvas()
        bbox = draw.textbbox((0, 0), text, font=font)
        x = center[0] - (bbox[0] + bbox[2]) / 2
        y = center[1] - (bbox[1] + bbox[3]) / 2
        draw.text((round(x), round(y)), text, font=font, fill=color)

    def image(self, image: Image.Image, x: int, y: int) -> None:
        """Paste `image` with its top-left corner at (x, y), honouring alpha."""
        frame = self._frame()
        mask = image if image.mode == "RGBA" else None
        frame.paste(image, (int(x), int(y)), mask)

    def line(self, start: Point, end: Point, color: Color, width: int = 1) -> None:
        self._canvas().line((start, end), fill=color, width=width)

    def circle(self, center: Point, radius: float, color: Color) -> None:
        x, y = center
        self._canvas().ellipse((x - radius, y - radius, x + radius, y + radius), fill=color)

    def _frame(self) -> Image.Image:
        if self._image is None:
            raise RuntimeError("Surface.begin_frame() must be called before drawing")
        return self._image

    def _canvas(self) -> ImageDraw.ImageDraw:
        if self._draw is None:
            raise RuntimeError("Surface.begin_frame() must be called before drawing")
        return self._draw


__all__ = [
    "COLOR_BLACK",
    "COLOR_GRAY",
    "COLOR_LIGHTGRAY",
    "COLOR_RAYWHITE",
    "COLOR_RED",
    "COLOR_WHITE",
    "Surface",
]
