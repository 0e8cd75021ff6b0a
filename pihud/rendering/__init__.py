"""Drawing surface, resource caches and frame output."""

from pihud.rendering.emulator import save_frame
from pihud.rendering.resources import FontCache, ImageCache
from pihud.rendering.surface import Surface

__all__ = ["FontCache", "ImageCache", "Surface", "save_frame"]
