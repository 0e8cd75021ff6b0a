"""Window output and click input."""

from pihud.display.window import FrameInput, HudWindow

__all__ = ["FrameInput", "HudWindow"]
