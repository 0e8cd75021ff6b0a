"""Pygame window that shows Pillow frames and reports clicks."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from PIL import Image

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Pi HUD"
PRIMARY_BUTTON = 1


@dataclass(frozen=True)
class FrameInput:
    """Input gathered since the previous frame."""

    clicked: bool = False
    quit_requested: bool = False


class HudWindow:
    """Render RGB frames to a fixed-size window and collect input."""

    def __init__(self, width: int, height: int, fullscreen: bool = False) -> None:
        try:
            import pygame
        except ImportError as exc:
            raise RuntimeError("Window output requires 'pygame'.") from exc

        self._pygame = pygame
        self._size = (width, height)

        pygame.init()
        flags = pygame.FULLSCREEN if fullscreen else 0
        try:
            self._screen = pygame.display.set_mode(self._size, flags)
        except pygame.error as exc:
            if not fullscreen:
                raise
            logger.warning("Fullscreen unavailable, falling back to a window: %s", exc)
            self._screen = pygame.display.set_mode(self._size)
        pygame.display.set_caption(WINDOW_TITLE)
        self._clock = pygame.time.Clock()
        logger.info("Window opened: %dx%d", width, height)

    def poll(self) -> FrameInput:
        """Drain pending events into a single FrameInput."""
        pygame = self._pygame
        clicked = False
        quit_requested = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                quit_requested = True
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == PRIMARY_BUTTON:
                clicked = True
        return FrameInput(clicked=clicked, quit_requested=quit_requested)

    def show(self, image: Image.Image) -> None:
        """Blit an RGB image to the window and flip."""
        if image.size != self._size:
            raise ValueError(f"Frame size mismatch. Expected {self._size}, got {image.size}.")

        rgb = image.convert("RGB")
        frame = self._pygame.image.frombuffer(rgb.tobytes(), rgb.size, "RGB")
        self._screen.blit(frame, (0, 0))
        self._pygame.display.flip()

    def wait_frame(self, fps: int) -> None:
        """Sleep off the remainder of the frame at the target rate."""
        self._clock.tick(fps)

    def close(self) -> None:
        self._pygame.quit()


__all__ = ["FrameInput", "HudWindow"]
