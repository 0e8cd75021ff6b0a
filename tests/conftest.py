from __future__ import annotations

import time
from typing import Callable
from unittest.mock import MagicMock

from PIL import ImageFont
import pytest

from pihud.data.cell import AutoRefreshingData
from pihud.rendering.resources import FontCache
from pihud.rendering.surface import Surface


def _wait_until(predicate: Callable[[], bool], timeout: float = 2.0) -> None:
    deadline = time.time() + timeout
    while time.time() < deadline:
        if predicate():
            return
        time.sleep(0.01)
    raise AssertionError("Timed out waiting for background task")


@pytest.fixture()
def wait_for_task() -> Callable[[AutoRefreshingData], None]:
    """Block the test until the cell's in-flight task has finished or errored."""

    def _wait(cell: AutoRefreshingData) -> None:
        task = cell._task
        assert task is not None
        _wait_until(lambda: task.is_finished() or task.has_errored())

    return _wait


@pytest.fixture()
def fonts(tmp_path) -> FontCache:
    return FontCache(tmp_path, loader=lambda path, size: ImageFont.load_default())


@pytest.fixture()
def recording_surface() -> MagicMock:
    surface = MagicMock(spec=Surface)
    surface.width = 480
    surface.height = 320
    surface.text_size.return_value = (40, 30)
    return surface
