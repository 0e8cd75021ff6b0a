"""Chart layout for the forecast page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

CONTENT_LEFT = 40
CONTENT_WIDTH = 400

# Warmer temperatures are drawn higher on screen.
Y_WARMEST = 110
Y_COLDEST = 210
Y_FLAT = (Y_WARMEST + Y_COLDEST) / 2

MIN_TEMPERATURE_SPREAD = 1


@dataclass(frozen=True)
class ChartPoint:
    """Screen position of a single forecast temperature."""

    x: float
    y: float
    temperature: int


def layout_points(
    temperatures: Sequence[int],
    left: float = CONTENT_LEFT,
    width: float = CONTENT_WIDTH,
    y_warmest: float = Y_WARMEST,
    y_coldest: float = Y_COLDEST,
    y_flat: float = Y_FLAT,
) -> list[ChartPoint]:
    """Place temperatures at evenly spaced column centres across `width`.

    Each y is interpolated between `y_coldest` (minimum) and `y_warmest`
    (maximum). When the spread is under one degree every point sits at
    `y_flat`.
    """
    if not temperatures:
        return []

    low = min(temperatures)
    high = max(temperatures)
    spread = high - low
    column_width = width / len(temperatures)

    points = []
    for idx, temperature in enumerate(temperatures):
        x = left + column_width * (idx + 0.5)
        if spread < MIN_TEMPERATURE_SPREAD:
            y = y_flat
        else:
            ratio = (temperature - low) / spread
            y = y_coldest + (y_warmest - y_coldest) * ratio
        points.append(ChartPoint(x=x, y=y, temperature=temperature))
    return points


__all__ = ["ChartPoint", "layout_points", "Y_COLDEST", "Y_FLAT", "Y_WARMEST"]
