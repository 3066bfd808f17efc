from __future__ import annotations

from typing import Any

from cellplot.chart import Chart
from cellplot.downsample import SeriesOverflow
from cellplot.styles import Color


DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 10


def plot(
    data: Any,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    *,
    color: Color | str = Color.DEFAULT,
    overflow: SeriesOverflow | str = SeriesOverflow.LINEAR_SCALE,
    **options: Any,
) -> str:
    """Render a single series in one call and return the painted text."""
    chart = Chart(width=width, height=height, **options)
    series_id = chart.add_series(color=color, overflow=overflow)
    chart.add_series_range(series_id, data)
    return chart.paint()
