from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any

from cellplot.errors import InvalidArgumentError, SeriesIndexError
from cellplot.chart import Chart
from cellplot.raster import Label, Screen, blit, clear_screen, new_screen, screen_to_text
from cellplot.series import SeriesConfig
from cellplot.styles import BackgroundColor, Color, LabelPosition


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartPlacement:
    x_offset: int
    y_offset: int
    width: int
    height: int


@dataclass
class MultiChart:
    """Tiles independently rendered charts into one larger screen."""

    title: str = ""
    title_position: LabelPosition = LabelPosition.TOP
    title_foreground: Color = Color.BLACK
    title_background: BackgroundColor = BackgroundColor.LIGHTGRAY
    title_boundary: int = 1
    title_spacing: int = 1

    width: int = field(default=0, init=False)
    height: int = field(default=0, init=False)
    screen: Screen | None = field(default=None, init=False, repr=False)
    charts: list[Chart] = field(default_factory=list, init=False, repr=False)
    _placements: list[ChartPlacement] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.title_boundary < 0:
            raise InvalidArgumentError("title_boundary must be >= 0")

    def add_chart(self, x_offset: int, y_offset: int, width: int, height: int, **options: Any) -> int:
        if x_offset < 0 or y_offset < 0:
            raise InvalidArgumentError("chart offsets must be >= 0")
        chart = Chart(width=width, height=height, **options)
        self.charts.append(chart)
        self._placements.append(ChartPlacement(x_offset=x_offset, y_offset=y_offset, width=width, height=height))

        width_total = max(p.x_offset + p.width for p in self._placements)
        height_total = max(p.y_offset + p.height for p in self._placements)
        if self.title:
            height_total += self.title_boundary

        self.width = width_total
        self.height = height_total
        self.screen = new_screen(width_total, height_total)
        LOGGER.debug("multi chart resized to %dx%d for %d charts", width_total, height_total, len(self.charts))
        return len(self.charts) - 1

    def chart(self, chart_id: int) -> Chart:
        self._check_chart_id(chart_id)
        return self.charts[chart_id]

    def add_chart_series(self, chart_id: int, config: SeriesConfig | None = None, **overrides: Any) -> int:
        return self.chart(chart_id).add_series(config, **overrides)

    def add_series_entry(self, chart_id: int, series_id: int, value: Any) -> None:
        self.chart(chart_id).add_series_entry(series_id, value)

    def add_series_range(self, chart_id: int, series_id: int, values: Any) -> None:
        self.chart(chart_id).add_series_range(series_id, values)

    def render(self) -> Screen:
        if self.screen is None:
            raise InvalidArgumentError("multi chart has no charts")
        clear_screen(self.screen)

        if self.title:
            title = Label(
                self.title,
                self.width,
                self.height,
                boundary=0,
                align=self.title_position,
                spacing=self.title_spacing,
                foreground=self.title_foreground,
                background=self.title_background,
            )
            title.draw(self.screen, 0, 0)

        y_global = self.title_boundary if self.title else 0
        for chart, placement in zip(self.charts, self._placements, strict=True):
            panel = chart.render()
            blit(self.screen, panel, placement.x_offset, placement.y_offset + y_global)
        return self.screen

    def paint(self) -> str:
        return screen_to_text(self.render())

    def _check_chart_id(self, chart_id: int) -> None:
        if not 0 <= chart_id < len(self.charts):
            raise SeriesIndexError(f"wrong chart id: {chart_id}")
