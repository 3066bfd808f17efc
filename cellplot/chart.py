from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
import logging
import math
from typing import Any

import numpy as np

from cellplot.adapters.normalize import coerce_choice, coerce_value, coerce_values
from cellplot.aggregation import Aggregation, AggregationFn, default_aggregation, resolve_aggregation
from cellplot.axis import Axis
from cellplot.downsample import resample_overflow, zoom_window
from cellplot.errors import InvalidArgumentError, SeriesIndexError
from cellplot.raster import Label, Screen, clear_screen, new_screen, put_glyph, screen_to_text, write_text
from cellplot.scales import AxisScale, format_label, global_limits
from cellplot.series import SeriesConfig
from cellplot.styles import BackgroundColor, CellStyle, Color, LabelPosition


LOGGER = logging.getLogger(__name__)

AXIS_SYMBOL = "┼"
AXIS_STYLE = CellStyle(foreground=Color.DEFAULT)


class LineState(IntEnum):
    STRAIGHT = 0
    ASCENDING = 1
    DESCENDING = 2


# Indexed by LineState.
HORIZONTAL_GLYPHS = ("─", "╯", "╮")
VERTICAL_GLYPHS = ("│", "╭", "╰")


@dataclass
class Chart:
    width: int = 80
    height: int = 10
    show_axis: bool = True
    axis_scale: AxisScale = AxisScale.LINEAR
    aggregation: Aggregation | AggregationFn | None = None
    horizontal_boundary: int = 0
    vertical_boundary: int | None = None
    axis_label_fraction: int = 2
    zoom: bool = False
    title: str = ""
    title_position: LabelPosition = LabelPosition.TOP
    title_foreground: Color = Color.BLACK
    title_background: BackgroundColor = BackgroundColor.LIGHTGRAY
    title_spacing: int = 1

    screen: Screen = field(init=False, repr=False)
    _series: list[list[float]] = field(default_factory=list, init=False, repr=False)
    _configs: list[SeriesConfig] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 1:
            raise InvalidArgumentError("width must be >= 1")
        if self.height < 2:
            raise InvalidArgumentError("height must be >= 2")
        if self.horizontal_boundary < 0:
            raise InvalidArgumentError("horizontal_boundary must be >= 0")
        if self.axis_label_fraction < 0:
            raise InvalidArgumentError("axis_label_fraction must be >= 0")

        self.axis_scale = coerce_choice(AxisScale, self.axis_scale, label="axis scale")
        self.title_position = coerce_choice(LabelPosition, self.title_position, label="title position")
        self.title_foreground = coerce_choice(Color, self.title_foreground, label="title foreground")
        self.title_background = coerce_choice(BackgroundColor, self.title_background, label="title background")
        if self.aggregation is None:
            self.aggregation = default_aggregation(self.axis_scale)
        elif not callable(self.aggregation):
            self.aggregation = coerce_choice(Aggregation, self.aggregation, label="aggregation")

        if self.vertical_boundary is None:
            self.vertical_boundary = 1 if self.title else 0
        if self.vertical_boundary < 0:
            raise InvalidArgumentError("vertical_boundary must be >= 0")

        self.screen = new_screen(self.width, self.height)

    @property
    def series_count(self) -> int:
        return len(self._series)

    def add_series(self, config: SeriesConfig | None = None, **overrides: Any) -> int:
        if config is None:
            config = SeriesConfig(**overrides)
        elif overrides:
            config = replace(config, **overrides)
        self._series.append([])
        self._configs.append(config)
        return len(self._series) - 1

    def configure_series(self, series_id: int, config: SeriesConfig) -> "Chart":
        self._check_series_id(series_id)
        self._configs[series_id] = config
        return self

    def series_config(self, series_id: int) -> SeriesConfig:
        self._check_series_id(series_id)
        return self._configs[series_id]

    def series_values(self, series_id: int) -> np.ndarray:
        self._check_series_id(series_id)
        return np.asarray(self._series[series_id], dtype=np.float64)

    def add_series_entry(self, series_id: int, value: Any) -> None:
        self._check_series_id(series_id)
        self._series[series_id].append(coerce_value(value))

    def add_series_range(self, series_id: int, values: Any) -> None:
        self._check_series_id(series_id)
        self._series[series_id].extend(coerce_values(values).tolist())

    def render(self) -> Screen:
        clear_screen(self.screen)

        size = max(2, self.height - self.vertical_boundary * 2)
        vmin, vmax = global_limits(self._series)
        axis = Axis(vmin, vmax, size, self.axis_scale)

        y_offset = (self.height - size) // 2
        x_offset = 0
        if self.show_axis:
            x_offset = self._draw_axis(axis, y_offset) + 2

        max_length = self.width - x_offset - self.horizontal_boundary * 2 + 1
        aggregation = resolve_aggregation(self.aggregation)
        for series_id, values in enumerate(self._series):
            if len(values) <= 1:
                continue
            if max_length < 2:
                LOGGER.debug("series %d skipped: plot area has %d columns", series_id, max_length)
                continue

            config = self._configs[series_id]
            data = np.asarray(values, dtype=np.float64)
            if self.zoom:
                data = zoom_window(data, max_length)
            data = resample_overflow(data, config.overflow, max_length, aggregation)
            self._draw_series(
                series_id,
                data,
                axis,
                x=x_offset + self.horizontal_boundary,
                y_offset=y_offset,
                style=CellStyle(foreground=config.color),
            )

        title = Label(
            self.title,
            self.width,
            self.height,
            boundary=self.horizontal_boundary,
            align=self.title_position,
            spacing=self.title_spacing,
            foreground=self.title_foreground,
            background=self.title_background,
        )
        title.draw(self.screen, x_offset, 0)
        return self.screen

    def paint(self) -> str:
        self.render()
        return screen_to_text(self.screen)

    def _draw_axis(self, axis: Axis, y_offset: int) -> int:
        labels = axis.labels
        digits = self.axis_label_fraction
        label_width = max(len(f"{abs(labels[0]):.{digits}f}"), len(f"{abs(labels[-1]):.{digits}f}")) + 1

        for row in range(self.height):
            put_glyph(self.screen, label_width + 1, row, AXIS_SYMBOL, AXIS_STYLE)

        for index, value in enumerate(labels.tolist()):
            row = y_offset + axis.size - 1 - index
            text = format_label(value, digits).rjust(label_width)
            write_text(self.screen, 0, row, text, AXIS_STYLE)

        return label_width

    def _draw_series(
        self,
        series_id: int,
        data: np.ndarray,
        axis: Axis,
        *,
        x: int,
        y_offset: int,
        style: CellStyle,
    ) -> None:
        if not math.isfinite(data[0]):
            LOGGER.debug("series %d not drawn: first sample is not finite", series_id)
            return

        last_state = LineState.STRAIGHT
        last_y = y_offset + axis.get_position(data[0])
        for j in range(1, data.size):
            value = float(data[j])
            if not math.isfinite(value):
                LOGGER.debug("series %d stopped at non-finite sample %d", series_id, j)
                break

            y = y_offset + axis.get_position(value)
            if y == last_y:
                state = LineState.STRAIGHT
            elif y < last_y:
                state = LineState.ASCENDING
            else:
                state = LineState.DESCENDING

            if last_state is LineState.STRAIGHT:
                put_glyph(self.screen, x, last_y, HORIZONTAL_GLYPHS[last_state], style)
                x += 1
                put_glyph(self.screen, x, last_y, HORIZONTAL_GLYPHS[state], style)
            else:
                put_glyph(self.screen, x, last_y, VERTICAL_GLYPHS[last_state], style)
                x += 1
                if state is LineState.STRAIGHT:
                    put_glyph(self.screen, x, y, HORIZONTAL_GLYPHS[state], style)
                else:
                    put_glyph(self.screen, x, last_y, HORIZONTAL_GLYPHS[state], style)
                    put_glyph(self.screen, x, y, VERTICAL_GLYPHS[state], style)

            if y != last_y:
                self._fill_vertical(x, min(y, last_y) + 1, max(y, last_y) - 1, style)

            last_y = y
            last_state = state

        # The corner closing a rise or fall is otherwise only written by the next step.
        if last_state is not LineState.STRAIGHT:
            put_glyph(self.screen, x, last_y, VERTICAL_GLYPHS[last_state], style)

    def _fill_vertical(self, x: int, from_y: int, to_y: int, style: CellStyle) -> None:
        for y in range(from_y, to_y + 1):
            put_glyph(self.screen, x, y, VERTICAL_GLYPHS[LineState.STRAIGHT], style)

    def _check_series_id(self, series_id: int) -> None:
        if not 0 <= series_id < len(self._series):
            raise SeriesIndexError(f"wrong series index: {series_id}")
