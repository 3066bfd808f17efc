from __future__ import annotations

from dataclasses import dataclass

from cellplot.adapters.normalize import coerce_choice
from cellplot.downsample import SeriesOverflow
from cellplot.styles import Color


@dataclass(frozen=True)
class SeriesConfig:
    color: Color = Color.DEFAULT
    overflow: SeriesOverflow = SeriesOverflow.LINEAR_SCALE

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", coerce_choice(Color, self.color, label="series color"))
        object.__setattr__(self, "overflow", coerce_choice(SeriesOverflow, self.overflow, label="overflow policy"))
