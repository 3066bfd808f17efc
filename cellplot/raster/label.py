from __future__ import annotations

from dataclasses import dataclass
import math

from cellplot.raster.screen import Screen, write_text
from cellplot.styles import BackgroundColor, CellStyle, Color, LabelPosition


ELLIPSIS = "…"
MIN_LABEL_WIDTH = 4


@dataclass
class Label:
    """Single line of text stamped onto a screen, clipped to the free width."""

    text: str
    width: int
    height: int
    boundary: int = 0
    align: LabelPosition = LabelPosition.TOP
    spacing: int = 1
    foreground: Color = Color.BLACK
    background: BackgroundColor = BackgroundColor.LIGHTGRAY

    def draw(self, screen: Screen, x_offset: int, y_offset: int) -> None:
        max_width = self.width - x_offset
        if not self.text or max_width <= MIN_LABEL_WIDTH:
            return

        label = clip_label(self.text, max_width, self.boundary)
        if len(label) < max_width:
            spacing = max(0, min(self.spacing, (max_width - len(label)) // 2))
            if spacing:
                label = " " * spacing + label + " " * spacing

        if self.align & LabelPosition.LEFT:
            x = 0
        elif self.align & LabelPosition.RIGHT:
            x = self.width - len(label) - 1
        else:
            x = x_offset + math.floor(max_width / 2 - len(label) / 2 + 0.5)

        y = y_offset
        if self.align & LabelPosition.BOTTOM:
            y = self.height - 1 - y_offset

        write_text(screen, x, y, label, CellStyle(foreground=self.foreground, background=self.background))


def clip_label(text: str, max_length: int, boundary: int = 0) -> str:
    if len(text) > max_length:
        return text[: max(0, max_length - boundary - 1)] + ELLIPSIS
    return text
