from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from cellplot.errors import InvalidArgumentError
from cellplot.styles import CellStyle, Color


SPACE_SYMBOL = " "


@dataclass
class Screen:
    """Fixed-size cell grid indexed ``[row, column]`` with row 0 at the top."""

    width: int
    height: int
    glyphs: np.ndarray
    styles: np.ndarray

    def row_text(self, row: int) -> str:
        return "".join(self.glyphs[row].tolist())

    def plain_lines(self) -> list[str]:
        return [self.row_text(row) for row in range(self.height)]


def new_screen(width: int, height: int) -> Screen:
    if width <= 0 or height <= 0:
        raise InvalidArgumentError("screen width and height must be > 0")
    glyphs = np.full((height, width), SPACE_SYMBOL, dtype="<U1")
    styles = np.full((height, width), None, dtype=object)
    return Screen(width=width, height=height, glyphs=glyphs, styles=styles)


def clear_screen(dst: Screen) -> None:
    dst.glyphs[:, :] = SPACE_SYMBOL
    dst.styles[:, :] = None


def put_glyph(dst: Screen, x: int, y: int, glyph: str, style: CellStyle | None = None) -> None:
    if y < 0 or y >= dst.height or x < 0 or x >= dst.width:
        return
    dst.glyphs[y, x] = glyph
    dst.styles[y, x] = style


def write_text(dst: Screen, x: int, y: int, text: str, style: CellStyle | None = None) -> None:
    for i, glyph in enumerate(text):
        put_glyph(dst, x + i, y, glyph, style)


def blit(dst: Screen, src: Screen, x0: int = 0, y0: int = 0) -> None:
    y1 = min(dst.height, y0 + src.height)
    x1 = min(dst.width, x0 + src.width)
    if y0 >= y1 or x0 >= x1:
        return
    dst.glyphs[y0:y1, x0:x1] = src.glyphs[: y1 - y0, : x1 - x0]
    dst.styles[y0:y1, x0:x1] = src.styles[: y1 - y0, : x1 - x0]


def screen_to_text(src: Screen) -> str:
    rows: list[str] = []
    for y in range(src.height):
        cells: list[str] = []
        for glyph, style in zip(src.glyphs[y].tolist(), src.styles[y].tolist(), strict=True):
            cells.append(glyph if style is None else style.wrap(glyph))
        rows.append("".join(cells))
    return "\n".join(rows) + Color.RESET.value
