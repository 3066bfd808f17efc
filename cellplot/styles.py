from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag


class Color(str, Enum):
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    LIGHTGRAY = "\x1b[37m"
    DEFAULT = "\x1b[39m"
    WHITE = "\x1b[97m"
    BLACK = "\x1b[30m"
    RESET = "\x1b[0m"


class BackgroundColor(str, Enum):
    BLACK = "\x1b[40m"
    RED = "\x1b[41m"
    GREEN = "\x1b[42m"
    YELLOW = "\x1b[43m"
    BLUE = "\x1b[44m"
    MAGENTA = "\x1b[45m"
    CYAN = "\x1b[46m"
    LIGHTGRAY = "\x1b[47m"
    DEFAULT = "\x1b[49m"


class LabelPosition(IntFlag):
    TOP = 1 << 1
    BOTTOM = 1 << 2
    LEFT = 1 << 5
    RIGHT = 1 << 6

    TOP_LEFT = TOP | LEFT
    TOP_RIGHT = TOP | RIGHT
    BOTTOM_LEFT = BOTTOM | LEFT
    BOTTOM_RIGHT = BOTTOM | RIGHT


@dataclass(frozen=True)
class CellStyle:
    foreground: Color = Color.DEFAULT
    background: BackgroundColor | None = None

    def wrap(self, glyph: str) -> str:
        if self.background is None:
            return self.foreground.value + glyph
        # Backgrounds bleed into the next cell unless reset right away.
        return self.background.value + self.foreground.value + glyph + Color.RESET.value
