from .label import Label, clip_label
from .screen import Screen, blit, clear_screen, new_screen, put_glyph, screen_to_text, write_text

__all__ = [
    "Label",
    "Screen",
    "blit",
    "clear_screen",
    "clip_label",
    "new_screen",
    "put_glyph",
    "screen_to_text",
    "write_text",
]
