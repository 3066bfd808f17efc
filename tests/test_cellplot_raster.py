from __future__ import annotations

import unittest

from cellplot.errors import InvalidArgumentError
from cellplot.raster import Label, blit, clear_screen, clip_label, new_screen, put_glyph, screen_to_text, write_text
from cellplot.styles import BackgroundColor, CellStyle, Color, LabelPosition


class ScreenTests(unittest.TestCase):
    def test_new_screen_is_blank(self) -> None:
        screen = new_screen(5, 3)
        self.assertEqual(screen.plain_lines(), ["     "] * 3)
        with self.assertRaises(InvalidArgumentError):
            new_screen(0, 3)

    def test_writes_outside_the_grid_are_clipped(self) -> None:
        screen = new_screen(4, 2)
        put_glyph(screen, 4, 0, "x")
        put_glyph(screen, -1, 0, "x")
        put_glyph(screen, 0, 2, "x")
        write_text(screen, 2, 1, "abcd")
        self.assertEqual(screen.plain_lines(), ["    ", "  ab"])

    def test_clear_resets_glyphs_and_styles(self) -> None:
        screen = new_screen(3, 1)
        put_glyph(screen, 1, 0, "#", CellStyle(Color.RED))
        clear_screen(screen)
        self.assertEqual(screen.row_text(0), "   ")
        self.assertIsNone(screen.styles[0, 1])

    def test_blit_copies_at_offset_and_clips(self) -> None:
        src = new_screen(3, 2)
        write_text(src, 0, 0, "abc", CellStyle(Color.CYAN))
        write_text(src, 0, 1, "def")
        dst = new_screen(4, 3)
        blit(dst, src, 2, 1)
        self.assertEqual(dst.plain_lines(), ["    ", "  ab", "  de"])
        self.assertEqual(dst.styles[1, 2].foreground, Color.CYAN)
        self.assertEqual(src.row_text(0), "abc")

    def test_serialization_wraps_styled_cells(self) -> None:
        screen = new_screen(3, 2)
        put_glyph(screen, 0, 0, "a", CellStyle(Color.RED))
        put_glyph(screen, 1, 1, "b", CellStyle(Color.BLACK, BackgroundColor.LIGHTGRAY))
        text = screen_to_text(screen)
        self.assertEqual(
            text,
            "\x1b[31ma  \n \x1b[47m\x1b[30mb\x1b[0m \x1b[0m",
        )


class LabelTests(unittest.TestCase):
    def test_clip_label(self) -> None:
        self.assertEqual(clip_label("abcdefghij", 6), "abcde…")
        self.assertEqual(clip_label("abcdefghij", 6, boundary=1), "abcd…")
        self.assertEqual(clip_label("abc", 6), "abc")

    def test_centered_label_is_padded(self) -> None:
        screen = new_screen(20, 5)
        Label("Hello", 20, 5).draw(screen, 0, 0)
        self.assertEqual(screen.row_text(0)[7:14], " Hello ")
        self.assertEqual(screen.styles[0, 8].background, BackgroundColor.LIGHTGRAY)
        self.assertEqual(screen.styles[0, 8].foreground, Color.BLACK)

    def test_alignment_flags(self) -> None:
        screen = new_screen(20, 5)
        Label("Hello", 20, 5, align=LabelPosition.TOP_LEFT).draw(screen, 0, 0)
        self.assertEqual(screen.row_text(0)[:7], " Hello ")

        screen = new_screen(20, 5)
        Label("Hello", 20, 5, align=LabelPosition.BOTTOM_RIGHT).draw(screen, 0, 0)
        self.assertEqual(screen.row_text(4)[12:19], " Hello ")
        self.assertEqual(screen.row_text(4)[19], " ")

    def test_long_label_is_clipped_with_ellipsis(self) -> None:
        screen = new_screen(10, 2)
        Label("abcdefghijklmnopqrstuvwxyz", 10, 2, boundary=1).draw(screen, 0, 0)
        self.assertEqual(screen.row_text(0), " abcdefgh…")

    def test_narrow_or_empty_label_draws_nothing(self) -> None:
        screen = new_screen(10, 2)
        Label("Hi", 10, 2).draw(screen, 6, 0)
        Label("", 10, 2).draw(screen, 0, 0)
        self.assertEqual(screen.plain_lines(), [" " * 10] * 2)


if __name__ == "__main__":
    unittest.main()
