from __future__ import annotations

import io
import unittest
from pathlib import Path
from unittest import mock
import sys

from rich.console import Console

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from mpc_tui.surfaces import HIGHLIGHT_PAIR, Glyph, create_surface  # noqa: E402
from mpc_tui.surfaces import curses_surface, rich_surface  # noqa: E402
from mpc_tui.surfaces.buffer import GLYPHS, BufferSurface  # noqa: E402


class BufferSurfaceTests(unittest.TestCase):
    def test_draw_advances_like_a_terminal(self):
        surface = BufferSurface(10, 2)
        surface.move(1, 2)
        surface.draw_text("ab")
        surface.draw_glyph(Glyph.VLINE)
        self.assertEqual(surface.lines()[1], "  ab" + GLYPHS[Glyph.VLINE] + "     ")
        self.assertEqual((surface.row, surface.col), (1, 5))

    def test_writes_outside_the_grid_are_clipped(self):
        surface = BufferSurface(4, 1)
        surface.move(0, 2)
        surface.draw_text("overflow")
        surface.move(5, -3)
        surface.draw_text("gone")
        self.assertEqual(surface.lines(), ["  ov"])

    def test_styles(self):
        surface = BufferSurface(6, 1)
        surface.move(0, 0)
        surface.draw_text("ab", pair=HIGHLIGHT_PAIR)
        surface.draw_text("cd", dim=True)
        self.assertEqual([surface.style_at(0, col) for col in range(5)], ["reverse", "reverse", "dim", "dim", None])
        text = surface.to_text()
        self.assertEqual(text.plain, "abcd  ")

    def test_clear_resets_grid_and_ops(self):
        surface = BufferSurface(4, 2)
        surface.move(0, 0)
        surface.draw_text("x")
        self.assertEqual(len(surface.ops), 2)
        surface.clear()
        self.assertEqual(surface.ops, [])
        self.assertEqual(surface.lines(), ["    ", "    "])

    def test_poll_key_drains_queue_then_reports_none(self):
        surface = BufferSurface(keys=["j"])
        surface.push_keys("q")
        self.assertEqual(surface.poll_key(), "j")
        self.assertEqual(surface.poll_key(), "q")
        self.assertIsNone(surface.poll_key())

    def test_context_manager(self):
        with BufferSurface(3, 3) as surface:
            self.assertEqual(surface.size(), (3, 3))


class CreateSurfaceTests(unittest.TestCase):
    def test_unknown_backend(self):
        with self.assertRaises(ValueError):
            create_surface("tk")


class SetupFailureTests(unittest.TestCase):
    def test_rich_setup_failure_restores_terminal_mode(self):
        saved = [0, 0, 0, 10, 0, 0, [0] * 32]
        fake_termios = mock.MagicMock()
        fake_termios.ICANON, fake_termios.ECHO = 2, 8
        fake_termios.VMIN, fake_termios.VTIME = 6, 5
        fake_termios.TCSADRAIN = 1
        fake_termios.error = OSError
        fake_termios.tcgetattr.side_effect = lambda fd: [0, 0, 0, 10, 0, 0, [0] * 32]
        fake_sys = mock.MagicMock()
        fake_sys.stdin.isatty.return_value = True
        fake_sys.stdin.fileno.return_value = 7
        fake_live = mock.MagicMock()
        fake_live.return_value.start.side_effect = RuntimeError("no alternate screen")

        surface = rich_surface.RichSurface(Console(file=io.StringIO(), width=80, height=24))
        with mock.patch.object(rich_surface, "termios", fake_termios):
            with mock.patch.object(rich_surface, "sys", fake_sys):
                with mock.patch.object(rich_surface, "Live", fake_live):
                    with self.assertRaises(RuntimeError):
                        with surface:
                            self.fail("surface body must not run")

        fake_live.return_value.stop.assert_called_once()
        self.assertEqual(fake_termios.tcsetattr.call_count, 2)
        self.assertEqual(fake_termios.tcsetattr.call_args, mock.call(7, 1, saved))
        self.assertIsNone(surface._live)
        self.assertIsNone(surface._old_settings)

    def test_curses_setup_failure_ends_curses(self):
        fake_curses = mock.MagicMock()
        fake_curses.error = type("error", (Exception,), {})
        fake_curses.has_colors.side_effect = RuntimeError("no terminfo")

        surface = curses_surface.CursesSurface()
        with mock.patch.object(curses_surface, "curses", fake_curses):
            with self.assertRaises(RuntimeError):
                surface.setup()

        fake_curses.echo.assert_called_once()
        fake_curses.endwin.assert_called_once()
        self.assertIsNone(surface.stdscr)


if __name__ == "__main__":
    unittest.main()
