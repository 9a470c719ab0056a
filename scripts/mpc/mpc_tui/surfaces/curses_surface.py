"""Curses backend: ACS line glyphs, two color pairs, timeout-based polling."""

from __future__ import annotations

import curses
import logging

from mpc_tui.surfaces import DEFAULT_POLL_MS, HIGHLIGHT_PAIR, REGULAR_PAIR, Glyph, TerminalSurface

logger = logging.getLogger(__name__)

ACS_NAMES = {
    Glyph.UL_CORNER: "ACS_ULCORNER",
    Glyph.UR_CORNER: "ACS_URCORNER",
    Glyph.LL_CORNER: "ACS_LLCORNER",
    Glyph.LR_CORNER: "ACS_LRCORNER",
    Glyph.HLINE: "ACS_HLINE",
    Glyph.VLINE: "ACS_VLINE",
}


class CursesSurface(TerminalSurface):
    def __init__(self):
        self.stdscr = None
        self._colors = False

    def setup(self) -> None:
        self.stdscr = curses.initscr()
        try:
            curses.noecho()
            curses.cbreak()
            self.stdscr.keypad(True)
            try:
                curses.curs_set(0)
            except curses.error:
                logger.debug("Terminal cannot hide the cursor")
            if curses.has_colors():
                curses.start_color()
                # pair 0 is fixed to the terminal defaults
                curses.init_pair(HIGHLIGHT_PAIR, curses.COLOR_BLACK, curses.COLOR_WHITE)
                self._colors = True
        except BaseException:
            self.teardown()
            raise
        logger.debug("Curses surface started")

    def teardown(self) -> None:
        stdscr, self.stdscr = self.stdscr, None
        if stdscr is None:
            return
        try:
            stdscr.keypad(False)
            curses.nocbreak()
            curses.echo()
        finally:
            curses.endwin()
        logger.debug("Curses surface stopped")

    def _attr(self, pair: int | None, dim: bool) -> int:
        attr = curses.A_NORMAL
        if pair not in (None, REGULAR_PAIR):
            attr |= curses.color_pair(pair) if self._colors else curses.A_REVERSE
        if dim:
            attr |= curses.A_DIM
        return attr

    def size(self) -> tuple[int, int]:
        height, width = self.stdscr.getmaxyx()
        return width, height

    def move(self, row: int, col: int) -> None:
        try:
            self.stdscr.move(row, col)
        except curses.error:
            # Off-screen target; following draws are clipped by curses.
            pass

    def draw_glyph(self, glyph: Glyph, pair: int | None = None) -> None:
        try:
            self.stdscr.addch(getattr(curses, ACS_NAMES[glyph]), self._attr(pair, False))
        except curses.error:
            pass

    def draw_text(self, text: str, pair: int | None = None, dim: bool = False) -> None:
        try:
            self.stdscr.addstr(text, self._attr(pair, dim))
        except curses.error:
            # Writing into the bottom-right cell or past the edge.
            pass

    def clear(self) -> None:
        self.stdscr.erase()

    def present(self) -> None:
        self.stdscr.refresh()

    def poll_key(self, timeout_ms: int = DEFAULT_POLL_MS) -> str | None:
        self.stdscr.timeout(timeout_ms)
        key = self.stdscr.getch()
        if key == -1 or key > 255:
            return None
        return chr(key)
