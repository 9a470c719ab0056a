"""Panel border renderer."""

from __future__ import annotations

from mpc_tui.frame import Frame
from mpc_tui.surfaces import Glyph


def _edge(frame: Frame, row: int, left: Glyph, right: Glyph) -> None:
    surface = frame.surface
    surface.move(row, frame.screen.col)
    surface.draw_glyph(left)
    for _ in range(frame.screen.width):
        surface.draw_glyph(Glyph.HLINE)
    surface.draw_glyph(right)


def render(frame: Frame) -> None:
    screen = frame.screen
    surface = frame.surface
    top = screen.row
    bottom = screen.row + screen.height

    _edge(frame, top, Glyph.UL_CORNER, Glyph.UR_CORNER)
    _edge(frame, bottom, Glyph.LL_CORNER, Glyph.LR_CORNER)

    for col in (screen.col, screen.col + screen.width + 1):
        for row in range(top + 1, bottom):
            surface.move(row, col)
            surface.draw_glyph(Glyph.VLINE)
