"""In-memory cell grid surface used for snapshots, JSON output, and tests."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from rich import box
from rich.text import Text

from mpc_tui.surfaces import DEFAULT_POLL_MS, HIGHLIGHT_PAIR, Glyph, TerminalSurface

GLYPHS = {
    Glyph.UL_CORNER: box.SQUARE.top_left,
    Glyph.UR_CORNER: box.SQUARE.top_right,
    Glyph.LL_CORNER: box.SQUARE.bottom_left,
    Glyph.LR_CORNER: box.SQUARE.bottom_right,
    Glyph.HLINE: box.SQUARE.top,
    Glyph.VLINE: box.SQUARE.mid_left,
}

HIGHLIGHT_STYLE = "reverse"
DIM_STYLE = "dim"


def style_for(pair: int | None, dim: bool) -> str | None:
    if pair == HIGHLIGHT_PAIR:
        return HIGHLIGHT_STYLE
    if dim:
        return DIM_STYLE
    return None


class BufferSurface(TerminalSurface):
    def __init__(self, width: int = 80, height: int = 24, keys: Iterable[str] = ()):
        self.width = width
        self.height = height
        self.keys: deque[str] = deque(keys)
        self.ops: list[tuple] = []
        self.presented = 0
        self.row = 0
        self.col = 0
        self._chars: list[list[str]] = []
        self._styles: list[list[str | None]] = []
        self._reset_grid()

    def _reset_grid(self) -> None:
        self._chars = [[" "] * self.width for _ in range(self.height)]
        self._styles = [[None] * self.width for _ in range(self.height)]

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._reset_grid()

    def push_keys(self, *keys: str) -> None:
        self.keys.extend(keys)

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def move(self, row: int, col: int) -> None:
        self.ops.append(("move", row, col))
        self.row = row
        self.col = col

    def _put(self, text: str, style: str | None) -> None:
        for char in text:
            if 0 <= self.row < self.height and 0 <= self.col < self.width:
                self._chars[self.row][self.col] = char
                self._styles[self.row][self.col] = style
            self.col += 1

    def draw_glyph(self, glyph: Glyph, pair: int | None = None) -> None:
        self.ops.append(("glyph", glyph.value, pair))
        self._put(GLYPHS[glyph], style_for(pair, False))

    def draw_text(self, text: str, pair: int | None = None, dim: bool = False) -> None:
        self.ops.append(("text", text, pair, dim))
        self._put(text, style_for(pair, dim))

    def clear(self) -> None:
        self.ops = []
        self.row = 0
        self.col = 0
        self._reset_grid()

    def present(self) -> None:
        self.presented += 1

    def poll_key(self, timeout_ms: int = DEFAULT_POLL_MS) -> str | None:
        if self.keys:
            return self.keys.popleft()
        return None

    def lines(self) -> list[str]:
        return ["".join(row) for row in self._chars]

    def style_at(self, row: int, col: int) -> str | None:
        return self._styles[row][col]

    def to_text(self) -> Text:
        text = Text(no_wrap=True, overflow="crop")
        for index, (chars, styles) in enumerate(zip(self._chars, self._styles)):
            if index:
                text.append("\n")
            for char, style in zip(chars, styles):
                text.append(char, style=style)
        return text
