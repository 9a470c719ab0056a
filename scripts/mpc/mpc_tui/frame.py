"""Per-frame layout and focus state passed to every widget declaration."""

from __future__ import annotations

from dataclasses import dataclass, field

from mpc_tui.formatting import clip
from mpc_tui.layout import place_panel
from mpc_tui.models import Element, Position, Screen
from mpc_tui.surfaces import TerminalSurface


@dataclass
class Frame:
    """Layout state of the frame being declared.

    ``elements`` and ``render_cursor`` are rebuilt by :meth:`begin` every
    frame. ``focus`` is the only field carried over between frames.
    """

    surface: TerminalSurface
    screen: Screen
    render_cursor: Position = Position(0, 0)
    focus: Position = Position(0, 0)
    elements: list[Element] = field(default_factory=list)

    def begin(self, terminal_width: int) -> None:
        self.elements = []
        place_panel(self.screen, terminal_width)
        self.render_cursor = self.screen.interior_origin

    def advance(self, cols: int, rows: int = 0) -> Position:
        self.render_cursor = self.render_cursor + Position(cols, rows)
        return self.render_cursor

    def next_row(self) -> Position:
        self.render_cursor = Position(self.screen.col + 1, self.render_cursor.row + 1)
        return self.render_cursor

    def add(self, element: Element) -> Element:
        self.elements.append(element)
        return element

    def is_focused(self, position: Position) -> bool:
        return position == self.focus

    def focus_first(self) -> None:
        for element in self.elements:
            if element.focusable:
                self.focus = element.position
                return

    def interior_room(self, position: Position) -> int:
        """Cells left between ``position`` and the panel's right border."""
        return self.screen.col + self.screen.width + 1 - position.col

    def draw_at(self, position: Position, text: str, pair: int | None = None, dim: bool = False) -> None:
        self.surface.move(position.row, position.col)
        self.surface.draw_text(clip(text, self.interior_room(position)), pair=pair, dim=dim)
