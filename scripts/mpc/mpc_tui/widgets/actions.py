"""Action row renderer: one button per action plus a dimmed number hint."""

from __future__ import annotations

from mpc_tui.formatting import hint_text
from mpc_tui.frame import Frame
from mpc_tui.layout import column_bands
from mpc_tui.models import Element, Position
from mpc_tui.widgets import button


def render(frame: Frame, actions: list[str], active: int | None = None) -> list[Element]:
    screen = frame.screen
    bottom = screen.row + screen.height
    declared: list[Element] = []
    if not actions:
        return declared

    for index, (offset, size) in enumerate(column_bands(screen.width, len(actions))):
        x = screen.col + offset
        frame.render_cursor = Position(x + 1, bottom - 1)
        is_active = active is not None and active - 1 == index
        declared.append(button.declare(frame, actions[index], max(0, size - 2), is_active))

        frame.surface.move(bottom + 1, x + 1)
        frame.surface.draw_text(hint_text(index, size), dim=True)

    frame.surface.move(screen.origin.row, screen.origin.col)
    return declared
