"""Panel placement by terminal width."""

from __future__ import annotations

from mpc_tui.models import Screen


def center_column(terminal_width: int, panel_width: int) -> int:
    return (terminal_width - panel_width) // 2


def place_panel(screen: Screen, terminal_width: int) -> Screen:
    """Re-center ``screen`` horizontally for the current terminal width.

    The panel is pinned to the top row; only the column moves between frames.
    """
    screen.row = 0
    screen.col = max(0, center_column(terminal_width, screen.width))
    return screen


def column_bands(width: int, count: int) -> list[tuple[int, int]]:
    """Split ``width`` cells into ``count`` equal (offset, size) bands.

    The division remainder is left unused on the right edge.
    """
    if count <= 0:
        return []
    size = width // count
    return [(size * index, size) for index in range(count)]
