"""Input field declaration."""

from __future__ import annotations

from mpc_tui.formatting import input_label, input_value
from mpc_tui.frame import Frame
from mpc_tui.models import Element, Input, Position
from mpc_tui.widgets import pair_for


def declare(frame: Frame, label: str, value: str, width: int | None = None) -> Element:
    prefix = input_label(label)
    padded = input_value(label, value, width)
    position = frame.render_cursor
    element = Element(
        kind=Input(label, value),
        position=position,
        width=len(prefix) + len(padded),
        focusable=True,
        rendered=prefix + padded,
    )
    frame.draw_at(position, prefix)
    frame.draw_at(position + Position(len(prefix), 0), padded, pair=pair_for(frame.is_focused(position)))
    frame.advance(element.width)
    return frame.add(element)
