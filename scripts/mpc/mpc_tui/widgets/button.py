"""Button declaration. Buttons are colored by ``active``, never by focus."""

from __future__ import annotations

from mpc_tui.formatting import button_text
from mpc_tui.frame import Frame
from mpc_tui.models import Button, Element
from mpc_tui.widgets import pair_for


def declare(frame: Frame, label: str, width: int | None = None, active: bool = False) -> Element:
    rendered = button_text(label, width)
    element = Element(
        kind=Button(label, active),
        position=frame.render_cursor,
        width=len(rendered),
        rendered=rendered,
    )
    frame.draw_at(element.position, rendered, pair=pair_for(active))
    frame.advance(element.width)
    return frame.add(element)
