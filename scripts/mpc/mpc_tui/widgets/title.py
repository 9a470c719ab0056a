"""Title declaration."""

from __future__ import annotations

from mpc_tui.formatting import title_text, trim_title
from mpc_tui.frame import Frame
from mpc_tui.models import Element, Title


def declare(frame: Frame, text: str) -> Element:
    width = frame.screen.width
    rendered = title_text(text, width)
    element = Element(
        kind=Title(trim_title(text, width)),
        position=frame.render_cursor,
        width=len(rendered),
        rendered=rendered,
    )
    frame.draw_at(element.position, rendered)
    frame.next_row()
    return frame.add(element)
