"""Widget declaration helpers."""

from __future__ import annotations

from mpc_tui.surfaces import HIGHLIGHT_PAIR, REGULAR_PAIR


def pair_for(highlighted: bool) -> int:
    return HIGHLIGHT_PAIR if highlighted else REGULAR_PAIR
