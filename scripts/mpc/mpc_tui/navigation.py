"""Spatial focus navigation.

A navigation query filters the frame's elements against the focus cursor and
returns them ordered so that the first candidate is the new focus target.
Rows grow downward.

The Left query does not check ``focusable``, unlike the other three
directions, so non-focusable elements to the left on the same row (buttons,
titles) can take focus. Up reverses declaration order instead of sorting by
distance, which picks the last element declared above the cursor.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

from mpc_tui.models import Element, Position

logger = logging.getLogger(__name__)


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


KEY_DIRECTIONS = {
    "k": Direction.UP,
    "j": Direction.DOWN,
    "h": Direction.LEFT,
    "l": Direction.RIGHT,
}


def move_up(cursor: Position, elements: Iterable[Element]) -> list[Element]:
    found = [el for el in elements if el.position.row < cursor.row and el.focusable]
    found.reverse()
    return found


def move_down(cursor: Position, elements: Iterable[Element]) -> list[Element]:
    return [el for el in elements if el.position.row > cursor.row and el.focusable]


def move_left(cursor: Position, elements: Iterable[Element]) -> list[Element]:
    return [el for el in elements if el.position.row == cursor.row and el.position.col < cursor.col]


def move_right(cursor: Position, elements: Iterable[Element]) -> list[Element]:
    return [
        el
        for el in elements
        if el.position.row == cursor.row and el.position.col > cursor.col and el.focusable
    ]


QUERIES = {
    Direction.UP: move_up,
    Direction.DOWN: move_down,
    Direction.LEFT: move_left,
    Direction.RIGHT: move_right,
}


def candidates(direction: Direction, cursor: Position, elements: Iterable[Element]) -> list[Element]:
    return QUERIES[direction](cursor, elements)


def update_focus(cursor: Position, found: list[Element]) -> Position:
    if not found:
        return cursor
    return found[0].position


def navigate(direction: Direction, cursor: Position, elements: Iterable[Element]) -> Position:
    found = candidates(direction, cursor, elements)
    target = update_focus(cursor, found)
    logger.debug(f"navigate {direction.value}: {len(found)} candidates, focus {cursor} -> {target}")
    return target
