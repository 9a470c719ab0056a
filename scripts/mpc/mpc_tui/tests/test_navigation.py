from __future__ import annotations

import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from mpc_tui.models import Button, Element, Input, Position, Title  # noqa: E402
from mpc_tui.navigation import (  # noqa: E402
    Direction,
    candidates,
    navigate,
    update_focus,
)


def _input(col: int, row: int, label: str = "F") -> Element:
    return Element(Input(label, ""), Position(col, row), width=8, focusable=True)


def _grid() -> list[Element]:
    # row 1: title; rows 2 and 3: two inputs each; row 5: a button
    return [
        Element(Title("T"), Position(1, 1), width=20),
        _input(1, 2, "A"),
        _input(10, 2, "B"),
        _input(1, 3, "C"),
        _input(10, 3, "D"),
        Element(Button("OK"), Position(1, 5), width=6),
    ]


class CandidateTests(unittest.TestCase):
    def test_up_is_reverse_declaration_order(self):
        found = candidates(Direction.UP, Position(10, 3), _grid())
        self.assertEqual([el.kind.label for el in found], ["B", "A"])

    def test_down_is_declaration_order_and_skips_buttons(self):
        found = candidates(Direction.DOWN, Position(1, 2), _grid())
        self.assertEqual([el.kind.label for el in found], ["C", "D"])

    def test_right_same_row_only(self):
        found = candidates(Direction.RIGHT, Position(1, 2), _grid())
        self.assertEqual([el.kind.label for el in found], ["B"])

    def test_left_same_row_only(self):
        found = candidates(Direction.LEFT, Position(10, 3), _grid())
        self.assertEqual([el.kind.label for el in found], ["C"])

    def test_left_also_considers_non_focusable_elements(self):
        # Left skips the focusable filter the other directions apply.
        elements = [Element(Button("OK"), Position(1, 4), width=6), _input(10, 4)]
        self.assertEqual(navigate(Direction.LEFT, Position(10, 4), elements), Position(1, 4))
        self.assertEqual(candidates(Direction.RIGHT, Position(0, 4), elements), [elements[1]])


class UpdateFocusTests(unittest.TestCase):
    def test_empty_candidates_keep_cursor(self):
        cursor = Position(1, 2)
        self.assertEqual(update_focus(cursor, []), cursor)

    def test_first_candidate_wins(self):
        grid = _grid()
        self.assertEqual(update_focus(Position(0, 0), grid[3:5]), Position(1, 3))

    def test_left_at_row_start_is_a_no_op(self):
        self.assertEqual(navigate(Direction.LEFT, Position(1, 2), _grid()), Position(1, 2))

    def test_no_wraparound(self):
        self.assertEqual(navigate(Direction.DOWN, Position(10, 3), _grid()), Position(10, 3))
        self.assertEqual(navigate(Direction.UP, Position(1, 2), _grid()), Position(1, 2))
        self.assertEqual(navigate(Direction.RIGHT, Position(10, 2), _grid()), Position(10, 2))

    def test_focus_always_lands_on_an_element_or_stays(self):
        grid = _grid()
        positions = {el.position for el in grid}
        for start in [el.position for el in grid] + [Position(0, 0), Position(30, 9)]:
            for direction in Direction:
                target = navigate(direction, start, grid)
                self.assertTrue(target == start or target in positions)


class RoundTripTests(unittest.TestCase):
    def test_down_then_up_returns_to_row_at_or_above(self):
        grid = _grid()
        for start in (Position(1, 2), Position(10, 2)):
            down = navigate(Direction.DOWN, start, grid)
            self.assertGreater(down.row, start.row)
            back = navigate(Direction.UP, down, grid)
            self.assertLessEqual(back.row, start.row)

    def test_up_prefers_last_declared_on_nearest_row(self):
        grid = _grid()
        down = navigate(Direction.DOWN, Position(1, 2), grid)
        self.assertEqual(down, Position(1, 3))
        # Lands on B, not the starting A: Up reverses order, it does not measure distance.
        self.assertEqual(navigate(Direction.UP, down, grid), Position(10, 2))


if __name__ == "__main__":
    unittest.main()
