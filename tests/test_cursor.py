from __future__ import annotations

from minedit.editor.cursor import (
    Cursor,
    clamp,
    clamp_column,
    move_down,
    move_left,
    move_right,
    move_up,
)

LINES = ["hello", "", "wide line here"]


def test_clamp_column_is_min_of_endpoints() -> None:
    assert clamp_column(3, 10) == 3
    assert clamp_column(10, 3) == 3
    assert clamp_column(4, 0) == 0
    assert clamp_column(-2, 5) == 0


def test_move_left_wraps_to_end_of_previous_line() -> None:
    assert move_left(Cursor(0, 3), LINES) == Cursor(0, 2)
    assert move_left(Cursor(2, 0), LINES) == Cursor(1, 0)
    assert move_left(Cursor(1, 0), LINES) == Cursor(0, 5)
    assert move_left(Cursor(0, 0), LINES) == Cursor(0, 0)


def test_move_right_wraps_to_start_of_next_line() -> None:
    assert move_right(Cursor(0, 4), LINES) == Cursor(0, 5)
    assert move_right(Cursor(0, 5), LINES) == Cursor(1, 0)
    assert move_right(Cursor(2, 14), LINES) == Cursor(2, 14)


def test_vertical_moves_clamp_column() -> None:
    assert move_up(Cursor(2, 12), LINES) == Cursor(1, 0)
    assert move_down(Cursor(0, 4), LINES) == Cursor(1, 0)
    assert move_down(Cursor(1, 0), LINES) == Cursor(2, 0)
    assert move_up(Cursor(0, 2), LINES) == Cursor(0, 2)
    assert move_down(Cursor(2, 3), LINES) == Cursor(2, 3)


def test_clamp_pulls_cursor_inside_document() -> None:
    assert clamp(Cursor(7, 40), LINES) == Cursor(2, 14)
    assert clamp(Cursor(0, 9), LINES) == Cursor(0, 5)
    inside = Cursor(2, 1)
    assert clamp(inside, LINES) is inside
