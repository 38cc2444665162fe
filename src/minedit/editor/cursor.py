"""Cursor value and the pure movement rules applied after every key."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class Cursor:
    row: int = 0
    column: int = 0

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.column)


def clamp_column(column: int, line_length: int) -> int:
    """Column to use after moving onto a line of ``line_length`` characters."""

    return max(0, min(column, line_length))


def clamp(cursor: Cursor, lines: Sequence[str]) -> Cursor:
    """Pull ``cursor`` back inside ``lines``."""

    row = max(0, min(cursor.row, len(lines) - 1))
    column = clamp_column(cursor.column, len(lines[row]))
    if (row, column) == (cursor.row, cursor.column):
        return cursor
    return Cursor(row, column)


def move_left(cursor: Cursor, lines: Sequence[str]) -> Cursor:
    if cursor.column > 0:
        return Cursor(cursor.row, cursor.column - 1)
    if cursor.row > 0:
        row = cursor.row - 1
        return Cursor(row, len(lines[row]))
    return cursor


def move_right(cursor: Cursor, lines: Sequence[str]) -> Cursor:
    if cursor.column < len(lines[cursor.row]):
        return Cursor(cursor.row, cursor.column + 1)
    if cursor.row < len(lines) - 1:
        return Cursor(cursor.row + 1, 0)
    return cursor


def move_up(cursor: Cursor, lines: Sequence[str]) -> Cursor:
    if cursor.row == 0:
        return cursor
    row = cursor.row - 1
    return Cursor(row, clamp_column(cursor.column, len(lines[row])))


def move_down(cursor: Cursor, lines: Sequence[str]) -> Cursor:
    if cursor.row >= len(lines) - 1:
        return cursor
    row = cursor.row + 1
    return Cursor(row, clamp_column(cursor.column, len(lines[row])))


__all__ = [
    "Cursor",
    "clamp",
    "clamp_column",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
]
