"""Bounds checks shared by every document mutation."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

_Position = Tuple[int, int]  # (row, column)


class BufferValidationError(RuntimeError):
    """Raised when a mutation addresses a row or column outside the document."""

    def __init__(
        self, message: str, *, position: Optional[_Position] = None
    ) -> None:
        super().__init__(message)
        self.position = position


def ensure_row(lines: Sequence[str], row: int) -> int:
    if row < 0 or row >= len(lines):
        raise BufferValidationError("Row out of range", position=(row, 0))
    return row


def ensure_position(lines: Sequence[str], row: int, column: int) -> _Position:
    """Accept any column from 0 up to and including the line length."""

    ensure_row(lines, row)
    if column < 0 or column > len(lines[row]):
        raise BufferValidationError("Column out of range", position=(row, column))
    return (row, column)


def ensure_char(lines: Sequence[str], row: int, column: int) -> _Position:
    """Like ``ensure_position`` but the column must name an existing character."""

    ensure_row(lines, row)
    if column < 0 or column >= len(lines[row]):
        raise BufferValidationError("No character at column", position=(row, column))
    return (row, column)
