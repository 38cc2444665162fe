"""In-memory ``Screen`` that Textual widgets can render."""

from __future__ import annotations

from typing import List, Tuple

from rich.text import Text

CURSOR_STYLE = "reverse"


class ScreenCanvas:
    """Row grid painted through ``clear``/``move_to``/``print``.

    The position left by the last ``move_to`` or ``print`` is the terminal
    cursor; ``to_text`` marks that cell in reverse video.
    """

    def __init__(self) -> None:
        self._rows: List[str] = []
        self.column = 0
        self.row = 0

    @property
    def cursor(self) -> Tuple[int, int]:
        return (self.column, self.row)

    @property
    def rows(self) -> Tuple[str, ...]:
        return tuple(self._rows)

    def clear(self) -> None:
        self._rows = []
        self.column = 0
        self.row = 0

    def move_to(self, column: int, row: int) -> None:
        if column < 0 or row < 0:
            raise ValueError(f"Cannot move to ({column}, {row})")
        self.column = column
        self.row = row

    def print(self, text: str) -> None:
        while len(self._rows) <= self.row:
            self._rows.append("")
        line = self._rows[self.row].ljust(self.column)
        end = self.column + len(text)
        self._rows[self.row] = line[: self.column] + text + line[end:]
        self.column = end

    def to_text(self) -> Text:
        rows = list(self._rows)
        while len(rows) <= self.row:
            rows.append("")
        rows[self.row] = rows[self.row].ljust(self.column + 1)
        text = Text("\n".join(rows), no_wrap=True)
        offset = sum(len(row) + 1 for row in rows[: self.row]) + self.column
        text.stylize(CURSOR_STYLE, offset, offset + 1)
        return text


__all__ = ["ScreenCanvas", "CURSOR_STYLE"]
