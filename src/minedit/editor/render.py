"""Screen model for one redraw and the order it is painted in."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple

from minedit.buffer import Document

from .base import EditorState
from .cursor import Cursor


class Screen(Protocol):
    """Write primitives the editor needs from a terminal host."""

    def clear(self) -> None:
        ...

    def move_to(self, column: int, row: int) -> None:
        ...

    def print(self, text: str) -> None:
        ...


@dataclass(frozen=True, slots=True)
class Frame:
    """Snapshot of everything one redraw shows."""

    lines: Tuple[str, ...]
    status: str
    message: str
    cursor: Cursor

    @property
    def status_row(self) -> int:
        # One blank row separates the text from the status line.
        return len(self.lines) + 1

    @property
    def message_row(self) -> int:
        return self.status_row + 1


def status_line(document: Document) -> str:
    modified = "(modified)" if document.dirty else ""
    return f" {document.display_name} - {document.line_count} lines {modified}"


def build_frame(state: EditorState) -> Frame:
    return Frame(
        lines=tuple(state.document.lines),
        status=status_line(state.document),
        message=state.message,
        cursor=state.cursor,
    )


def draw_frame(frame: Frame, screen: Screen) -> None:
    """Paint ``frame``; the cursor is placed last so it never jumps mid-draw."""

    screen.clear()
    for row, line in enumerate(frame.lines):
        screen.move_to(0, row)
        screen.print(line)
    screen.move_to(0, frame.status_row)
    screen.print(frame.status)
    if frame.message:
        screen.move_to(0, frame.message_row)
        screen.print(frame.message)
    screen.move_to(frame.cursor.column, frame.cursor.row)


__all__ = ["Frame", "Screen", "build_frame", "draw_frame", "status_line"]
