from __future__ import annotations

from typing import List, Tuple

from minedit.buffer import Document
from minedit.editor import Editor, KeyInput, build_frame, draw_frame, status_line


class RecordingScreen:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, ...]] = []

    def clear(self) -> None:
        self.calls.append(("clear",))

    def move_to(self, column: int, row: int) -> None:
        self.calls.append(("move_to", str(column), str(row)))

    def print(self, text: str) -> None:
        self.calls.append(("print", text))


def test_status_line_for_unnamed_clean_buffer() -> None:
    assert status_line(Document()) == " [No Name] - 1 lines "


def test_status_line_shows_identity_and_modified_flag() -> None:
    document = Document.from_text("a\nb\nc", identity="notes.txt")
    document.insert_char(0, 0, "x")

    assert status_line(document) == " notes.txt - 3 lines (modified)"


def test_draw_order_places_cursor_last() -> None:
    editor = Editor(Document.from_text("ab\ncd", identity="f.txt"))
    editor.dispatch(KeyInput(key="DOWN"))
    editor.dispatch(KeyInput(key="RIGHT"))
    screen = RecordingScreen()

    editor.redraw(screen)

    assert screen.calls == [
        ("clear",),
        ("move_to", "0", "0"),
        ("print", "ab"),
        ("move_to", "0", "1"),
        ("print", "cd"),
        ("move_to", "0", "3"),
        ("print", " f.txt - 2 lines "),
        ("move_to", "1", "1"),
    ]


def test_message_is_drawn_below_status() -> None:
    editor = Editor(Document())
    editor.dispatch(KeyInput(key="s", modifiers=("CTRL",)))
    screen = RecordingScreen()

    frame = build_frame(editor.state)
    draw_frame(frame, screen)

    assert frame.message == "No filename"
    assert ("move_to", "0", "3") in screen.calls
    assert screen.calls[-2] == ("print", "No filename")
    assert screen.calls[-1] == ("move_to", "0", "0")
