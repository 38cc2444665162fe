from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List

import pytest
from textual import events

from minedit.buffer import Document
from minedit.editor import Editor
from minedit.adapters.textual import (
    ScreenCanvas,
    TextualEditorAdapter,
    TextualUIHooks,
)
from minedit.adapters.textual.app import EditorApp, _parse_args


def make_adapter(
    editor: Editor,
    screens: List[ScreenCanvas],
    exits: List[bool] | None = None,
    logs: List[str] | None = None,
) -> TextualEditorAdapter:
    hooks = TextualUIHooks(
        update_screen=screens.append,
        exit=lambda: exits.append(True) if exits is not None else None,
        log=lambda line: logs.append(line) if logs is not None else None,
    )
    return TextualEditorAdapter(editor, hooks)


def test_canvas_paints_rows_and_cursor() -> None:
    canvas = ScreenCanvas()
    canvas.clear()
    canvas.move_to(0, 0)
    canvas.print("hello")
    canvas.move_to(2, 2)
    canvas.print("st")
    canvas.move_to(1, 0)

    assert canvas.rows == ("hello", "", "  st")
    assert canvas.cursor == (1, 0)
    text = canvas.to_text()
    assert text.plain == "hello\n\n  st"
    assert [(span.start, span.end, str(span.style)) for span in text.spans] == [
        (1, 2, "reverse")
    ]


def test_canvas_pads_cursor_past_end_of_line() -> None:
    canvas = ScreenCanvas()
    canvas.print("ab")

    text = canvas.to_text()

    assert text.plain == "ab "
    assert text.spans[0].start == 2


def test_adapter_redraws_after_each_key() -> None:
    screens: List[ScreenCanvas] = []
    adapter = make_adapter(Editor(Document()), screens)

    adapter.handle_textual_key("h", text="h")
    adapter.handle_textual_key("i", text="i")

    assert len(screens) == 3
    assert screens[-1].rows[0] == "hi"
    assert screens[-1].rows[2] == " [No Name] - 1 lines (modified)"
    assert screens[-1].cursor == (2, 0)


def test_adapter_requests_exit_on_interrupt() -> None:
    screens: List[ScreenCanvas] = []
    exits: List[bool] = []
    adapter = make_adapter(Editor(Document()), screens, exits)

    result = adapter.handle_textual_key("c", modifiers=("ctrl",))

    assert result.exit is True
    assert exits == [True]
    assert len(screens) == 1


def test_adapter_two_press_quit() -> None:
    screens: List[ScreenCanvas] = []
    exits: List[bool] = []
    adapter = make_adapter(Editor(Document()), screens, exits)
    adapter.handle_textual_key("x", text="x")

    adapter.handle_textual_key("q", modifiers=("CTRL",))
    assert exits == []
    assert screens[-1].rows[3].startswith("Modified.")

    adapter.handle_textual_key("q", modifiers=("CTRL",))
    assert exits == [True]


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    adapter = make_adapter(Editor(Document()), [], logs=logs)

    adapter.handle_textual_key("a", text="a")

    assert any(line.startswith("key ->") for line in logs)
    assert any("status='insert'" in line for line in logs)


def test_normalize_key_variants() -> None:
    normalize = EditorApp._normalize_key

    assert normalize(events.Key("a", "a")) == ("a", "a", ())
    assert normalize(events.Key("A", "A")) == ("A", "A", ())
    assert normalize(events.Key("space", " ")) == (" ", " ", ())
    assert normalize(events.Key("enter", "\r")) == ("ENTER", None, ())
    assert normalize(events.Key("backspace", "\x7f")) == ("BACKSPACE", None, ())
    assert normalize(events.Key("left", None)) == ("LEFT", None, ())
    assert normalize(events.Key("ctrl+s", "\x13")) == ("s", None, ("CTRL",))
    assert normalize(events.Key("shift+up", None)) == ("UP", None, ("SHIFT",))


def test_parse_args_accepts_optional_path() -> None:
    assert _parse_args([]).path is None
    assert _parse_args(["notes.txt"]).path == "notes.txt"


def test_app_types_and_saves(tmp_path: Path) -> None:
    path = tmp_path / "typed.txt"
    editor = Editor.open(str(path))

    async def scenario() -> None:
        app = EditorApp(editor)
        async with app.run_test() as pilot:
            await pilot.press("h", "i", "enter", "o", "k")
            await pilot.press("ctrl+s")
            await pilot.press("ctrl+q")

    asyncio.run(scenario())

    assert editor.document.lines == ["hi", "ok"]
    assert path.read_text(encoding="utf-8") == "hi\nok\n"
    assert editor.exited is True


def test_shifted_arrow_moves_cursor_through_adapter() -> None:
    screens: List[ScreenCanvas] = []
    editor = Editor(Document.from_text("abc"))
    adapter = make_adapter(editor, screens)
    key, text, modifiers = EditorApp._normalize_key(events.Key("shift+right", None))

    result = adapter.handle_textual_key(key, text=text, modifiers=modifiers)

    assert result.status == "right"
    assert editor.cursor.as_tuple() == (0, 1)
    assert screens[-1].cursor == (1, 0)


def test_save_failure_propagates_out_of_app(tmp_path: Path) -> None:
    editor = Editor.open(str(tmp_path / "missing-dir" / "file.txt"))

    async def scenario() -> None:
        app = EditorApp(editor)
        async with app.run_test() as pilot:
            await pilot.press("x")
            await pilot.press("ctrl+s")

    with pytest.raises(OSError):
        asyncio.run(scenario())

    assert editor.document.dirty is True
