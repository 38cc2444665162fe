"""Key handlers: one function per entry of the editor's fixed dispatch table."""

from __future__ import annotations

from typing import Callable, Dict, Sequence

from . import cursor as moves
from .base import (
    INTERRUPT_KEY,
    QUIT_KEY,
    SAVE_KEY,
    DispatchResult,
    EditorState,
    KeyInput,
    QuitState,
)
from .cursor import Cursor

KeyHandler = Callable[[EditorState, KeyInput], DispatchResult]

QUIT_WARNING = (
    "Modified. Press Ctrl-Q again to quit without saving or Ctrl-S to save."
)


def request_quit(state: EditorState, key: KeyInput) -> DispatchResult:
    del key
    if not state.document.dirty:
        return DispatchResult(consumed=True, status="quit", exit=True)
    if state.quit_state is QuitState.CONFIRM_PENDING:
        return DispatchResult(consumed=True, status="quit_discard", exit=True)
    state.quit_state = QuitState.CONFIRM_PENDING
    return DispatchResult(
        consumed=True, status="quit_pending", message=QUIT_WARNING
    )


def save_document(state: EditorState, key: KeyInput) -> DispatchResult:
    del key
    result = state.document.save()
    return DispatchResult(
        consumed=True, status=f"save_{result.status}", message=result.message
    )


def interrupt(state: EditorState, key: KeyInput) -> DispatchResult:
    del state, key
    return DispatchResult(consumed=True, status="interrupt", exit=True)


def insert_character(state: EditorState, key: KeyInput) -> DispatchResult:
    char = key.printable
    if char is None:
        return ignore(state, key)
    row, column = state.cursor.as_tuple()
    state.document.insert_char(row, column, char)
    state.cursor = Cursor(row, column + 1)
    return DispatchResult(consumed=True, status="insert")


def split_line(state: EditorState, key: KeyInput) -> DispatchResult:
    del key
    row, column = state.cursor.as_tuple()
    state.document.split_line(row, column)
    state.cursor = Cursor(row + 1, 0)
    return DispatchResult(consumed=True, status="split")


def erase_backward(state: EditorState, key: KeyInput) -> DispatchResult:
    del key
    row, column = state.cursor.as_tuple()
    if column > 0:
        state.document.delete_char(row, column - 1)
        state.cursor = Cursor(row, column - 1)
        return DispatchResult(consumed=True, status="delete")
    if row > 0:
        join_column = state.document.merge_with_previous(row)
        state.cursor = Cursor(row - 1, join_column)
        return DispatchResult(consumed=True, status="merge")
    return DispatchResult(consumed=True, status="noop")


def _movement(
    move: Callable[[Cursor, Sequence[str]], Cursor], status: str
) -> KeyHandler:
    def handler(state: EditorState, key: KeyInput) -> DispatchResult:
        del key
        state.cursor = move(state.cursor, state.document.lines)
        return DispatchResult(consumed=True, status=status)

    handler.__name__ = f"cursor_{status}"
    return handler


def ignore(state: EditorState, key: KeyInput) -> DispatchResult:
    del state, key
    return DispatchResult(consumed=False, status="ignored")


_SHORTCUTS: Dict[str, KeyHandler] = {
    QUIT_KEY: request_quit,
    SAVE_KEY: save_document,
    INTERRUPT_KEY: interrupt,
}

# Named keys act the same whatever modifiers are held.
_NAMED_KEYS: Dict[str, KeyHandler] = {
    "ENTER": split_line,
    "BACKSPACE": erase_backward,
    "LEFT": _movement(moves.move_left, "left"),
    "RIGHT": _movement(moves.move_right, "right"),
    "UP": _movement(moves.move_up, "up"),
    "DOWN": _movement(moves.move_down, "down"),
}


def resolve_handler(key: KeyInput) -> KeyHandler:
    """Pick the handler for ``key``; unknown keys type text or are ignored."""

    handler = _SHORTCUTS.get(key.token) or _NAMED_KEYS.get(key.key)
    if handler is not None:
        return handler
    if key.printable is not None:
        return insert_character
    return ignore


__all__ = [
    "KeyHandler",
    "QUIT_WARNING",
    "request_quit",
    "save_document",
    "interrupt",
    "insert_character",
    "split_line",
    "erase_backward",
    "ignore",
    "resolve_handler",
]
