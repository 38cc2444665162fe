"""Editor loop: key dispatch, cursor movement and screen rendering."""

from .base import (
    INTERRUPT_KEY,
    QUIT_KEY,
    SAVE_KEY,
    DispatchResult,
    EditorState,
    KeyInput,
    QuitState,
)
from .cursor import Cursor, clamp, clamp_column
from .editor import Editor
from .render import Frame, Screen, build_frame, draw_frame, status_line

__all__ = [
    "INTERRUPT_KEY",
    "QUIT_KEY",
    "SAVE_KEY",
    "DispatchResult",
    "EditorState",
    "KeyInput",
    "QuitState",
    "Cursor",
    "clamp",
    "clamp_column",
    "Editor",
    "Frame",
    "Screen",
    "build_frame",
    "draw_frame",
    "status_line",
]
