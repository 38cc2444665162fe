"""Textual host for the editor."""

from .canvas import ScreenCanvas
from .controller import TextualEditorAdapter, TextualUIHooks

__all__ = ["ScreenCanvas", "TextualEditorAdapter", "TextualUIHooks"]
