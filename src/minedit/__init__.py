"""A small full-screen terminal text editor."""

from .buffer import Document, SaveResult
from .editor import Editor, KeyInput

__all__ = ["Document", "Editor", "KeyInput", "SaveResult"]

__version__ = "0.1.0"
