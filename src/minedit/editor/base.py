"""Key events, dispatch results and the state every action works on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from minedit.buffer import Document

from .cursor import Cursor

QUIT_KEY = "CTRL+q"
SAVE_KEY = "CTRL+s"
INTERRUPT_KEY = "CTRL+c"

_TEXT_BLOCKING_MODIFIERS = frozenset({"CTRL", "ALT"})


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Normalized key event handed to ``Editor.dispatch``.

    ``key`` is a single character for character keys (``"s"`` for Ctrl+S) or an
    upper-case name such as ``"ENTER"`` or ``"LEFT"``. ``text`` carries the
    character the key would type, if any.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @property
    def printable(self) -> Optional[str]:
        """The character to insert, or ``None`` when the key types nothing."""

        if _TEXT_BLOCKING_MODIFIERS.intersection(self.modifiers):
            return None
        text = self.text
        if text is None or len(text) != 1 or not text.isprintable():
            return None
        return text


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Result returned from ``Editor.dispatch``."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    exit: bool = False


class QuitState(Enum):
    NONE = "none"
    CONFIRM_PENDING = "confirm_pending"


@dataclass(slots=True)
class EditorState:
    """Everything a dispatch step may read or change."""

    document: Document
    cursor: Cursor = field(default_factory=Cursor)
    message: str = ""
    quit_state: QuitState = QuitState.NONE
