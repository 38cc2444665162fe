"""Textual adapter that feeds key events to the editor and paints the result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from minedit.editor import DispatchResult, Editor, KeyInput

from .canvas import ScreenCanvas


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update the Textual app."""

    update_screen: Callable[[ScreenCanvas], None]
    exit: Callable[[], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges normalized Textual keys to ``Editor.dispatch`` and back."""

    def __init__(self, editor: Editor, hooks: TextualUIHooks) -> None:
        self.editor = editor
        self.hooks = hooks
        self.canvas = ScreenCanvas()
        self.refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> DispatchResult:
        """Dispatch one key, then redraw or stop the app."""

        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.editor.dispatch(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            exit=result.exit,
        )
        if result.exit:
            self.hooks.exit()
        else:
            self.refresh()
        return result

    def refresh(self) -> ScreenCanvas:
        canvas = ScreenCanvas()
        self.editor.redraw(canvas)
        self.canvas = canvas
        self.hooks.update_screen(canvas)
        return canvas

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        state = self.editor.state
        return {
            "cursor": state.cursor.as_tuple(),
            "quit_state": state.quit_state.value,
            "dirty": state.document.dirty,
            "version": state.document.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
