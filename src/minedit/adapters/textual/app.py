"""Executable Textual app that hosts the editor full-screen."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use minedit.adapters.textual.app"
    ) from exc

from minedit.editor import Editor
from minedit.runtime import telemetry

from .canvas import ScreenCanvas
from .controller import TextualEditorAdapter, TextualUIHooks

_NAMED_KEYS = {"enter", "backspace", "left", "right", "up", "down"}
_MODIFIER_NAMES = {"ctrl": "CTRL", "alt": "ALT", "meta": "ALT", "shift": "SHIFT"}


class EditorApp(App[None]):
    """Single-view Textual UI painting the editor's canvas."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#document {
		height: 1fr;
		padding: 0;
		content-align: left top;
	}
	"""

    # Priority bindings win over Textual's own defaults for the same keys.
    BINDINGS = [
        Binding("ctrl+c", "interrupt", "Interrupt", show=False, priority=True),
        Binding("ctrl+q", "request_quit", "Quit", show=False, priority=True),
        Binding("ctrl+s", "save", "Save", show=False, priority=True),
    ]

    ENABLE_COMMAND_PALETTE = False

    def __init__(self, editor: Editor) -> None:
        super().__init__()
        self.editor = editor
        self.adapter: TextualEditorAdapter | None = None
        self._document_widget: Static | None = None
        self._log = telemetry.get_logger("minedit.adapters.textual")

    def compose(self) -> ComposeResult:
        self._document_widget = Static("", id="document")
        yield self._document_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_screen=self._update_screen,
            exit=self.exit,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.editor, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def action_interrupt(self) -> None:
        self._dispatch_shortcut("c")

    def action_request_quit(self) -> None:
        self._dispatch_shortcut("q")

    def action_save(self) -> None:
        self._dispatch_shortcut("s")

    def _dispatch_shortcut(self, key: str) -> None:
        if self.adapter:
            self.adapter.handle_textual_key(key, modifiers=("CTRL",))
        elif key == "c":
            self.exit()

    def _update_screen(self, canvas: ScreenCanvas) -> None:
        if self._document_widget:
            self._document_widget.update(canvas.to_text())

    def _log_line(self, line: str) -> None:
        self._log.debug(line)

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        *prefixes, name = event.key.split("+")
        modifiers = [_MODIFIER_NAMES[p] for p in prefixes if p in _MODIFIER_NAMES]
        character = event.character
        single_char = bool(character and len(character) == 1)
        if "SHIFT" in modifiers and single_char and character.isprintable():
            modifiers.remove("SHIFT")
        if name in _NAMED_KEYS:
            return (name.upper(), None, tuple(modifiers))
        if "CTRL" in modifiers and len(name) == 1:
            return (name.lower(), None, tuple(modifiers))
        if single_char:
            return (character, character, tuple(modifiers))
        return (name.upper(), None, tuple(modifiers))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="minedit", description="Edit a text file in the terminal."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="File to open; it is created on first save if missing",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    editor = Editor.open(args.path)
    app = EditorApp(editor)
    app.run()
    return app.return_code or 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
