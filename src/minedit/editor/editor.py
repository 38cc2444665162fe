"""The editor loop's state machine: one key in, one mutation, one redraw."""

from __future__ import annotations

from typing import Optional

from minedit.buffer import Document
from minedit.runtime import telemetry

from .actions import request_quit, resolve_handler
from .base import DispatchResult, EditorState, KeyInput, QuitState
from .cursor import Cursor, clamp
from .render import Frame, Screen, build_frame, draw_frame


class Editor:
    """Owns the cursor, status message and quit confirmation for a document."""

    def __init__(self, document: Optional[Document] = None) -> None:
        document = document or Document()
        self.state = EditorState(
            document=document, message=document.load_error or ""
        )
        self.logger = telemetry.get_logger("minedit.editor")
        self.exited = False

    @classmethod
    def open(cls, path: Optional[str] = None) -> "Editor":
        return cls(Document.load(path))

    @property
    def document(self) -> Document:
        return self.state.document

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    @property
    def message(self) -> str:
        return self.state.message

    def dispatch(self, key: KeyInput) -> DispatchResult:
        """Apply ``key`` to the document and cursor.

        The status message is cleared first and replaced by whatever the
        handler reports. Any key other than the quit key drops a pending quit
        confirmation.
        """

        handler = resolve_handler(key)
        state = self.state
        with telemetry.span(
            name="editor::dispatch",
            component=True,
            metadata={"key": key.token, "handler": handler.__name__},
        ) as handle:
            state.message = ""
            if handler is not request_quit:
                state.quit_state = QuitState.NONE
            result = handler(state, key)
            state.cursor = clamp(state.cursor, state.document.lines)
            handle.add_metadata("status", result.status)

        if result.message:
            state.message = result.message
        if result.exit:
            self.exited = True
            telemetry.record_event(
                "editor.exit",
                data={"status": result.status, "dirty": state.document.dirty},
            )
        return result

    def frame(self) -> Frame:
        return build_frame(self.state)

    def redraw(self, screen: Screen) -> Frame:
        frame = self.frame()
        draw_frame(frame, screen)
        return frame
