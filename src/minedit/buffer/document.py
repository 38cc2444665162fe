"""Line-based document storage and its file round trip."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from typing import List, Literal, Optional

from minedit.runtime import telemetry

from .validation import (
    BufferValidationError,
    ensure_char,
    ensure_position,
    ensure_row,
)

NO_NAME = "[No Name]"

SaveStatus = Literal["saved", "no_filename", "read_only"]

_WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


@dataclass(frozen=True, slots=True)
class SaveResult:
    """Outcome of ``Document.save``; refusals are informational, not errors."""

    status: SaveStatus
    message: str

    @property
    def saved(self) -> bool:
        return self.status == "saved"


@dataclass(slots=True)
class Document:
    """Mutable list-of-lines document tied to an optional file path.

    ``lines`` always holds at least one entry; an empty document is ``[""]``.
    Every mutation marks the document dirty and bumps ``version``.
    """

    identity: Optional[str] = None
    lines: List[str] = field(default_factory=lambda: [""])
    dirty: bool = False
    read_only: bool = False
    version: int = 0
    load_error: Optional[str] = None

    @classmethod
    def from_text(cls, text: str, *, identity: Optional[str] = None) -> "Document":
        return cls(identity=identity, lines=split_lines(text))

    @classmethod
    def load(cls, path: Optional[str] = None) -> "Document":
        """Read ``path`` into a document, falling back to an empty one.

        A file that cannot be read still yields a usable buffer named after
        ``path`` so that saving creates it. Missing files are the normal
        "new file" case; other failures are kept in ``load_error``.
        """

        if path is None:
            return cls()

        with telemetry.span(
            "buffer::load", component="buffer", metadata={"path": path}
        ) as handle:
            try:
                with open(path, encoding="utf-8", newline="") as handle_in:
                    text = handle_in.read()
                mode = os.stat(path).st_mode
            except FileNotFoundError:
                handle.add_metadata("status", "missing")
                return cls(identity=path)
            except (OSError, UnicodeDecodeError) as exc:
                handle.add_metadata("status", "unreadable")
                telemetry.record_event(
                    "buffer.load_failed",
                    level="warning",
                    data={"path": path, "error": exc},
                )
                return cls(
                    identity=path,
                    load_error=f"Could not read {path}: {_reason(exc)}",
                )

            document = cls(
                identity=path,
                lines=split_lines(text),
                read_only=not mode & _WRITE_BITS,
            )
            handle.add_metadata("status", "loaded")
            handle.add_metadata("lines", document.line_count)
            handle.add_metadata("read_only", document.read_only)
            return document

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def display_name(self) -> str:
        return self.identity if self.identity is not None else NO_NAME

    def text(self) -> str:
        """Return the exact text ``save`` would write."""

        return "".join(f"{line}\n" for line in self.lines)

    def save(self) -> SaveResult:
        if self.identity is None:
            return SaveResult(status="no_filename", message="No filename")
        if self.read_only:
            return SaveResult(status="read_only", message="File is read-only")

        with telemetry.span(
            "buffer::save",
            component="buffer",
            metadata={"path": self.identity, "lines": self.line_count},
        ):
            with open(self.identity, "w", encoding="utf-8", newline="") as handle:
                handle.write(self.text())
        self.dirty = False
        telemetry.record_event(
            "buffer.saved", data={"path": self.identity, "version": self.version}
        )
        return SaveResult(status="saved", message="Saved")

    # Mutations -----------------------------------------------------------

    def insert_char(self, row: int, column: int, char: str) -> None:
        ensure_position(self.lines, row, column)
        line = self.lines[row]
        self.lines[row] = line[:column] + char + line[column:]
        self._touch()

    def split_line(self, row: int, column: int) -> None:
        ensure_position(self.lines, row, column)
        line = self.lines[row]
        self.lines[row] = line[:column]
        self.lines.insert(row + 1, line[column:])
        self._touch()

    def merge_with_previous(self, row: int) -> int:
        """Append line ``row`` to line ``row - 1``; return the join column."""

        ensure_row(self.lines, row)
        if row == 0:
            raise BufferValidationError(
                "First line has no previous line", position=(row, 0)
            )
        join_column = len(self.lines[row - 1])
        self.lines[row - 1] += self.lines.pop(row)
        self._touch()
        return join_column

    def delete_char(self, row: int, column: int) -> None:
        ensure_char(self.lines, row, column)
        line = self.lines[row]
        self.lines[row] = line[:column] + line[column + 1 :]
        self._touch()

    def _touch(self) -> None:
        self.dirty = True
        self.version += 1


def split_lines(text: str) -> List[str]:
    """Split file text into lines without their terminators.

    A final newline does not produce a trailing empty line, a ``\\r`` before
    ``\\n`` is dropped, and empty text yields one empty line.
    """

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    return lines or [""]


def _reason(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)
