"""Document storage, file round trip and bounds validation."""

from .document import NO_NAME, Document, SaveResult, SaveStatus, split_lines
from .validation import (
    BufferValidationError,
    ensure_char,
    ensure_position,
    ensure_row,
)

__all__ = [
    "NO_NAME",
    "Document",
    "SaveResult",
    "SaveStatus",
    "split_lines",
    "BufferValidationError",
    "ensure_char",
    "ensure_position",
    "ensure_row",
]
