"""Cursor tracking for a document."""

from __future__ import annotations

from dataclasses import dataclass

from .document import Document


@dataclass(slots=True)
class CursorState:
    """Raw cursor position plus the rendered column derived each frame.

    ``cy`` may equal ``document.num_rows``: the virtual empty line one
    past the end where typing appends a new line.
    """

    cx: int = 0
    cy: int = 0
    rx: int = 0

    def set(self, cx: int, cy: int) -> None:
        self.cx = cx
        self.cy = cy

    @property
    def position(self) -> tuple[int, int]:
        return (self.cx, self.cy)


def current_row_size(document: Document, cursor: CursorState) -> int:
    row = document.row(cursor.cy)
    return row.size if row is not None else 0


def clamp_cursor(document: Document, cursor: CursorState) -> CursorState:
    """Pull ``cursor`` back into ``[0, num_rows]`` x ``[0, len(line)]``."""

    cursor.cy = max(0, min(cursor.cy, document.num_rows))
    cursor.cx = max(0, min(cursor.cx, current_row_size(document, cursor)))
    return cursor


__all__ = ["CursorState", "clamp_cursor", "current_row_size"]
