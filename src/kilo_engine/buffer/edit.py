"""Character and line edits applied at the cursor."""

from __future__ import annotations

from .document import Document
from .state import CursorState


def insert_char(document: Document, cursor: CursorState, byte: int) -> None:
    if cursor.cy == document.num_rows:
        document.insert_row(document.num_rows, b"")
    row = document.rows[cursor.cy]
    document.row_insert_byte(row, cursor.cx, byte)
    cursor.cx += 1


def insert_newline(document: Document, cursor: CursorState) -> None:
    if cursor.cx == 0:
        document.insert_row(cursor.cy, b"")
    else:
        row = document.rows[cursor.cy]
        document.insert_row(cursor.cy + 1, row.raw[cursor.cx :])
        document.row_truncate(row, cursor.cx)
    cursor.cy += 1
    cursor.cx = 0


def delete_char(document: Document, cursor: CursorState) -> None:
    if cursor.cy == document.num_rows:
        return
    if cursor.cx == 0 and cursor.cy == 0:
        return

    row = document.rows[cursor.cy]
    if cursor.cx > 0:
        document.row_delete_byte(row, cursor.cx - 1)
        cursor.cx -= 1
        return

    previous = document.rows[cursor.cy - 1]
    cursor.cx = previous.size
    document.row_append(previous, row.raw)
    document.delete_row(cursor.cy)
    cursor.cy -= 1


__all__ = ["delete_char", "insert_char", "insert_newline"]
