"""Row store, cursor, edit operations and file storage."""

from .buffer import Buffer, Transaction
from .document import Document
from .edit import delete_char, insert_char, insert_newline
from .row import Row, expand_tabs, render_to_row, row_to_render
from .state import CursorState, clamp_cursor, current_row_size
from .storage import load_document, save_document, split_lines

__all__ = [
    "Buffer",
    "CursorState",
    "Document",
    "Row",
    "Transaction",
    "clamp_cursor",
    "current_row_size",
    "delete_char",
    "expand_tabs",
    "insert_char",
    "insert_newline",
    "load_document",
    "render_to_row",
    "row_to_render",
    "save_document",
    "split_lines",
]
