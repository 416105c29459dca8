"""High-level buffer façade combining the row store and the cursor."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Iterable, Optional

from kilo_engine.config import TAB_STOP
from kilo_engine.runtime import telemetry

from . import edit
from .document import Document
from .row import render_to_row, row_to_render
from .state import CursorState, clamp_cursor


class Buffer:
    def __init__(
        self,
        *,
        document: Optional[Document] = None,
        cursor: Optional[CursorState] = None,
    ) -> None:
        self.document = document or Document()
        self.cursor = cursor or CursorState()

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[bytes],
        *,
        filename: Optional[str] = None,
        tab_stop: int = TAB_STOP,
    ) -> "Buffer":
        return cls(
            document=Document.from_lines(lines, filename=filename, tab_stop=tab_stop)
        )

    @property
    def name(self) -> str:
        return self.document.filename or "[No Name]"

    def replace_document(self, document: Document) -> None:
        self.document = document
        self.cursor.set(0, 0)
        self.cursor.rx = 0

    def insert_char(self, byte: int) -> None:
        with Transaction(self, "insert_char"):
            edit.insert_char(self.document, self.cursor, byte)

    def insert_newline(self) -> None:
        with Transaction(self, "insert_newline"):
            edit.insert_newline(self.document, self.cursor)

    def delete_char(self) -> None:
        with Transaction(self, "delete_char"):
            edit.delete_char(self.document, self.cursor)

    def render_column(self) -> int:
        """Rendered column of the cursor; 0 on the virtual line."""

        row = self.document.row(self.cursor.cy)
        if row is None:
            return 0
        return row_to_render(row, self.cursor.cx)

    def place_at_render(self, cy: int, rx: int) -> None:
        row = self.document.row(cy)
        cx = render_to_row(row, rx) if row is not None else 0
        self.cursor.set(cx, cy)
        clamp_cursor(self.document, self.cursor)


class Transaction(AbstractContextManager["Transaction"]):
    """Telemetry span around one edit, recording the dirty delta."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._handle: Optional[telemetry.SpanHandle] = None
        self._dirty_before = 0

    def __enter__(self) -> "Transaction":
        self._dirty_before = self.buffer.document.dirty
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={
                "buffer": self.buffer.name,
                "cursor": self.buffer.cursor.position,
            },
        )
        self._handle = self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        document = self.buffer.document
        if document.dirty > self._dirty_before:
            # One edit operation counts once, however many rows it touched.
            document.dirty = self._dirty_before + 1
        if self._handle is not None:
            self._handle.add_metadata("dirty_delta", document.dirty - self._dirty_before)
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "Transaction"]
