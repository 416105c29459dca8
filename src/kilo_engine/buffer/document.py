"""Row store: the ordered lines of one document and its dirty counter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from kilo_engine.config import TAB_STOP

from .row import Row


@dataclass(slots=True)
class Document:
    """Ordered sequence of :class:`Row` records.

    Every mutator bumps ``dirty`` by one, including the per-row byte
    primitives, so a single edit operation may add more than one. Indexes
    out of range are clamped or ignored rather than raised.
    """

    rows: List[Row] = field(default_factory=list)
    filename: Optional[str] = None
    dirty: int = 0
    tab_stop: int = TAB_STOP

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[bytes],
        *,
        filename: Optional[str] = None,
        tab_stop: int = TAB_STOP,
    ) -> "Document":
        document = cls(filename=filename, tab_stop=tab_stop)
        for line in lines:
            document.insert_row(document.num_rows, line)
        document.mark_clean()
        return document

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def is_dirty(self) -> bool:
        return self.dirty > 0

    def mark_clean(self) -> None:
        self.dirty = 0

    def row(self, index: int) -> Optional[Row]:
        """Return the row at ``index`` or ``None`` for the virtual line."""

        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None

    def snapshot(self) -> Sequence[bytes]:
        """Return the raw bytes of every line without exposing the rows."""

        return tuple(bytes(row.raw) for row in self.rows)

    def insert_row(self, at: int, data: bytes | bytearray = b"") -> None:
        if at < 0 or at > len(self.rows):
            return
        self.rows.insert(at, Row(bytearray(data), tab_stop=self.tab_stop))
        self.dirty += 1

    def delete_row(self, at: int) -> None:
        if at < 0 or at >= len(self.rows):
            return
        del self.rows[at]
        self.dirty += 1

    def row_insert_byte(self, row: Row, at: int, byte: int) -> None:
        if at < 0 or at > row.size:
            at = row.size
        row.raw.insert(at, byte)
        row.update_render()
        self.dirty += 1

    def row_append(self, row: Row, data: bytes | bytearray) -> None:
        row.raw.extend(data)
        row.update_render()
        self.dirty += 1

    def row_delete_byte(self, row: Row, at: int) -> None:
        if at < 0 or at >= row.size:
            return
        del row.raw[at]
        row.update_render()
        self.dirty += 1

    def row_truncate(self, row: Row, length: int) -> None:
        del row.raw[max(0, length):]
        row.update_render()
        self.dirty += 1

    def to_bytes(self) -> bytes:
        """Serialize with a line feed after every line, the last included."""

        return b"".join(bytes(row.raw) + b"\n" for row in self.rows)


__all__ = ["Document"]
