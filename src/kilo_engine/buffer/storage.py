"""Line source and sink: turn a path into document lines and back."""

from __future__ import annotations

import os
from typing import List

from kilo_engine.config import TAB_STOP

from .document import Document


def split_lines(data: bytes) -> List[bytes]:
    """Split on line feeds, dropping one trailing carriage return per line."""

    if not data:
        return []
    lines = data.split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    return [line[:-1] if line.endswith(b"\r") else line for line in lines]


def load_document(path: str, *, tab_stop: int = TAB_STOP) -> Document:
    """Read ``path`` into a clean document; ``OSError`` propagates."""

    with open(path, "rb") as handle:
        data = handle.read()
    return Document.from_lines(split_lines(data), filename=path, tab_stop=tab_stop)


def save_document(document: Document, path: str | None = None) -> int:
    """Write every line of ``document`` to ``path`` and return the byte count.

    The file is created with mode 0644 when missing and truncated to the
    new length before the single write. ``dirty`` is reset only on success.
    """

    target = path or document.filename
    if not target:
        raise ValueError("document has no file name")
    payload = document.to_bytes()
    fd = os.open(target, os.O_RDWR | os.O_CREAT, 0o644)
    try:
        os.ftruncate(fd, len(payload))
        written = os.write(fd, payload)
    finally:
        os.close(fd)
    if written != len(payload):
        raise OSError(f"short write ({written} of {len(payload)} bytes)")
    document.filename = target
    document.mark_clean()
    return written


__all__ = ["load_document", "save_document", "split_lines"]
