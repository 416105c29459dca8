"""Cursor movement and editing actions."""

from __future__ import annotations

from kilo_engine.buffer import clamp_cursor, current_row_size
from kilo_engine.context import ActionResult, EditorContext
from kilo_engine.keys import Key


def _move(context: EditorContext, key: int) -> None:
    buffer = context.buffer
    document = buffer.document
    cursor = buffer.cursor
    row = document.row(cursor.cy)

    if key == Key.ARROW_LEFT:
        if cursor.cx > 0:
            cursor.cx -= 1
        elif cursor.cy > 0:
            cursor.cy -= 1
            cursor.cx = current_row_size(document, cursor)
    elif key == Key.ARROW_RIGHT:
        if row is not None and cursor.cx < row.size:
            cursor.cx += 1
        elif row is not None and cursor.cx == row.size:
            cursor.cy += 1
            cursor.cx = 0
    elif key == Key.ARROW_UP:
        if cursor.cy > 0:
            cursor.cy -= 1
    elif key == Key.ARROW_DOWN:
        if cursor.cy < document.num_rows:
            cursor.cy += 1

    clamp_cursor(document, cursor)


def move_cursor(context: EditorContext, key: int) -> ActionResult:
    _move(context, key)
    return ActionResult(status="move")


def move_home(context: EditorContext, key: int) -> ActionResult:
    del key
    context.buffer.cursor.cx = 0
    return ActionResult(status="move")


def move_end(context: EditorContext, key: int) -> ActionResult:
    del key
    buffer = context.buffer
    buffer.cursor.cx = current_row_size(buffer.document, buffer.cursor)
    return ActionResult(status="move")


def page(context: EditorContext, key: int) -> ActionResult:
    """Jump to the top/bottom visible row, then move a whole screen further."""

    buffer = context.buffer
    viewport = context.viewport
    cursor = buffer.cursor
    if key == Key.PAGE_UP:
        cursor.cy = viewport.row_offset
        step = Key.ARROW_UP
    else:
        bottom = viewport.row_offset + viewport.rows - 1
        cursor.cy = max(0, min(bottom, buffer.document.num_rows - 1))
        step = Key.ARROW_DOWN
    clamp_cursor(buffer.document, cursor)

    for _ in range(viewport.rows):
        _move(context, step)
    return ActionResult(status="move")


def insert_newline(context: EditorContext, key: int) -> ActionResult:
    del key
    context.buffer.insert_newline()
    return ActionResult(status="edit")


def delete_backward(context: EditorContext, key: int) -> ActionResult:
    del key
    context.buffer.delete_char()
    return ActionResult(status="edit")


def delete_forward(context: EditorContext, key: int) -> ActionResult:
    del key
    _move(context, Key.ARROW_RIGHT)
    context.buffer.delete_char()
    return ActionResult(status="edit")


def insert_byte(context: EditorContext, key: int) -> ActionResult:
    context.buffer.insert_char(key)
    return ActionResult(status="edit")


def noop_action(context: EditorContext, key: int) -> ActionResult:
    del context, key
    return ActionResult(status="noop")


__all__ = [
    "delete_backward",
    "delete_forward",
    "insert_byte",
    "insert_newline",
    "move_cursor",
    "move_end",
    "move_home",
    "noop_action",
    "page",
]
