"""Save, save-as and quit actions."""

from __future__ import annotations

from kilo_engine.buffer import save_document
from kilo_engine.context import ActionResult, EditorContext
from kilo_engine.prompt import prompt
from kilo_engine.runtime import telemetry

SAVE_AS_PROMPT = "Save as: {} (ESC to cancel)"


def save(context: EditorContext, key: int) -> ActionResult:
    del key
    document = context.buffer.document
    if document.filename is None:
        filename = prompt(context, SAVE_AS_PROMPT)
        if filename is None:
            context.set_status("Save aborted")
            return ActionResult(status="save_aborted")
        document.filename = filename

    try:
        written = save_document(document)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        context.set_status(f"Can't save! I/O error: {reason}")
        telemetry.record_event(
            "document.save_failed",
            level="warning",
            data={"path": document.filename, "reason": reason},
        )
        return ActionResult(status="save_failed", message=reason)

    context.set_status(f"{written} bytes written to disk")
    context.bus.emit("document.saved", {"path": document.filename, "bytes": written})
    telemetry.record_event(
        "document.saved", data={"path": document.filename, "bytes": written}
    )
    return ActionResult(status="saved")


def quit_editor(context: EditorContext, key: int) -> ActionResult:
    """Quit, insisting on repeated presses while there are unsaved edits."""

    del key
    if context.buffer.document.is_dirty and context.quit_remaining > 0:
        context.set_status(
            "WARNING!!! File has unsaved changes. "
            f"Press Ctrl-Q {context.quit_remaining} more times to quit."
        )
        context.quit_remaining -= 1
        return ActionResult(status="quit_pending")

    context.bus.emit("editor.quit", None)
    telemetry.record_event(
        "editor.quit", data={"dirty": context.buffer.document.dirty}
    )
    return ActionResult(status="quit", quit=True)


__all__ = ["SAVE_AS_PROMPT", "quit_editor", "save"]
