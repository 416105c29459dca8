"""Control loop: read a key, dispatch it, redraw."""

from __future__ import annotations

from typing import Optional

from kilo_engine.buffer import Buffer, Document, load_document
from kilo_engine.config import EditorConfig
from kilo_engine.context import ActionResult, EditorContext, FrameSink
from kilo_engine.keymaps import ActionRef, KeymapRegistry, load_default_keymaps
from kilo_engine.keys import ByteSource, KeyDecoder, is_insertable, key_to_token
from kilo_engine.runtime import telemetry
from kilo_engine.view import Viewport

INSERT_ACTION = "edit.insert"
QUIT_ACTION = "file.quit"


class Editor:
    """Owns the editing session and dispatches decoded keys to actions."""

    def __init__(
        self,
        context: EditorContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self.logger = telemetry.get_logger("kilo_engine.editor")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="kilo_engine.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.resize_pending = False
        context.keys.on_idle = self._redraw_after_resize

    @classmethod
    def create(
        cls,
        source: ByteSource,
        output: FrameSink,
        *,
        screen_rows: int,
        screen_cols: int,
        config: Optional[EditorConfig] = None,
        document: Optional[Document] = None,
    ) -> "Editor":
        config = config or EditorConfig()
        context = EditorContext(
            buffer=Buffer(document=document or Document(tab_stop=config.tab_stop)),
            viewport=Viewport.for_terminal(screen_rows, screen_cols),
            keys=KeyDecoder(source),
            output=output,
            config=config,
        )
        return cls(context)

    def open(self, path: str) -> None:
        """Load ``path``; failures leave an empty document and a status message."""

        context = self.context
        tab_stop = context.config.tab_stop
        try:
            document = load_document(path, tab_stop=tab_stop)
        except FileNotFoundError:
            document = Document(filename=path, tab_stop=tab_stop)
            context.set_status(f"New file: {path}")
        except OSError as exc:
            document = Document(tab_stop=tab_stop)
            context.set_status(f"Can't open! {exc.strerror or exc}")
            self.logger.warning(f"open failed for {path}: {exc}")
        else:
            telemetry.record_event(
                "document.loaded", data={"path": path, "rows": document.num_rows}
            )
        context.buffer.replace_document(document)
        context.viewport.restore((0, 0))

    def resize(self, screen_rows: int, screen_cols: int) -> None:
        """Adopt a new terminal size; the next idle read or keypress redraws."""

        self.context.viewport.resize(screen_rows, screen_cols)
        self.resize_pending = True

    def _redraw_after_resize(self) -> None:
        if self.resize_pending:
            self.refresh_screen()

    def refresh_screen(self) -> bytes:
        self.resize_pending = False
        return self.context.refresh_screen()

    def resolve(self, key: int) -> Optional[ActionRef]:
        action = self.keymap_registry.lookup(key_to_token(key))
        if action is None and is_insertable(key):
            action = self.keymap_registry.get_action(INSERT_ACTION)
        return action

    def process_keypress(self) -> ActionResult:
        context = self.context
        key = context.read_key()
        action = self.resolve(key)

        if action is None:
            result = ActionResult(consumed=False, status="unbound")
        else:
            with telemetry.span(
                name=f"action::{action.telemetry_name}",
                component="actions",
                metadata={"key": key_to_token(key)},
            ):
                outcome = action(context, key)
            result = outcome if isinstance(outcome, ActionResult) else ActionResult()

        if action is None or action.id != QUIT_ACTION:
            context.quit_remaining = context.config.quit_times
        return result

    def run(self) -> int:
        """Loop until a quit action succeeds; returns the exit status."""

        while True:
            self.refresh_screen()
            result = self.process_keypress()
            if result.quit:
                return 0


__all__ = ["Editor"]
