"""Explicit editor state shared by actions, the prompt and the control loop."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from kilo_engine.buffer import Buffer
from kilo_engine.config import EditorConfig
from kilo_engine.keys import KeyDecoder
from kilo_engine.view import StatusMessage, Viewport, compose_frame

FrameSink = Callable[[bytes], object]


@dataclass(slots=True)
class ActionResult:
    """Result returned from an action handler."""

    consumed: bool = True
    status: str = "ok"
    message: Optional[str] = None
    quit: bool = False


class EditorBus:
    """Minimal event bus letting hosts observe editor events."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class EditorContext:
    """Everything one editing session owns.

    The control loop is the only owner; actions and prompt sessions get
    the context passed in rather than reaching for globals.
    """

    buffer: Buffer
    viewport: Viewport
    keys: KeyDecoder
    output: FrameSink
    config: EditorConfig = field(default_factory=EditorConfig)
    status: StatusMessage = field(default_factory=StatusMessage)
    bus: EditorBus = field(default_factory=EditorBus)
    quit_remaining: int = -1

    def __post_init__(self) -> None:
        self.status.ttl = self.config.message_ttl
        if self.quit_remaining < 0:
            self.quit_remaining = self.config.quit_times

    def set_status(self, text: str) -> None:
        self.status.set(text)

    def read_key(self) -> int:
        return self.keys.read_key()

    def refresh_screen(self) -> bytes:
        self.viewport.scroll(self.buffer)
        frame = compose_frame(self.buffer, self.viewport, self.status.visible())
        self.output(frame)
        return frame


__all__ = ["ActionResult", "EditorBus", "EditorContext", "FrameSink"]
