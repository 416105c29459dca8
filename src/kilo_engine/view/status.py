"""Transient status-line messages."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

from kilo_engine.config import MESSAGE_TTL


@dataclass(slots=True)
class StatusMessage:
    text: str = ""
    created_at: float = 0.0
    ttl: float = MESSAGE_TTL
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)

    def set(self, text: str) -> None:
        self.text = text
        self.created_at = self.clock()

    def clear(self) -> None:
        self.set("")

    def visible(self) -> str:
        """The message text while younger than ``ttl``, otherwise ``""``."""

        if self.text and self.clock() - self.created_at < self.ttl:
            return self.text
        return ""


__all__ = ["StatusMessage"]
