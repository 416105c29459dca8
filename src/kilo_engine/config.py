"""Editor configuration and constants."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

ENV_PREFIX = "KILO_ENGINE_"

TAB_STOP = 8
QUIT_TIMES = 3
MESSAGE_TTL = 5.0

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Tunables shared by the row store, the compositor and the control loop."""

    tab_stop: int = TAB_STOP
    quit_times: int = QUIT_TIMES
    message_ttl: float = MESSAGE_TTL
    # Terminal read timeout in tenths of a second (termios VTIME).
    read_timeout_ds: int = 1

    def __post_init__(self) -> None:
        if self.tab_stop <= 0:
            raise ValueError("tab_stop must be positive")
        if self.quit_times <= 0:
            raise ValueError("quit_times must be positive")
        if not math.isfinite(self.message_ttl) or self.message_ttl <= 0:
            raise ValueError("message_ttl must be a positive number of seconds")
        if not 0 < self.read_timeout_ds < 256:
            raise ValueError("read_timeout_ds must be within 1..255")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}
        names = {
            "tab_stop": "TAB_STOP",
            "quit_times": "QUIT_TIMES",
            "message_ttl": "MESSAGE_TTL",
            "read_timeout_ds": "READ_TIMEOUT",
        }
        types = {f.name: f.type for f in fields(cls)}
        for attr, suffix in names.items():
            raw = env.get(f"{ENV_PREFIX}{suffix}")
            if raw is None:
                continue
            try:
                overrides[attr] = float(raw) if types[attr] == "float" else int(raw)
            except ValueError as exc:
                raise ValueError(f"{ENV_PREFIX}{suffix}={raw!r} is not a number") from exc
        return cls(**overrides)  # type: ignore[arg-type]


__all__ = ["EditorConfig", "HELP_MESSAGE", "MESSAGE_TTL", "QUIT_TIMES", "TAB_STOP"]
