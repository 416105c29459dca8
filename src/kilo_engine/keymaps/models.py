"""Dataclasses describing key bindings and the actions they reach."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

ActionHandler = Callable[..., object]

_CTRL_PREFIX = "ctrl+"


def normalize_token(token: str) -> str:
    """Canonical spelling of a binding token: ``Ctrl+Q`` becomes ``ctrl+q``."""

    token = token.strip()
    if token.lower().startswith(_CTRL_PREFIX) and len(token) > len(_CTRL_PREFIX):
        return _CTRL_PREFIX + token[len(_CTRL_PREFIX) :].lower()
    return token


@dataclass(frozen=True, slots=True)
class ActionRef:
    """An editor verb: handler called as ``handler(context, key)``."""

    id: str
    handler: ActionHandler
    telemetry_name: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, context: object, key: int) -> object:
        return self.handler(context, key)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one key token (see ``keys.key_to_token``) with an action."""

    id: str
    key: str
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.key.strip():
            raise ValueError("binding key cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        object.__setattr__(self, "key", normalize_token(self.key))


__all__ = ["ActionHandler", "ActionRef", "Binding", "normalize_token"]
