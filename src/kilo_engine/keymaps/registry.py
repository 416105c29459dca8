"""Registry mapping key tokens to editor actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from kilo_engine.runtime.telemetry import span

from .models import ActionRef, Binding, normalize_token


@dataclass(slots=True)
class RegistryStats:
    """Snapshot of what the registry holds."""

    action_count: int
    binding_count: int
    keys: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """A binding claims a key token that another binding already owns."""

    def __init__(self, binding: Binding, existing: Binding):
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' "
            f"on key '{binding.key}'"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Actions by id plus at most one binding per key token.

    Bindings are stored by token, so ``lookup`` is a single dict hit on
    every keypress; ``_ids`` maps binding ids back to their token.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._by_key: Dict[str, Binding] = {}
        self._ids: Dict[str, str] = {}
        self._logger_name = logger_name

    def get_action(self, action_id: str) -> ActionRef:
        action = self._actions.get(action_id)
        if action is None:
            raise KeyError(f"Action '{action_id}' is not registered")
        return action

    def get_binding(self, binding_id: str) -> Binding:
        key = self._ids.get(binding_id)
        if key is None:
            raise KeyError(f"Binding '{binding_id}' is not registered")
        return self._by_key[key]

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with span(
            "keymaps::register_action",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"action_id": action.id},
        ):
            if action.id in self._actions and not replace:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        """Bind ``binding.key``; ``replace`` lets it evict a previous owner.

        Re-registering an existing binding id with ``replace`` moves it to
        the new key.
        """

        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "key": binding.key},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action "
                    f"'{binding.action_id}'"
                )

            if binding.id in self._ids and not replace:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            owner = self._by_key.get(binding.key)
            if owner is not None and owner.id != binding.id:
                if not replace:
                    handle.add_metadata("conflicts", owner.id)
                    raise KeymapConflictError(binding, owner)
                del self._ids[owner.id]

            self.unregister_binding(binding.id)
            self._by_key[binding.key] = binding
            self._ids[binding.id] = binding.key
        return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        key = self._ids.pop(binding_id, None)
        if key is None:
            return None
        return self._by_key.pop(key)

    def lookup(self, key: str) -> Optional[ActionRef]:
        """Action bound to token ``key``, or ``None``."""

        binding = self._by_key.get(normalize_token(key))
        if binding is None:
            return None
        return self._actions[binding.action_id]

    def iter_bindings(self) -> Iterator[Binding]:
        yield from self._by_key.values()

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._by_key),
            keys=tuple(sorted(self._by_key)),
        )


__all__ = [
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
]
