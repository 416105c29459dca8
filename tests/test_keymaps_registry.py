import pytest

from kilo_engine.keymaps import (
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)
from kilo_engine.keymaps.defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    key: str = "ctrl+t",
    action_id: str = "core.test",
) -> Binding:
    return Binding(id=binding_id, key=key, action_id=action_id)


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    action = make_action()
    registry.register_action(action)
    binding = make_binding(binding_id="test")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings()) == [binding]
    assert registry.lookup("ctrl+t") is action


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="test"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="test.duplicate"))

    assert excinfo.value.existing.id == "test"


def test_conflicting_binding_with_replace_takes_the_key() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_action(make_action("core.other"))
    registry.register_binding(make_binding(binding_id="first"))

    registry.register_binding(
        make_binding(binding_id="second", action_id="core.other"), replace=True
    )

    assert registry.lookup("ctrl+t").id == "core.other"
    assert [binding.id for binding in registry.iter_bindings()] == ["second"]


def test_register_binding_with_replace_moves_key() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    first = make_binding(binding_id="binding")
    second = make_binding(binding_id="binding", key="ctrl+y")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]
    assert registry.lookup("ctrl+t") is None
    assert registry.lookup("ctrl+y") is not None


def test_duplicate_action_requires_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())

    registry.register_action(make_action(), replace=True)
    assert registry.stats().action_count == 1


def test_binding_to_unknown_action_is_rejected() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="orphan"))


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="binding")
    registry.register_binding(binding)

    removed = registry.unregister_binding("binding")

    assert removed == binding
    assert registry.stats().binding_count == 0
    assert registry.lookup("ctrl+t") is None


def test_empty_identifiers_are_rejected() -> None:
    with pytest.raises(ValueError):
        ActionRef(id="", handler=lambda: None)
    with pytest.raises(TypeError):
        ActionRef(id="x", handler="not callable")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        Binding(id="b", key="", action_id="x")


def test_load_default_keymaps_registers_everything() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    stats = registry.stats()
    assert stats.action_count == len(DEFAULT_ACTIONS)
    assert stats.binding_count == len(DEFAULT_BINDINGS)
    assert registry.lookup("ctrl+q").id == "file.quit"
    assert registry.lookup("ctrl+s").id == "file.save"
    assert registry.lookup("ctrl+f").id == "search.find"
    assert registry.lookup("ENTER").id == "edit.newline"
    assert registry.lookup("x") is None


def test_load_default_keymaps_exclude_and_extra() -> None:
    registry = KeymapRegistry()
    extra = Binding(id="custom.quit", key="ctrl+x", action_id="file.quit")

    load_default_keymaps(
        registry,
        exclude_bindings=("ctrl+l",),
        extra_bindings=(extra,),
    )

    assert registry.lookup("ctrl+l") is None
    assert registry.lookup("ctrl+x").id == "file.quit"


def test_binding_tokens_are_normalized() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    binding = registry.register_binding(make_binding(binding_id="b", key=" Ctrl+T "))

    assert binding.key == "ctrl+t"
    assert registry.lookup("CTRL+t") is not None
    assert registry.get_binding("b") is binding
