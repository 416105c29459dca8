from collections import deque

import pytest

from kilo_engine.config import EditorConfig
from kilo_engine.editor import Editor


def test_defaults() -> None:
    config = EditorConfig()

    assert (config.tab_stop, config.quit_times, config.message_ttl) == (8, 3, 5.0)
    assert config.read_timeout_ds == 1


def test_from_env_overrides() -> None:
    config = EditorConfig.from_env(
        {
            "KILO_ENGINE_TAB_STOP": "4",
            "KILO_ENGINE_QUIT_TIMES": "1",
            "KILO_ENGINE_MESSAGE_TTL": "2.5",
            "KILO_ENGINE_READ_TIMEOUT": "3",
            "UNRELATED": "ignored",
        }
    )

    assert config == EditorConfig(
        tab_stop=4, quit_times=1, message_ttl=2.5, read_timeout_ds=3
    )


def test_from_env_without_overrides_uses_defaults() -> None:
    assert EditorConfig.from_env({}) == EditorConfig()


@pytest.mark.parametrize(
    "environ",
    [
        {"KILO_ENGINE_TAB_STOP": "wide"},
        {"KILO_ENGINE_TAB_STOP": "0"},
        {"KILO_ENGINE_QUIT_TIMES": "-1"},
        {"KILO_ENGINE_QUIT_TIMES": "0"},
        {"KILO_ENGINE_MESSAGE_TTL": "nan"},
        {"KILO_ENGINE_MESSAGE_TTL": "inf"},
        {"KILO_ENGINE_MESSAGE_TTL": "0"},
        {"KILO_ENGINE_READ_TIMEOUT": "300"},
    ],
)
def test_invalid_values_raise(environ: dict) -> None:
    with pytest.raises(ValueError):
        EditorConfig.from_env(environ)


def test_single_quit_time_needs_one_confirmation() -> None:
    pending = deque(b"x\x11\x11")

    class Source:
        def read_byte(self) -> int | None:
            return pending.popleft() if pending else None

    editor = Editor.create(
        Source(),
        lambda frame: None,
        screen_rows=10,
        screen_cols=20,
        config=EditorConfig(quit_times=1),
    )

    editor.process_keypress()
    assert editor.process_keypress().status == "quit_pending"
    assert editor.process_keypress().quit
