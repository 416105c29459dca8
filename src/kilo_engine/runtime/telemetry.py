"""Telemetry services built directly on telelog.

The editor draws every byte of the terminal itself, so telelog's console
sink stays off unless ``KILO_ENGINE_LOG_CONSOLE`` asks for it; records
normally go to ``KILO_ENGINE_LOG_FILE`` or nowhere.

``configure(...)`` -- adopt settings, a preset or a raw ``telelog.Config``
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit an ``event::<name>`` record with data
``span(name, ...)`` -- profile a block and optionally track it as a component
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "KILO_ENGINE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "kilo_engine")

_TRUE = {"1", "true", "yes", "on"}

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


@dataclass(frozen=True)
class TelemetrySettings:
    """What the editor asks of telelog; turned into a ``telelog.Config``."""

    level: str = "INFO"
    log_file: str = ""
    console: bool = False
    colored: bool = True
    json: bool = False
    buffered: bool = False
    buffer_size: int = 2048
    profiling: bool = False

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "TelemetrySettings":
        env = os.environ if environ is None else environ

        def flag(name: str, default: bool) -> bool:
            raw = env.get(f"{ENV_PREFIX}{name}")
            return default if raw is None else raw.lower() in _TRUE

        return cls(
            level=env.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper(),
            log_file=env.get(f"{ENV_PREFIX}LOG_FILE", ""),
            console=flag("LOG_CONSOLE", False),
            colored=not flag("NO_COLOR", False),
            json=flag("LOG_JSON", False),
            buffered=flag("LOG_BUFFERED", False),
            buffer_size=int(env.get(f"{ENV_PREFIX}LOG_BUFFER_SIZE", "2048")),
            profiling=flag("PROFILE", False),
        )

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        if self.json:
            config.with_json_format(True)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffered:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        config.with_profiling(self.profiling)
        return config


def preset_settings(
    preset: str, base: Optional[TelemetrySettings] = None
) -> TelemetrySettings:
    """Settings for a named preset; the log file still comes from ``base``."""

    base = base or TelemetrySettings.from_env()
    key = preset.lower()
    if key == "development":
        return replace(
            base, level="DEBUG", console=False, log_file=base.log_file or "kilo.log"
        )
    if key == "production":
        return replace(base, level="WARNING", console=False, buffered=True)
    if key in {"performance", "performance_analysis"}:
        return replace(
            base,
            level="DEBUG",
            console=False,
            buffered=True,
            json=True,
            profiling=True,
            log_file=base.log_file or "kilo-performance.log",
        )
    raise ValueError(f"Unknown preset '{preset}'.")


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    settings: Optional[TelemetrySettings] = None,
) -> None:
    """Replace the active telelog configuration and drop cached loggers.

    At most one of ``config`` (a ``telelog.Config``), ``preset``
    (``"development"``, ``"production"`` or ``"performance"``) and
    ``settings`` may be given; with none, settings come from the
    environment.
    """

    global _ACTIVE_CONFIG
    if sum(option is not None for option in (config, preset, settings)) > 1:
        raise ValueError("Provide only one of `config`, `preset` or `settings`.")

    if config is None:
        if preset is not None:
            settings = preset_settings(preset)
        config = (settings or TelemetrySettings.from_env()).build()

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` sharing the active configuration."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = TelemetrySettings.from_env().build()
    logger_name = name or DEFAULT_LOGGER_NAME
    cached = _LOGGER_CACHE.get(logger_name)
    if cached is None:
        cached = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
        _LOGGER_CACHE[logger_name] = cached
    return cached


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    """Call ``<level>_with`` when telelog offers it, else fold data into text."""

    name = level.lower()
    with_data = getattr(log, f"{name}_with", None)
    if with_data is not None:
        with_data(message, [(str(k), _stringify(v)) for k, v in payload.items()])
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` as structured fields."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by ``span`` so the block can attach details to its records."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, optionally tracking it as a telelog component.

    ``component=True`` reuses ``name``; a string names the component.
    ``metadata`` is added as logger context for the duration of the
    block. An exception leaving the block is logged as ``span::fail``
    and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _stringify(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=cast(Optional[str], component_name),
        metadata=dict(context),
    )

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if handle.component_name:
            stack.enter_context(log.track_component(handle.component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


configure()
logger = get_logger()

__all__ = [
    "SpanHandle",
    "TelemetrySettings",
    "configure",
    "get_logger",
    "logger",
    "preset_settings",
    "record_event",
    "span",
]
