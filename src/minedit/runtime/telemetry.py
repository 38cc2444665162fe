"""Logging for the editor, built on telelog.

Settings come from ``MINEDIT_*`` environment variables and only affect
logging. Console output stays off unless ``MINEDIT_LOG_CONSOLE`` is set:
anything written to the terminal while the editor owns the alternate screen
lands on top of the document.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "MINEDIT_"

_TRUTHY = {"1", "true", "yes", "on"}
_LOGGERS: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    logger_name: str = "minedit"
    level: str = "INFO"
    log_file: str = ""
    console: bool = False
    colored: bool = True
    json: bool = False
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "TelemetrySettings":
        env = os.environ if environ is None else environ

        def flag(name: str) -> bool:
            return env.get(f"{ENV_PREFIX}{name}", "").lower() in _TRUTHY

        buffer_size = None
        if flag("LOG_BUFFERED"):
            buffer_size = int(env.get(f"{ENV_PREFIX}LOG_BUFFER_SIZE", "2048"))
        return cls(
            logger_name=env.get(f"{ENV_PREFIX}LOGGER", "minedit"),
            level=env.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper(),
            log_file=env.get(f"{ENV_PREFIX}LOG_FILE", ""),
            console=flag("LOG_CONSOLE"),
            colored=not flag("NO_COLOR"),
            json=flag("LOG_JSON"),
            buffer_size=buffer_size,
        )

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        if self.json:
            config.with_json_format(True)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffer_size is not None:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        config.with_profiling(True)
        return config


settings = TelemetrySettings.from_env()


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached telelog logger called ``name``."""

    global _config
    if _config is None:
        _config = settings.to_config()
    logger_name = name or settings.logger_name
    if logger_name not in _LOGGERS:
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _config)
    return _LOGGERS[logger_name]


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [
        (str(key), value if isinstance(value, str) else repr(value))
        for key, value in data.items()
    ]


def _emit(log: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    structured = getattr(log, f"{level}_with", None)
    if structured is not None:
        structured(message, _pairs(data))
        return
    plain = getattr(log, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {data}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level.lower(), f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Lets the body of a ``span`` attach results to the failure report."""

    logger: Any
    name: str
    metadata: Dict[str, Any]

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = value


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, optionally tracking it as a telelog component.

    ``metadata`` is pushed as logger context for the duration of the block.
    An exception escaping the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: str(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(logger=log, name=name, metadata=dict(context))

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            report = {"span": name, **handle.metadata, "reason": str(exc)}
            _emit(log, "error", "span::fail", report)
            raise


__all__ = [
    "SpanHandle",
    "TelemetrySettings",
    "get_logger",
    "record_event",
    "settings",
    "span",
]
