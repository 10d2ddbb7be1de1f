"""Logging setup with JSON-lines or plain-text output for CLI runs."""

from __future__ import annotations

import json
import logging
import math
import sys
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import IO, Final

JSONScalar = str | int | float | bool | None
JSONValue = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]

_DEFAULT_LOGGER_NAME: Final[str] = "bootmeta"
_TEXT_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"

_STANDARD_LOG_RECORD_FIELDS: Final[frozenset[str]] = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "thread",
        "threadName",
        "taskName",
    }
)

_ACTIVE_HANDLE_LOCK = threading.Lock()
_ACTIVE_HANDLE: LoggingHandle | None = None


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Configuration for one CLI run's logging sinks."""

    level: int | str = "WARNING"
    log_format: str = "text"
    log_file: Path | str | None = None
    logger_name: str = _DEFAULT_LOGGER_NAME
    stream: IO[str] | None = None


class _JsonLineFormatter(logging.Formatter):
    """Formatter that emits canonical JSON objects per log line."""

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, JSONValue] = {
            "timestamp": _iso8601z_from_epoch(record.created),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extras = _extract_extra_fields(record)
        if extras:
            event["fields"] = extras

        if record.exc_info is not None:
            event["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            event["stack"] = str(record.stack_info)

        return json.dumps(event, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


class LoggingHandle:
    """Runtime handle for an active logging setup."""

    def __init__(
        self,
        *,
        logger: logging.Logger,
        handlers: tuple[logging.Handler, ...],
        log_path: Path | None,
        previous_level: int = logging.NOTSET,
        previous_propagate: bool = True,
    ) -> None:
        self.logger = logger
        self.log_path = log_path
        self._handlers = handlers
        self._previous_level = previous_level
        self._previous_propagate = previous_propagate
        self._is_shutdown = False

    @property
    def is_shutdown(self) -> bool:
        return self._is_shutdown

    def flush(self) -> None:
        for handler in self._handlers:
            handler.flush()

    def shutdown(self) -> None:
        if self._is_shutdown:
            return
        for handler in self._handlers:
            handler.flush()
            self.logger.removeHandler(handler)
            handler.close()
        self.logger.setLevel(self._previous_level)
        self.logger.propagate = self._previous_propagate
        self._is_shutdown = True


def setup_logging(
    observability_config: Mapping[str, object] | None = None,
    *,
    verbose: bool = False,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Configure logging from an ``[observability]`` mapping and return the logger.

    ``verbose`` lowers the level to ``DEBUG`` regardless of the configured level.
    """

    cfg = dict(observability_config or {})
    raw_level = cfg.get("log_level", "WARNING")
    level: int | str = raw_level if isinstance(raw_level, (int, str)) else "WARNING"
    if verbose:
        level = "DEBUG"
    raw_format = cfg.get("log_format", "text")
    raw_file = cfg.get("log_file")

    handle = setup_structured_logging(
        LoggingConfig(
            level=level,
            log_format=raw_format if isinstance(raw_format, str) else "text",
            log_file=raw_file if isinstance(raw_file, (str, Path)) and raw_file else None,
            stream=stream,
        )
    )
    return handle.logger


def setup_structured_logging(config: LoggingConfig) -> LoggingHandle:
    """Configure the package logger; any previous setup is shut down first."""

    shutdown_logging()

    level = _parse_log_level(config.level)
    formatter = _build_formatter(config.log_format)

    stream = config.stream if config.stream is not None else sys.stderr
    stream_handler = logging.StreamHandler(stream)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [stream_handler]

    log_path: Path | None = None
    if config.log_file is not None:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logger = logging.getLogger(config.logger_name)
    previous_level = logger.level
    previous_propagate = logger.propagate
    logger.setLevel(level)
    logger.propagate = False
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    for handler in handlers:
        logger.addHandler(handler)

    handle = LoggingHandle(
        logger=logger,
        handlers=tuple(handlers),
        log_path=log_path,
        previous_level=previous_level,
        previous_propagate=previous_propagate,
    )
    with _ACTIVE_HANDLE_LOCK:
        global _ACTIVE_HANDLE
        _ACTIVE_HANDLE = handle
    return handle


def shutdown_logging(handle: LoggingHandle | None = None) -> None:
    """Flush and close the given (or active) logging handle."""

    global _ACTIVE_HANDLE
    with _ACTIVE_HANDLE_LOCK:
        resolved = handle if handle is not None else _ACTIVE_HANDLE
        if resolved is not None and _ACTIVE_HANDLE is resolved:
            _ACTIVE_HANDLE = None
    if resolved is not None:
        resolved.shutdown()


def get_active_logging_handle() -> LoggingHandle | None:
    with _ACTIVE_HANDLE_LOCK:
        return _ACTIVE_HANDLE


def _build_formatter(log_format: str) -> logging.Formatter:
    normalized = log_format.strip().lower()
    if normalized == "json":
        return _JsonLineFormatter()
    if normalized == "text":
        return logging.Formatter(_TEXT_FORMAT)
    raise ValueError(f"unsupported log format {log_format!r}")


def _parse_log_level(value: int | str) -> int:
    if isinstance(value, int):
        return value

    if not isinstance(value, str):
        raise ValueError(f"level must be int or str, got {type(value).__name__}")

    parsed = logging.getLevelName(value.strip().upper())
    if isinstance(parsed, int):
        return parsed

    raise ValueError(f"unsupported logging level {value!r}")


def _iso8601z_from_epoch(epoch_seconds: float) -> str:
    timestamp = datetime.fromtimestamp(epoch_seconds, tz=UTC)
    return timestamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _extract_extra_fields(record: logging.LogRecord) -> dict[str, JSONValue]:
    fields: dict[str, JSONValue] = {}
    for key, value in record.__dict__.items():
        if key in _STANDARD_LOG_RECORD_FIELDS or key.startswith("_"):
            continue
        fields[key] = _normalize_json_value(value)
    return fields


def _normalize_json_value(value: object) -> JSONValue:
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else repr(value)
    if isinstance(value, Path):
        return value.as_posix()
    if isinstance(value, Mapping):
        return {str(key): _normalize_json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize_json_value(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return sorted((_normalize_json_value(item) for item in value), key=repr)
    return repr(value)


__all__ = [
    "JSONScalar",
    "JSONValue",
    "LoggingConfig",
    "LoggingHandle",
    "get_active_logging_handle",
    "setup_logging",
    "setup_structured_logging",
    "shutdown_logging",
]
