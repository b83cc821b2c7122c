"""Logging setup for gridcanvas hosts."""

from __future__ import annotations

import logging
import queue
from dataclasses import dataclass, field
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

import orjson

from gridcanvas.runtime.config import LogConfig, load_log_config

_TEXT_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

_STANDARD_RECORD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    }
)


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json

    @classmethod
    def from_env(cls, env: LogConfig | None = None) -> LoggingConfig:
        """Build pipeline config from env-derived settings; files are always JSON lines."""
        resolved = env if env is not None else load_log_config()
        return cls(
            level_name=resolved.level_name,
            console_format=resolved.console_format,
            file_path=resolved.file_path,
        )


class JsonFormatter(logging.Formatter):
    """JSON formatter with extra-field preservation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extras = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_RECORD_FIELDS}
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str).decode("utf-8")


@dataclass(slots=True)
class _Pipeline:
    """Handlers this module installed on the root logger."""

    root_handler: logging.Handler
    sinks: list[logging.Handler] = field(default_factory=list)
    listener: QueueListener | None = None

    def close(self) -> None:
        if self.listener is not None:
            self.listener.stop()
        logging.getLogger().removeHandler(self.root_handler)
        for handler in (self.root_handler, *self.sinks):
            handler.close()


_PIPELINE: _Pipeline | None = None


def configure_logging(config: LoggingConfig) -> None:
    """Replace root handlers with a console sink and an optional JSON-lines file.

    With a file configured both sinks sit behind one queue so slow disks never
    block callers. A previously installed pipeline is drained and closed first.
    """
    global _PIPELINE

    shutdown_logging()
    root = logging.getLogger()
    for handler in tuple(root.handlers):
        root.removeHandler(handler)
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    console = _make_handler(logging.StreamHandler(), config.console_format)
    if not config.file_path:
        _PIPELINE = _Pipeline(root_handler=console)
        root.addHandler(console)
        return

    file_path = Path(config.file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_sink = _make_handler(
        logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True),
        config.file_format,
    )
    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    listener = QueueListener(log_queue, console, file_sink, respect_handler_level=True)
    _PIPELINE = _Pipeline(
        root_handler=QueueHandler(log_queue),
        sinks=[console, file_sink],
        listener=listener,
    )
    root.addHandler(_PIPELINE.root_handler)
    listener.start()


def shutdown_logging() -> None:
    """Drain, detach and close the installed pipeline.

    Root is left without handlers from this module; call ``configure_logging``
    or ``setup_logging`` again to resume output.
    """
    global _PIPELINE

    if _PIPELINE is None:
        return
    pipeline, _PIPELINE = _PIPELINE, None
    pipeline.close()


def setup_logging() -> None:
    """Configure logging from env vars if no handlers are present."""
    if logging.getLogger().handlers:
        return
    configure_logging(LoggingConfig.from_env())


def _make_handler(handler: logging.Handler, kind: str) -> logging.Handler:
    if kind.strip().lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    return handler
