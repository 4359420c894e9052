"""Logging pipeline for the ``vlist`` logger tree."""

from __future__ import annotations

import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from vlist.api.logging import JsonFormatter, VListLoggingConfig
from vlist.runtime.debug_config import resolve_log_format, resolve_log_level_name

LOGGER_NAME = "vlist"

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_attached: logging.Handler | None = None
_sinks: list[logging.Handler] = []
_listener: QueueListener | None = None


def configure_vlist_logging(config: VListLoggingConfig) -> logging.Logger:
    """Install console (and optional file) sinks on the ``vlist`` logger.

    Only handlers installed here are replaced on reconfiguration; handlers a
    host added to ``vlist`` or to the root logger are left alone. A file sink
    is fed through a queue so engine calls never block on disk.
    """
    global _attached, _listener

    shutdown_vlist_logging()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))
    logger.propagate = config.propagate

    _sinks.append(_sink(logging.StreamHandler(), config.console_format))
    if config.file_path:
        path = Path(config.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        _sinks.append(_sink(logging.FileHandler(path, mode="a", encoding="utf-8", delay=True), config.file_format))

    if len(_sinks) == 1:
        _attached = _sinks[0]
    else:
        records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
        _attached = QueueHandler(records)
        _listener = QueueListener(records, *_sinks, respect_handler_level=True)
        _listener.start()
    logger.addHandler(_attached)
    return logger


def shutdown_vlist_logging() -> None:
    """Flush and detach the sinks installed by ``configure_vlist_logging``."""
    global _attached, _listener

    if _listener is not None:
        _listener.stop()
        _listener = None
    if _attached is not None:
        logging.getLogger(LOGGER_NAME).removeHandler(_attached)
        _attached = None
    for handler in _sinks:
        handler.close()
    _sinks.clear()


def setup_vlist_logging() -> None:
    """Install a console sink unless the host already configured logging."""
    if logging.getLogger(LOGGER_NAME).handlers or logging.getLogger().handlers:
        return
    configure_vlist_logging(
        VListLoggingConfig(
            level_name=resolve_log_level_name(default="INFO"),
            console_format=resolve_log_format(),
        )
    )


def get_vlist_logger(name: str) -> logging.Logger:
    """Return a logger under the ``vlist`` namespace."""
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def _sink(handler: logging.Handler, kind: str) -> logging.Handler:
    if kind.strip().lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    return handler
