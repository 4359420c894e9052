"""Public vlist logging API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from vlist.diagnostics.json_codec import dumps_text

# Attributes every LogRecord carries; anything else came in through ``extra``.
_STANDARD_RECORD_FIELDS = frozenset(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__) | {
    "message",
    "asctime",
}


@dataclass(frozen=True, slots=True)
class VListLoggingConfig:
    """Sinks for the ``vlist`` logger tree."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json
    propagate: bool = False


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Engine messages lead with a snake_case event name (``anchor_shift
    index=3 delta=40``); that token is lifted into ``event``. Extra record
    attributes land under ``fields``.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": message,
        }
        head = message.split(" ", 1)[0]
        if head.isidentifier() and head.islower():
            payload["event"] = head
        extras = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_RECORD_FIELDS}
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload)


__all__ = ["JsonFormatter", "VListLoggingConfig"]
