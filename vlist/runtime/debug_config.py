"""Debug configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

_LOG_FORMATS = frozenset({"text", "json"})


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(name: str, default: int, *, minimum: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        value = default
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = default
    if minimum is None:
        return value
    return max(minimum, value)


@dataclass(frozen=True, slots=True)
class DebugConfig:
    """Immutable debug configuration."""

    log_level: str
    log_format: str
    trace_enabled: bool
    trace_capacity: int
    trace_history_depth: int


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with vlist-prefixed override."""
    value = os.getenv("VLIST_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def resolve_log_format(default: str = "text") -> str:
    value = os.getenv("VLIST_LOG_FORMAT", default).strip().lower()
    return value if value in _LOG_FORMATS else default


def load_debug_config() -> DebugConfig:
    """Load immutable debug configuration from env vars."""
    return DebugConfig(
        log_level=resolve_log_level_name(),
        log_format=resolve_log_format(),
        trace_enabled=_flag("VLIST_DEBUG_TRACE", False),
        trace_capacity=_int("VLIST_DEBUG_TRACE_CAPACITY", 10_000, minimum=1),
        trace_history_depth=_int("VLIST_DEBUG_TRACE_HISTORY", 8, minimum=1),
    )


def enabled_trace() -> bool:
    return load_debug_config().trace_enabled
