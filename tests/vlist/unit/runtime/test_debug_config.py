from __future__ import annotations

from vlist.runtime.debug_config import (
    enabled_trace,
    load_debug_config,
    resolve_log_format,
    resolve_log_level_name,
)


def test_load_debug_config_parses_flags_and_sizes(monkeypatch) -> None:
    monkeypatch.setenv("VLIST_LOG_LEVEL", "debug")
    monkeypatch.setenv("VLIST_LOG_FORMAT", "JSON")
    monkeypatch.setenv("VLIST_DEBUG_TRACE", "yes")
    monkeypatch.setenv("VLIST_DEBUG_TRACE_CAPACITY", "256")
    monkeypatch.setenv("VLIST_DEBUG_TRACE_HISTORY", "4")

    cfg = load_debug_config()
    assert cfg.log_level == "DEBUG"
    assert cfg.log_format == "json"
    assert cfg.trace_enabled is True
    assert cfg.trace_capacity == 256
    assert cfg.trace_history_depth == 4


def test_load_debug_config_defaults(monkeypatch) -> None:
    for name in (
        "VLIST_LOG_LEVEL",
        "LOG_LEVEL",
        "VLIST_LOG_FORMAT",
        "VLIST_DEBUG_TRACE",
        "VLIST_DEBUG_TRACE_CAPACITY",
        "VLIST_DEBUG_TRACE_HISTORY",
    ):
        monkeypatch.delenv(name, raising=False)

    cfg = load_debug_config()
    assert cfg.log_level == "INFO"
    assert cfg.log_format == "text"
    assert cfg.trace_enabled is False
    assert cfg.trace_capacity == 10_000
    assert cfg.trace_history_depth == 8


def test_sizes_are_clamped_and_malformed_values_fall_back(monkeypatch) -> None:
    monkeypatch.setenv("VLIST_DEBUG_TRACE_CAPACITY", "0")
    monkeypatch.setenv("VLIST_DEBUG_TRACE_HISTORY", "often")
    cfg = load_debug_config()
    assert cfg.trace_capacity == 1
    assert cfg.trace_history_depth == 8


def test_resolve_log_level_prefers_vlist_prefix(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("VLIST_LOG_LEVEL", "ERROR")
    assert resolve_log_level_name() == "ERROR"
    monkeypatch.delenv("VLIST_LOG_LEVEL")
    assert resolve_log_level_name() == "WARNING"


def test_unknown_log_format_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("VLIST_LOG_FORMAT", "xml")
    assert resolve_log_format() == "text"


def test_enabled_trace_reads_current_env(monkeypatch) -> None:
    monkeypatch.setenv("VLIST_DEBUG_TRACE", "0")
    assert enabled_trace() is False
    monkeypatch.setenv("VLIST_DEBUG_TRACE", "on")
    assert enabled_trace() is True
