"""Diagnostics core package."""

from vlist.diagnostics.event import EventKind, ListEvent, TraceSummary
from vlist.diagnostics.json_codec import dumps_bytes, dumps_text
from vlist.diagnostics.notifier import DiagnosticsNotifier, create_diagnostics_notifier
from vlist.diagnostics.snapshot import capture_state, dumps_state

__all__ = [
    "DiagnosticsNotifier",
    "EventKind",
    "ListEvent",
    "TraceSummary",
    "capture_state",
    "create_diagnostics_notifier",
    "dumps_bytes",
    "dumps_state",
    "dumps_text",
]
