"""Notifier that keeps a bounded trace of engine notifications."""

from __future__ import annotations

from collections import deque

from vlist.diagnostics.event import EventKind, ListEvent, TraceSummary
from vlist.runtime.debug_config import DebugConfig, load_debug_config


class DiagnosticsNotifier:
    """Record notifier hooks as ``ListEvent`` values plus per-slot height history.

    Recent events are kept drop-oldest up to ``capacity``. Each slot keeps its
    last ``history_depth`` heights so estimate-to-measurement corrections can
    be inspected after the fact. Counters cover every call, including events
    already dropped from the buffer. A disabled notifier records nothing.
    """

    def __init__(self, *, capacity: int = 10_000, history_depth: int = 8, enabled: bool = True) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        if history_depth <= 0:
            raise ValueError("history_depth must be > 0")
        self._enabled = bool(enabled)
        self._events: deque[ListEvent] = deque(maxlen=int(capacity))
        self._history_depth = int(history_depth)
        self._slot_history: dict[int, deque[float]] = {}
        self._seq = 0
        self._counts: dict[EventKind, int] = dict.fromkeys(EventKind, 0)
        self._last_scroll_top: float | None = None
        self._last_total_height: float | None = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def capacity(self) -> int:
        return self._events.maxlen or 0

    def on_visible_range_changed(self) -> None:
        self._record(EventKind.VISIBLE)

    def on_scroll(self, position: float) -> None:
        if self._record(EventKind.SCROLL, float(position)):
            self._last_scroll_top = float(position)

    def on_total_height_changed(self, total: float) -> None:
        if self._record(EventKind.TOTAL_HEIGHT, float(total)):
            self._last_total_height = float(total)

    def on_height_map_changed(self, index: int, height: float) -> None:
        if not self._record(EventKind.SLOT_HEIGHT, float(height), int(index)):
            return
        history = self._slot_history.get(int(index))
        if history is None:
            history = deque(maxlen=self._history_depth)
            self._slot_history[int(index)] = history
        history.append(float(height))

    def events(self, kind: EventKind | None = None, *, limit: int | None = None) -> list[ListEvent]:
        """Buffered events oldest first, optionally filtered and cut to the newest ``limit``."""
        selected = [event for event in self._events if kind is None or event.kind is kind]
        if limit is None:
            return selected
        if limit <= 0:
            return []
        return selected[-int(limit) :]

    def slot_history(self, index: int) -> list[float]:
        history = self._slot_history.get(int(index))
        return list(history) if history is not None else []

    def tracked_slots(self) -> list[int]:
        return sorted(self._slot_history)

    def summary(self) -> TraceSummary:
        return TraceSummary(
            events_seen=self._seq,
            visible_changes=self._counts[EventKind.VISIBLE],
            silent_scrolls=self._counts[EventKind.SCROLL],
            total_height_updates=self._counts[EventKind.TOTAL_HEIGHT],
            slot_updates=self._counts[EventKind.SLOT_HEIGHT],
            last_scroll_top=self._last_scroll_top,
            last_total_height=self._last_total_height,
        )

    def clear(self) -> None:
        """Drop buffered events and slot history; counters keep running."""
        self._events.clear()
        self._slot_history.clear()

    def _record(self, kind: EventKind, value: float | None = None, index: int | None = None) -> bool:
        if not self._enabled:
            return False
        self._seq += 1
        self._counts[kind] += 1
        self._events.append(ListEvent(seq=self._seq, kind=kind, value=value, index=index))
        return True


def create_diagnostics_notifier(config: DebugConfig | None = None) -> DiagnosticsNotifier:
    """Build a trace notifier from debug configuration (read from env when omitted)."""
    resolved = config if config is not None else load_debug_config()
    return DiagnosticsNotifier(
        capacity=resolved.trace_capacity,
        history_depth=resolved.trace_history_depth,
        enabled=resolved.trace_enabled,
    )
