from __future__ import annotations

import pytest

from vlist.api.notifier import FanoutNotifier
from vlist.diagnostics import DiagnosticsNotifier, EventKind, create_diagnostics_notifier
from vlist.runtime.debug_config import DebugConfig


def test_trace_records_init_measurement_and_anchor_shift(make_window, recorder) -> None:
    trace = DiagnosticsNotifier(capacity=256)
    window = make_window(
        [200, 200, 200, 1000],
        500,
        notifier=FanoutNotifier(trace, recorder),
    )

    seeded = trace.events(EventKind.SLOT_HEIGHT)
    assert [(event.index, event.value) for event in seeded] == [(0, 200.0), (1, 200.0), (2, 200.0), (3, 200.0)]
    assert trace.events(EventKind.TOTAL_HEIGHT)[0].value == 800.0
    assert len(trace.events(EventKind.VISIBLE)) == 1

    window.scroll_to(200)
    collection = window.collection
    collection.report_height(collection[0], 500)

    assert [event.value for event in trace.events(EventKind.SCROLL)] == [500.0]
    assert recorder.named("scroll") == [(500.0,)]
    assert trace.slot_history(3) == [200.0, 1000.0]
    assert trace.slot_history(0) == [200.0, 500.0]
    assert trace.tracked_slots() == [0, 1, 2, 3]

    summary = trace.summary()
    assert summary.visible_changes == 2
    assert summary.silent_scrolls == 1
    assert summary.slot_updates == 6
    assert summary.last_scroll_top == 500.0
    assert summary.last_total_height == 1900.0


def test_events_are_numbered_in_arrival_order() -> None:
    trace = DiagnosticsNotifier(capacity=8)
    trace.on_visible_range_changed()
    trace.on_total_height_changed(300.0)
    trace.on_height_map_changed(4, 75.0)

    events = trace.events()
    assert [event.seq for event in events] == [1, 2, 3]
    assert events[2].to_dict() == {"seq": 3, "kind": "slot_height", "value": 75.0, "index": 4}
    assert events[0].to_dict() == {"seq": 1, "kind": "visible"}


def test_buffer_drops_oldest_but_summary_counts_everything() -> None:
    trace = DiagnosticsNotifier(capacity=3)
    for position in range(5):
        trace.on_scroll(float(position))

    assert [event.value for event in trace.events()] == [2.0, 3.0, 4.0]
    assert [event.value for event in trace.events(limit=2)] == [3.0, 4.0]
    assert trace.events(limit=0) == []
    assert trace.summary().silent_scrolls == 5
    assert trace.summary().events_seen == 5


def test_slot_history_is_bounded_per_slot() -> None:
    trace = DiagnosticsNotifier(capacity=64, history_depth=2)
    for height in (10.0, 20.0, 30.0):
        trace.on_height_map_changed(7, height)
    trace.on_height_map_changed(1, 5.0)

    assert trace.slot_history(7) == [20.0, 30.0]
    assert trace.slot_history(1) == [5.0]
    assert trace.slot_history(99) == []


def test_disabled_trace_records_nothing() -> None:
    trace = DiagnosticsNotifier(enabled=False)
    trace.on_scroll(12.0)
    trace.on_height_map_changed(0, 40.0)

    assert trace.events() == []
    assert trace.slot_history(0) == []
    assert trace.summary().events_seen == 0
    assert trace.summary().last_scroll_top is None


def test_clear_keeps_counters() -> None:
    trace = DiagnosticsNotifier(capacity=4)
    trace.on_height_map_changed(2, 50.0)
    trace.clear()

    assert trace.events() == []
    assert trace.tracked_slots() == []
    assert trace.summary().slot_updates == 1


def test_rejects_non_positive_sizes() -> None:
    with pytest.raises(ValueError):
        DiagnosticsNotifier(capacity=0)
    with pytest.raises(ValueError):
        DiagnosticsNotifier(history_depth=0)


def test_create_diagnostics_notifier_from_config() -> None:
    trace = create_diagnostics_notifier(
        DebugConfig(
            log_level="INFO",
            log_format="text",
            trace_enabled=True,
            trace_capacity=32,
            trace_history_depth=3,
        )
    )
    assert trace.enabled is True
    assert trace.capacity == 32


def test_create_diagnostics_notifier_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("VLIST_DEBUG_TRACE", "0")
    monkeypatch.setenv("VLIST_DEBUG_TRACE_CAPACITY", "16")
    trace = create_diagnostics_notifier()
    assert trace.enabled is False
    assert trace.capacity == 16
