"""Plain-data snapshots of window/collection state for debugging dumps."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from vlist.diagnostics.json_codec import dumps_text
from vlist.windowing.errors import OutOfRangeError

if TYPE_CHECKING:
    from vlist.diagnostics.notifier import DiagnosticsNotifier
    from vlist.windowing.window import Window


def capture_state(window: Window, trace: DiagnosticsNotifier | None = None, *, recent: int = 20) -> dict[str, Any]:
    """Return window geometry and height bookkeeping as JSON-ready data.

    With a ``trace``, also include its counters, the newest ``recent`` events,
    and the height history of every slot it has seen change.
    """
    collection = window.collection
    visible: list[int] | None
    try:
        low, high = window.visible_index_range()
        visible = [low, high]
    except OutOfRangeError:
        visible = None
    state: dict[str, Any] = {
        "window": {
            "height": window.height,
            "scroll_top": window.scroll_top,
            "max_scroll": window.max_scroll(),
            "percentage": window.percentage(),
        },
        "collection": {
            "size": len(collection),
            "total_height": collection.total_height,
            "estimate": collection.estimate(),
            "observed": sorted(collection.observed),
            "height_map": list(collection.height_map),
        },
        "visible_range": visible,
    }
    if trace is not None:
        state["trace"] = {
            "summary": trace.summary().to_dict(),
            "recent": [event.to_dict() for event in trace.events(limit=recent)],
            "slot_history": {str(index): trace.slot_history(index) for index in trace.tracked_slots()},
        }
    return state


def dumps_state(window: Window, trace: DiagnosticsNotifier | None = None, *, pretty: bool = False) -> str:
    return dumps_text(capture_state(window, trace), pretty=pretty, sort_keys=True)
