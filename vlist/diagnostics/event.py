"""Typed records of engine notifications."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class EventKind(StrEnum):
    """Which notifier hook produced an event."""

    VISIBLE = "visible"
    SCROLL = "scroll"
    TOTAL_HEIGHT = "total_height"
    SLOT_HEIGHT = "slot_height"


@dataclass(frozen=True, slots=True)
class ListEvent:
    """One notifier call, numbered in arrival order.

    ``value`` is the scroll offset, total height, or slot height depending on
    ``kind``; ``index`` is only set for slot events.
    """

    seq: int
    kind: EventKind
    value: float | None = None
    index: int | None = None

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"seq": self.seq, "kind": self.kind.value}
        if self.value is not None:
            payload["value"] = self.value
        if self.index is not None:
            payload["index"] = self.index
        return payload


@dataclass(frozen=True, slots=True)
class TraceSummary:
    """Read-only counters over everything a trace has seen."""

    events_seen: int
    visible_changes: int
    silent_scrolls: int
    total_height_updates: int
    slot_updates: int
    last_scroll_top: float | None
    last_total_height: float | None

    def to_dict(self) -> dict[str, object]:
        return {
            "events_seen": self.events_seen,
            "visible_changes": self.visible_changes,
            "silent_scrolls": self.silent_scrolls,
            "total_height_updates": self.total_height_updates,
            "slot_updates": self.slot_updates,
            "last_scroll_top": self.last_scroll_top,
            "last_total_height": self.last_total_height,
        }
