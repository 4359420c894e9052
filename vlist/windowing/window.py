"""Viewing region over a collection."""

from __future__ import annotations

import logging

from vlist.api.notifier import Notifier, NullNotifier
from vlist.windowing.collection import Collection
from vlist.windowing.item import Item
from vlist.windowing.list_viewport import clamp_scroll, max_scroll, scroll_fraction

_LOG = logging.getLogger("vlist.window")


class Window:
    """Fixed-height viewport that scrolls over a collection.

    Every scroll entry point clamps into ``[0, max_scroll()]``. Remeasuring
    scrolls ask each visible item to re-report its height so estimated slots
    are replaced by measured ones as they come into view.
    """

    def __init__(
        self,
        height: float,
        collection: Collection,
        *,
        start_index: int = 0,
        notifier: Notifier | None = None,
    ) -> None:
        if height < 0:
            raise ValueError("window height must be >= 0")
        self._height = float(height)
        self._scroll_top = 0.0
        self._start_index = int(start_index)
        self._collection = collection
        self._notifier: Notifier = notifier if notifier is not None else NullNotifier()

    def __repr__(self) -> str:
        return f"Window(height={self._height:g}, scroll_top={self._scroll_top:g})"

    @property
    def height(self) -> float:
        return self._height

    @property
    def scroll_top(self) -> float:
        return self._scroll_top

    @property
    def collection(self) -> Collection:
        return self._collection

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    def set_notifier(self, notifier: Notifier | None) -> None:
        self._notifier = notifier if notifier is not None else NullNotifier()

    def init(self) -> None:
        """Seed the collection's height map and scroll to the start item."""
        self._collection.initialize(self, self._start_index)

    def top(self) -> float:
        return self._scroll_top

    def bottom(self) -> float:
        return self._scroll_top + self._height

    def max_scroll(self) -> float:
        return max_scroll(self._collection.total_height, self._height)

    def percentage(self) -> float:
        """Scroll position in ``[0, 1]``; 0 when the content fits the window."""
        return scroll_fraction(self._scroll_top, self._height, self._collection.total_height)

    def visible_index_range(self) -> tuple[int, int]:
        return self._collection.visible_index_range(self)

    def visible_items(self) -> list[Item]:
        return self._collection.visible_items(self)

    def set_height(self, height: float) -> None:
        """Resize the viewport and refresh the visible set."""
        if height < 0:
            raise ValueError("window height must be >= 0")
        self._height = float(height)
        self._scroll_top = clamp_scroll(self._scroll_top, self._height, self._collection.total_height)
        _LOG.debug("window_resized height=%s scroll_top=%s", self._height, self._scroll_top)
        self.update_visible()

    def update_visible(self) -> None:
        """Notify the host and remeasure every item currently in view."""
        self._notifier.on_visible_range_changed()
        if self._collection.total_height <= 0:
            return
        for item in self.visible_items():
            item.report_height()

    def scroll_to(self, position: float, remeasure: bool = True) -> None:
        self._scroll_top = clamp_scroll(position, self._height, self._collection.total_height)
        if remeasure:
            self.update_visible()
        else:
            self._notifier.on_scroll(self._scroll_top)

    def scroll_by(self, delta: float, remeasure: bool = True) -> None:
        self.scroll_to(self._scroll_top + delta, remeasure)

    def scroll_to_percentage(self, percentage: float, remeasure: bool = True) -> None:
        self.scroll_to(percentage * self.max_scroll(), remeasure)

    def scroll_to_item_top(self, index: int, remeasure: bool = True) -> None:
        index = max(0, min(int(index), len(self._collection)))
        self.scroll_to(min(self._collection.position_of_top(index), self.max_scroll()), remeasure)

    def scroll_to_item_bottom(self, index: int, remeasure: bool = True) -> None:
        """Scroll so the bottom edge of ``index`` sits at the window top."""
        if not len(self._collection):
            self.scroll_to(0.0, remeasure)
            return
        index = max(0, min(int(index), len(self._collection) - 1))
        self.scroll_to(min(self._collection.position_of_bottom(index), self.max_scroll()), remeasure)
