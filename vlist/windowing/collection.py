"""Ordered item collection with height estimation and scroll anchoring."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from vlist.api.notifier import Notifier, NullNotifier
from vlist.windowing.errors import (
    DetachedItemError,
    InvariantViolationError,
    OutOfRangeError,
    ReentrantReportError,
)
from vlist.windowing.height_map import Edge, HeightMap
from vlist.windowing.item import Item
from vlist.windowing.list_viewport import is_pinned

if TYPE_CHECKING:
    from vlist.windowing.window import Window

_LOG = logging.getLogger("vlist.collection")
_NULL_NOTIFIER = NullNotifier()


class Collection:
    """Fixed-length ordered set of items plus their height bookkeeping.

    Only a leading screenful is measured at initialization. Every other slot
    is sized by the mean of the measured ones until the host reports it.
    """

    def __init__(self, items: Iterable[Item]) -> None:
        self._items: tuple[Item, ...] = tuple(items)
        self._heights = HeightMap(len(self._items))
        self._window: Window | None = None
        self._reporting = False

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Item:
        return self._items[index]

    @property
    def items(self) -> tuple[Item, ...]:
        return self._items

    @property
    def height_map(self) -> tuple[float, ...]:
        """Snapshot of per-slot heights (measured or estimated)."""
        return self._heights.values()

    @property
    def total_height(self) -> float:
        return self._heights.total

    @property
    def observed(self) -> frozenset[int]:
        return self._heights.observed_indices()

    @property
    def window(self) -> Window | None:
        return self._window

    @property
    def initialized(self) -> bool:
        return self._window is not None

    def is_observed(self, index: int) -> bool:
        return self._heights.is_observed(index)

    def estimate(self) -> float:
        """Mean measured height over observed items; 0 when none are observed."""
        return self._heights.estimate()

    def recompute_heights(self) -> None:
        """Re-estimate every unobserved slot and refresh the total."""
        notifier = self._notifier()
        for index, height in self._heights.fill_estimates():
            notifier.on_height_map_changed(index, height)
        notifier.on_total_height_changed(self._heights.total)

    def position_of_top(self, index: int) -> float:
        return self._heights.top(index)

    def position_of_bottom(self, index: int) -> float:
        return self._heights.bottom(index)

    def index_at_position(self, position: float, edge: Edge = Edge.FORWARD) -> Item:
        """Return the item whose span contains ``position``.

        ``Edge.FORWARD`` resolves a window's top edge, ``Edge.BACKWARD`` its
        bottom edge, so a boundary pixel belongs to the item being entered
        and the item being exited respectively.
        """
        return self._items[self._heights.locate(position, edge)]

    def visible_index_range(self, window: Window) -> tuple[int, int]:
        top = window.top()
        bottom = min(window.bottom(), self._heights.total)
        if bottom <= top:
            # Zero-height window: the item under its top edge.
            edge = Edge.BACKWARD if top > 0 else Edge.FORWARD
            index = self._heights.locate(top, edge)
            return index, index
        low = self._heights.locate(top, Edge.FORWARD)
        high = self._heights.locate(bottom, Edge.BACKWARD)
        if low > high:
            raise InvariantViolationError(f"Inverted visible range {low} > {high}")
        return low, high

    def visible_items(self, window: Window | None = None) -> list[Item]:
        target = window if window is not None else self._window
        if target is None:
            raise DetachedItemError("Collection has no window")
        low, high = self.visible_index_range(target)
        return self.items_in_range(low, high)

    def items_in_range(self, first: int, last: int) -> list[Item]:
        """Return items ``first..last`` inclusive."""
        if first > last:
            raise InvariantViolationError(f"Reverse range {first} > {last}")
        if first < 0 or last >= len(self._items):
            raise OutOfRangeError(
                f"Range [{first}, {last}] outside [0, {len(self._items)})",
                value=last,
                limit=len(self._items),
            )
        return list(self._items[first : last + 1])

    def initialize(self, window: Window, start_index: int = 0) -> None:
        """Bind items, measure one screenful from ``start_index``, and scroll there."""
        if self._window is not None:
            raise InvariantViolationError("Collection is already bound to a window")
        size = len(self._items)
        if size and not 0 <= start_index < size:
            raise OutOfRangeError(
                f"Start index {start_index} outside [0, {size})", value=start_index, limit=size
            )
        self._window = window
        for index, item in enumerate(self._items):
            item._bind(self, index)

        notifier = self._notifier()
        offset = 0.0
        index = start_index
        while index < size and offset <= window.height:
            item = self._items[index]
            if self._heights.set_measured(index, item.height):
                notifier.on_height_map_changed(index, item.height)
            offset += item.height
            index += 1
        _LOG.debug(
            "collection_seeded items=%d start=%d measured=%d window_height=%s",
            size,
            start_index,
            index - start_index,
            window.height,
        )
        self.recompute_heights()
        window.scroll_to(self.position_of_top(start_index))

    def report_height(self, item: Item, new_height: float | None = None) -> None:
        """Record an authoritative height for ``item``.

        When the item lies above the item at the window's top, the window is
        shifted by the height change so on-screen content stays put.
        """
        if item.owner is not self or item.index is None:
            raise DetachedItemError(f"{item!r} is not owned by this collection")
        height = item.height if new_height is None else float(new_height)
        if height < 0:
            raise ValueError("item height must be >= 0")
        if self._reporting:
            _LOG.debug("report_height_reentrant index=%d", item.index)
            raise ReentrantReportError("report_height called while another report is running")

        self._reporting = True
        try:
            delta = height - item.height
            shift = delta if delta != 0 and self._anchors(item) else 0.0
            item._set_height(height)
            if self._heights.set_measured(item.index, height):
                self._notifier().on_height_map_changed(item.index, height)
            self.recompute_heights()
            window = self._window
            if window is not None:
                if shift:
                    _LOG.debug("anchor_shift index=%d delta=%s", item.index, shift)
                    window.scroll_by(shift, remeasure=False)
                elif window.scroll_top > window.max_scroll():
                    window.scroll_to(window.scroll_top, remeasure=False)
            _LOG.debug("height_reported index=%d height=%s delta=%s", item.index, height, delta)
        finally:
            self._reporting = False

    def _anchors(self, item: Item) -> bool:
        window = self._window
        if window is None or item.index is None:
            return False
        total = self._heights.total
        if total <= 0 or is_pinned(window.scroll_top, window.height, total):
            return False
        top_index = self._heights.locate(window.top(), Edge.FORWARD)
        return item.index < top_index

    def _notifier(self) -> Notifier:
        if self._window is None:
            return _NULL_NOTIFIER
        return self._window.notifier
