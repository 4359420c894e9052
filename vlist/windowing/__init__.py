"""Virtual-list windowing core."""

from vlist.windowing.collection import Collection
from vlist.windowing.errors import (
    DetachedItemError,
    InvariantViolationError,
    OutOfRangeError,
    ReentrantReportError,
    VirtualListError,
)
from vlist.windowing.height_map import Edge, HeightMap
from vlist.windowing.item import Item
from vlist.windowing.list_viewport import clamp_scroll, is_pinned, max_scroll, scroll_fraction
from vlist.windowing.window import Window

__all__ = [
    "Collection",
    "DetachedItemError",
    "Edge",
    "HeightMap",
    "InvariantViolationError",
    "Item",
    "OutOfRangeError",
    "ReentrantReportError",
    "VirtualListError",
    "Window",
    "clamp_scroll",
    "is_pinned",
    "max_scroll",
    "scroll_fraction",
]
