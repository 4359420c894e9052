"""Virtual-scrolling window and height-estimation engine."""

from vlist.api import (
    CallbackNotifier,
    FanoutNotifier,
    Notifier,
    NullNotifier,
    create_virtual_list,
    items_from_heights,
)
from vlist.windowing import (
    Collection,
    DetachedItemError,
    Edge,
    InvariantViolationError,
    Item,
    OutOfRangeError,
    ReentrantReportError,
    VirtualListError,
    Window,
)

__all__ = [
    "CallbackNotifier",
    "Collection",
    "DetachedItemError",
    "Edge",
    "FanoutNotifier",
    "InvariantViolationError",
    "Item",
    "Notifier",
    "NullNotifier",
    "OutOfRangeError",
    "ReentrantReportError",
    "VirtualListError",
    "Window",
    "create_virtual_list",
    "items_from_heights",
]
