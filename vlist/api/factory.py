"""Convenience construction for a collection and its window."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from vlist.api.notifier import Notifier

if TYPE_CHECKING:
    from vlist.windowing.item import Item
    from vlist.windowing.window import Window


def items_from_heights(heights: Iterable[float], payloads: Iterable[Any] | None = None) -> list["Item"]:
    """Build items from rendered heights, optionally pairing payloads by position."""
    from vlist.windowing.item import Item

    height_list = list(heights)
    if payloads is None:
        return [Item(height) for height in height_list]
    payload_list = list(payloads)
    if len(payload_list) != len(height_list):
        raise ValueError("heights and payloads must have the same length")
    return [Item(height, payload) for height, payload in zip(height_list, payload_list, strict=True)]


def create_virtual_list(
    items: Iterable["Item"],
    height: float,
    *,
    start_index: int = 0,
    notifier: Notifier | None = None,
    init: bool = True,
) -> "Window":
    """Create a collection plus window and, by default, run the seeding pass."""
    from vlist.windowing.collection import Collection
    from vlist.windowing.window import Window

    collection = Collection(items)
    window = Window(height, collection, start_index=start_index, notifier=notifier)
    if init:
        window.init()
    return window


__all__ = ["create_virtual_list", "items_from_heights"]
