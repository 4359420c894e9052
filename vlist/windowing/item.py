"""List item slot model."""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any

from vlist.windowing.errors import DetachedItemError, InvariantViolationError

if TYPE_CHECKING:
    from vlist.windowing.collection import Collection


class Item:
    """One slot in a virtual list: a height, an index, and an opaque payload.

    ``index`` and ``owner`` are bound once by the owning collection. The owner
    is held weakly; the collection owns its items, not the other way round.
    """

    __slots__ = ("_height", "_index", "_owner_ref", "payload", "__weakref__")

    def __init__(self, height: float, payload: Any | None = None) -> None:
        if height < 0:
            raise ValueError("item height must be >= 0")
        self._height = float(height)
        self._index: int | None = None
        self._owner_ref: weakref.ReferenceType[Collection] | None = None
        self.payload = payload

    def __repr__(self) -> str:
        return f"Item(index={self._index}, height={self._height:g})"

    @property
    def height(self) -> float:
        return self._height

    @property
    def index(self) -> int | None:
        return self._index

    @property
    def owner(self) -> Collection | None:
        if self._owner_ref is None:
            return None
        return self._owner_ref()

    def report_height(self, height: float | None = None) -> None:
        """Report a measured height to the owning collection.

        ``None`` re-reports the current height, which marks the slot observed
        without changing its size.
        """
        owner = self.owner
        if owner is None:
            raise DetachedItemError(f"{self!r} is not attached to a collection")
        owner.report_height(self, height)

    def load(self) -> None:
        """Mark this item as rendered at its current height."""
        self.report_height(None)

    def _bind(self, owner: Collection, index: int) -> None:
        if self._index is not None:
            raise InvariantViolationError(f"{self!r} already bound to index {self._index}")
        self._index = int(index)
        self._owner_ref = weakref.ref(owner)

    def _set_height(self, height: float) -> None:
        self._height = float(height)
