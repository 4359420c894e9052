"""Numpy-backed height map with observed/estimated partition and prefix sums."""

from __future__ import annotations

from enum import StrEnum

import numpy as np

from vlist.windowing.errors import OutOfRangeError


class Edge(StrEnum):
    """Span membership policy for position lookups."""

    FORWARD = "forward"  # [offset, offset + height)
    BACKWARD = "backward"  # (offset, offset + height]


class HeightMap:
    """Per-slot heights, the observed mask, and cached offsets.

    Observed slots hold measured heights. Unobserved slots hold the running
    mean of the observed ones once ``fill_estimates`` has run.
    """

    __slots__ = ("_heights", "_observed", "_prefix")

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be >= 0")
        self._heights = np.zeros(int(size), dtype=np.float64)
        self._observed = np.zeros(int(size), dtype=np.bool_)
        self._prefix: np.ndarray | None = None

    def __len__(self) -> int:
        return int(self._heights.shape[0])

    @property
    def total(self) -> float:
        prefix = self._offsets()
        if prefix.shape[0] == 0:
            return 0.0
        return float(prefix[-1])

    def values(self) -> tuple[float, ...]:
        return tuple(float(value) for value in self._heights)

    def observed_indices(self) -> frozenset[int]:
        return frozenset(int(i) for i in np.flatnonzero(self._observed))

    def is_observed(self, index: int) -> bool:
        return bool(self._observed[index])

    def observed_count(self) -> int:
        return int(np.count_nonzero(self._observed))

    def set_measured(self, index: int, height: float) -> bool:
        """Store a measured height and mark the slot observed.

        Returns whether the stored value changed.
        """
        previous = float(self._heights[index])
        self._heights[index] = float(height)
        self._observed[index] = True
        self._prefix = None
        return previous != float(height)

    def estimate(self) -> float:
        """Mean measured height over observed slots, 0 when none are observed."""
        count = self.observed_count()
        if count == 0:
            return 0.0
        return float(self._heights[self._observed].sum()) / count

    def fill_estimates(self) -> list[tuple[int, float]]:
        """Write the current estimate into every unobserved slot.

        Returns ``(index, height)`` pairs for slots whose value changed.
        """
        estimate = self.estimate()
        unobserved = ~self._observed
        changed = np.flatnonzero(unobserved & (self._heights != estimate))
        if changed.shape[0] == 0:
            return []
        self._heights[unobserved] = estimate
        self._prefix = None
        return [(int(index), estimate) for index in changed]

    def top(self, index: int) -> float:
        """Offset of the top edge of ``index``; ``top(len)`` is the total."""
        size = len(self)
        if index < 0 or index > size:
            raise OutOfRangeError(f"Index {index} outside [0, {size}]", value=index, limit=size)
        if index == 0:
            return 0.0
        return float(self._offsets()[index - 1])

    def bottom(self, index: int) -> float:
        """Offset of the bottom edge of ``index``."""
        size = len(self)
        if index < 0 or index >= size:
            raise OutOfRangeError(f"Index {index} outside [0, {size})", value=index, limit=size)
        return float(self._offsets()[index])

    def locate(self, position: float, edge: Edge = Edge.FORWARD) -> int:
        """Return the slot whose span contains ``position`` under ``edge``."""
        offsets = self._offsets()
        total = self.total
        if edge is Edge.FORWARD:
            if position < 0 or position >= total:
                raise OutOfRangeError("Position outside of list", value=position, limit=total)
            index = int(np.searchsorted(offsets, position, side="right"))
        else:
            if position <= 0 or position > total:
                raise OutOfRangeError("Position outside of list", value=position, limit=total)
            index = int(np.searchsorted(offsets, position, side="left"))
        if index >= offsets.shape[0]:
            raise OutOfRangeError("Position outside of list", value=position, limit=total)
        return index

    def _offsets(self) -> np.ndarray:
        if self._prefix is None:
            self._prefix = np.cumsum(self._heights)
        return self._prefix
