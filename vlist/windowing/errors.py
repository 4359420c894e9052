"""Windowing error taxonomy."""

from __future__ import annotations


class VirtualListError(Exception):
    """Base class for windowing engine errors."""


class OutOfRangeError(VirtualListError, IndexError):
    """A position or index query fell outside the collection extent."""

    def __init__(self, message: str, *, value: float | None = None, limit: float | None = None) -> None:
        super().__init__(message)
        self.value = value
        self.limit = limit


class InvariantViolationError(VirtualListError, AssertionError):
    """An internal precondition was broken; not recoverable at runtime."""


class DetachedItemError(VirtualListError, LookupError):
    """An item was used with a collection that does not own it."""


class ReentrantReportError(InvariantViolationError):
    """A height report was issued while another report was still running."""


__all__ = [
    "DetachedItemError",
    "InvariantViolationError",
    "OutOfRangeError",
    "ReentrantReportError",
    "VirtualListError",
]
