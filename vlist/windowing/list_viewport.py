"""Pixel-space list-viewport helpers shared by the window model."""

from __future__ import annotations


def max_scroll(content_height: float, viewport_height: float) -> float:
    """Return the largest valid scroll offset for a viewport over content."""
    return max(0.0, float(content_height) - max(0.0, float(viewport_height)))


def clamp_scroll(scroll: float, viewport_height: float, content_height: float) -> float:
    """Clamp scroll offset to valid list viewport bounds."""
    return max(0.0, min(float(scroll), max_scroll(content_height, viewport_height)))


def scroll_fraction(scroll: float, viewport_height: float, content_height: float) -> float:
    """Return scroll position as a 0..1 fraction; 0 when nothing can scroll."""
    limit = max_scroll(content_height, viewport_height)
    if limit <= 0.0:
        return 0.0
    return clamp_scroll(scroll, viewport_height, content_height) / limit


def is_pinned(scroll: float, viewport_height: float, content_height: float) -> bool:
    """Return whether the viewport rests on either scroll extreme."""
    return scroll <= 0.0 or scroll >= max_scroll(content_height, viewport_height)
