"""Public host notification contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


class Notifier(Protocol):
    """Host-facing hooks fired by the windowing engine."""

    def on_visible_range_changed(self) -> None:
        """The visible item set may have changed."""

    def on_scroll(self, position: float) -> None:
        """Scroll offset changed without a remeasure pass."""

    def on_total_height_changed(self, total: float) -> None:
        """Total content height was recomputed."""

    def on_height_map_changed(self, index: int, height: float) -> None:
        """One slot's height entry changed."""


class NullNotifier:
    """No-op notifier installed when the host provides none."""

    def on_visible_range_changed(self) -> None:
        return None

    def on_scroll(self, position: float) -> None:
        return None

    def on_total_height_changed(self, total: float) -> None:
        return None

    def on_height_map_changed(self, index: int, height: float) -> None:
        return None


@dataclass(slots=True)
class CallbackNotifier(NullNotifier):
    """Route engine hooks to optional plain callables."""

    visible: Callable[[], None] | None = None
    scroll: Callable[[float], None] | None = None
    total_height: Callable[[float], None] | None = None
    height_map: Callable[[int, float], None] | None = None

    def on_visible_range_changed(self) -> None:
        if self.visible is not None:
            self.visible()

    def on_scroll(self, position: float) -> None:
        if self.scroll is not None:
            self.scroll(position)

    def on_total_height_changed(self, total: float) -> None:
        if self.total_height is not None:
            self.total_height(total)

    def on_height_map_changed(self, index: int, height: float) -> None:
        if self.height_map is not None:
            self.height_map(index, height)


class FanoutNotifier:
    """Forward every hook to each wrapped notifier in order."""

    def __init__(self, *notifiers: Notifier) -> None:
        self._notifiers = tuple(notifiers)

    @property
    def notifiers(self) -> tuple[Notifier, ...]:
        return self._notifiers

    def on_visible_range_changed(self) -> None:
        for notifier in self._notifiers:
            notifier.on_visible_range_changed()

    def on_scroll(self, position: float) -> None:
        for notifier in self._notifiers:
            notifier.on_scroll(position)

    def on_total_height_changed(self, total: float) -> None:
        for notifier in self._notifiers:
            notifier.on_total_height_changed(total)

    def on_height_map_changed(self, index: int, height: float) -> None:
        for notifier in self._notifiers:
            notifier.on_height_map_changed(index, height)


__all__ = ["CallbackNotifier", "FanoutNotifier", "Notifier", "NullNotifier"]
