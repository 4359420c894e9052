from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from vlist.api.factory import create_virtual_list, items_from_heights
from vlist.api.notifier import Notifier
from vlist.windowing.window import Window


class RecordingNotifier:
    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def on_visible_range_changed(self) -> None:
        self.calls.append(("visible", ()))

    def on_scroll(self, position: float) -> None:
        self.calls.append(("scroll", (position,)))

    def on_total_height_changed(self, total: float) -> None:
        self.calls.append(("total", (total,)))

    def on_height_map_changed(self, index: int, height: float) -> None:
        self.calls.append(("height_map", (index, height)))

    def named(self, name: str) -> list[tuple]:
        return [args for call_name, args in self.calls if call_name == name]

    def clear(self) -> None:
        self.calls.clear()


WindowFactory = Callable[..., Window]


@pytest.fixture
def recorder() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def make_window() -> WindowFactory:
    def _make(
        heights: Sequence[float],
        height: float,
        *,
        start_index: int = 0,
        notifier: Notifier | None = None,
    ) -> Window:
        return create_virtual_list(
            items_from_heights(heights),
            height,
            start_index=start_index,
            notifier=notifier,
        )

    return _make


@pytest.fixture
def scenario_window(make_window: WindowFactory) -> Window:
    return make_window([200, 200, 200, 1000], 500)
