from __future__ import annotations

from vlist.api.notifier import CallbackNotifier, FanoutNotifier, NullNotifier


def test_null_notifier_accepts_every_hook() -> None:
    notifier = NullNotifier()
    notifier.on_visible_range_changed()
    notifier.on_scroll(10.0)
    notifier.on_total_height_changed(100.0)
    notifier.on_height_map_changed(1, 20.0)


def test_callback_notifier_routes_only_installed_callbacks() -> None:
    seen: list[tuple[str, tuple]] = []
    notifier = CallbackNotifier(
        scroll=lambda position: seen.append(("scroll", (position,))),
        height_map=lambda index, height: seen.append(("height_map", (index, height))),
    )

    notifier.on_visible_range_changed()
    notifier.on_scroll(42.0)
    notifier.on_total_height_changed(900.0)
    notifier.on_height_map_changed(3, 250.0)

    assert seen == [("scroll", (42.0,)), ("height_map", (3, 250.0))]


def test_fanout_notifier_forwards_in_order() -> None:
    seen: list[str] = []
    first = CallbackNotifier(visible=lambda: seen.append("first"))
    second = CallbackNotifier(visible=lambda: seen.append("second"))
    fanout = FanoutNotifier(first, second)

    fanout.on_visible_range_changed()
    fanout.on_total_height_changed(5.0)

    assert seen == ["first", "second"]
    assert fanout.notifiers == (first, second)


def test_window_notifies_host_during_init(make_window, recorder) -> None:
    make_window([200, 200, 200, 1000], 500, notifier=recorder)

    assert recorder.named("height_map") == [(0, 200.0), (1, 200.0), (2, 200.0), (3, 200.0)]
    assert recorder.named("visible") == [()]
    assert recorder.named("total")[0] == (800.0,)
    assert recorder.named("scroll") == []


def test_report_notifies_slot_and_total(scenario_window, recorder) -> None:
    scenario_window.set_notifier(recorder)
    collection = scenario_window.collection

    collection.report_height(collection[3], 1000)

    assert recorder.calls == [("height_map", (3, 1000.0)), ("total", (1600.0,))]


def test_estimate_changes_are_notified_per_slot(make_window, recorder) -> None:
    window = make_window([100, 100, 100, 100, 100], 150)
    window.set_notifier(recorder)
    collection = window.collection

    collection.report_height(collection[2], 400)

    assert recorder.named("height_map") == [(2, 400.0), (3, 200.0), (4, 200.0)]
