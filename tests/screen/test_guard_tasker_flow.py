from __future__ import annotations

import io


def _setup(width: int, height: int, sink=None):
    from PIL import Image

    from aspectguard.kernel import EventBus
    from aspectguard.screen.controller import StaticController
    from aspectguard.screen.guard import AspectRatioGuard
    from aspectguard.tasker import TASK_TOPIC, Tasker

    bus = EventBus()
    seen = []
    bus.subscribe(TASK_TOPIC, lambda tasker, event, detail: seen.append((event, detail.entry)))
    sink = sink if sink is not None else io.StringIO()
    AspectRatioGuard(warning_sink=sink).register(bus)
    controller = StaticController(Image.new("RGB", (width, height)))
    return Tasker(events=bus, controller=controller), sink, seen


def test_rejected_ratio_stops_task_before_it_runs():
    from aspectguard.tasker import POST_STOP_ENTRY, EventStatus

    tasker, sink, seen = _setup(1024, 768)
    ran = []

    result = tasker.post_task("Daily", action=lambda: ran.append(True))

    assert result.stopped is True
    assert ran == []
    assert sink.getvalue().count("Unsupported screen resolution") == 1
    assert seen == [
        (EventStatus.STARTING, "Daily"),
        (EventStatus.STARTING, POST_STOP_ENTRY),
        (EventStatus.SUCCEEDED, POST_STOP_ENTRY),
        (EventStatus.STOPPING, "Daily"),
    ]


def test_rejected_ratio_stops_task_when_warning_output_is_broken():
    class BrokenPipeSink(io.StringIO):
        def write(self, s):
            raise BrokenPipeError("stdout closed")

    tasker, _, _ = _setup(1024, 768, sink=BrokenPipeSink())
    ran = []

    result = tasker.post_task("Daily", action=lambda: ran.append(True))

    assert result.stopped is True
    assert ran == []


def test_accepted_ratio_runs_task():
    from aspectguard.tasker import EventStatus

    tasker, sink, _ = _setup(1920, 1080)
    ran = []

    result = tasker.post_task("Daily", action=lambda: ran.append(True))

    assert result.status == EventStatus.SUCCEEDED
    assert ran == [True]
    assert sink.getvalue() == ""


def test_guard_keeps_working_after_many_unusable_captures():
    from PIL import Image

    from aspectguard.screen.controller import StaticController

    class NoBoundsController:
        def cache_image(self):
            return object(), ""

    tasker, _, _ = _setup(1920, 1080)
    tasker.bind(NoBoundsController())
    for i in range(12):
        assert tasker.post_task(f"Task{i}").stopped is False

    tasker.bind(StaticController(Image.new("RGB", (800, 600))))
    assert tasker.post_task("Daily").stopped is True


def test_tasker_without_controller_runs_unguarded():
    from aspectguard.kernel import EventBus
    from aspectguard.screen.guard import AspectRatioGuard
    from aspectguard.tasker import EventStatus, Tasker

    bus = EventBus()
    AspectRatioGuard().register(bus)
    tasker = Tasker(events=bus)

    assert tasker.post_task("Daily").status == EventStatus.SUCCEEDED
