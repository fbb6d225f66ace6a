import pytest

from deathrooms.scene import Scene
from deathrooms.scenes_handler import SceneNotFoundError, ScenesHandler


class Recorder(Scene):
    def __init__(self, color=(0, 0, 0)):
        super().__init__()
        self.clear_color = color
        self.log = []

    def begin(self):
        self.log.append("begin")

    def tick(self, dt, window):
        self.log.append(("tick", dt))

    def render(self, window):
        self.log.append("render")

    def event(self, event, window):
        self.log.append(("event", event))

    def finish(self):
        self.log.append("finish")


def test_calls_ignored_without_current_scene():
    handler = ScenesHandler()
    scene = Recorder()
    handler.push_scene("A", scene)
    handler.call_tick(0.1, None)
    handler.call_render(None)
    assert scene.log == []
    assert handler.clear_color() == (0, 0, 0)


def test_go_scene_begins_and_finishes_previous():
    handler = ScenesHandler()
    a, b = Recorder(), Recorder()
    handler.push_scene("A", a)
    handler.push_scene("B", b)
    handler.go_scene("A")
    handler.go_scene("A")
    handler.go_scene("B")
    assert a.log == ["begin", "finish"]
    assert b.log == ["begin"]
    assert handler.current == "B"


def test_unknown_scene_raises_and_keeps_current():
    handler = ScenesHandler()
    handler.push_scene("A", Recorder())
    handler.go_scene("A")
    with pytest.raises(SceneNotFoundError):
        handler.go_scene("MISSING")
    assert handler.current == "A"


def test_forwards_to_current_scene():
    handler = ScenesHandler()
    scene = Recorder(color=(35, 35, 35))
    handler.push_scene("A", scene)
    handler.go_scene("A")
    handler.call_tick(0.5, None)
    handler.call_event("e", None)
    handler.call_render(None)
    assert scene.log == ["begin", ("tick", 0.5), ("event", "e"), "render"]
    assert handler.clear_color() == (35, 35, 35)


def test_finish_drops_scenes():
    handler = ScenesHandler()
    handler.push_scene("A", Recorder())
    handler.go_scene("A")
    handler.finish()
    assert handler.current is None
    with pytest.raises(SceneNotFoundError):
        handler.go_scene("A")