from deathrooms.scene import Scene


def test_default_clear_color_is_black():
    assert Scene().clear_color == (0, 0, 0)


def test_hooks_do_nothing_by_default():
    scene = Scene()
    assert scene.begin() is None and scene.tick(0.1, None) is None
    assert scene.render(None) is None and scene.event(None, None) is None
    assert scene.finish() is None
    assert scene.clear_color == (0, 0, 0)


def test_subclass_overrides_hook():
    class Counting(Scene):
        def __init__(self):
            super().__init__()
            self.ticks = 0

        def tick(self, dt, window):
            super().tick(dt, window)
            self.ticks += 1

    scene = Counting()
    scene.tick(0.1, None)
    scene.tick(0.1, None)
    assert scene.ticks == 2

    # The base hook leaves the subclass's state untouched.
    assert Scene.tick(scene, 0.1, None) is None
    assert scene.ticks == 2

    assert scene.begin() is None
    assert scene.finish() is None
    assert scene.clear_color == Scene().clear_color == (0, 0, 0)
    assert scene.render(None) is None