"""Registry of named scenes with one current scene."""

from __future__ import annotations

from deathrooms.scene import Scene


class SceneNotFoundError(KeyError):
    """Raised when switching to a scene that was never registered."""


class ScenesHandler:
    """Holds scenes by name and forwards the frame calls to the current one."""

    def __init__(self):
        self._scenes: dict[str, Scene] = {}
        self.current: str | None = None

    def push_scene(self, name, scene):
        self._scenes[name] = scene

    def go_scene(self, name):
        """Make the named scene current, finishing the previous one."""
        if self.current == name:
            return
        if name not in self._scenes:
            raise SceneNotFoundError(f"Scene {name} not found!")
        if self.current is not None:
            self._scenes[self.current].finish()
        self.current = name
        self._scenes[name].begin()

    def finish(self):
        """Drop every scene."""
        self._scenes.clear()
        self.current = None

    def _active(self) -> Scene | None:
        return None if self.current is None else self._scenes.get(self.current)

    def call_tick(self, dt, window):
        if (scene := self._active()) is not None:
            scene.tick(dt, window)

    def call_render(self, window):
        if (scene := self._active()) is not None:
            scene.render(window)

    def call_event(self, event, window):
        if (scene := self._active()) is not None:
            scene.event(event, window)

    def clear_color(self):
        scene = self._active()
        return (0, 0, 0) if scene is None else scene.clear_color