"""The main gameplay scene with a camera following the player."""

from __future__ import annotations

from deathrooms.player import Player
from deathrooms.scene import Scene


class Camera:
    """A view of fixed size centred on a world point."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.center = (0.0, 0.0)

    def offset(self):
        """World coordinate of the view's top-left corner."""
        return (self.center[0] - self.width / 2, self.center[1] - self.height / 2)


class GameScene(Scene):
    """Holds the player and keeps the camera on it."""

    def __init__(self, key_state):
        super().__init__()
        self.key_state = key_state
        self.camera = Camera(0.0, 0.0)
        self.player: Player | None = None

    def begin(self):
        self.camera = Camera(960.0, 540.0)
        self.clear_color = (35, 35, 35)
        self.player = Player(self.key_state)

    def tick(self, dt, window):
        self.player.tick(dt, window, self)
        self.camera.center = self.player.rect.center
        window.view = self.camera

    def render(self, window):
        self.player.render(window)

    def finish(self):
        if self.player is not None:
            self.player.finish()
            self.player = None