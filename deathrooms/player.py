"""The keyboard-controlled player character."""

from __future__ import annotations

import math

from deathrooms.animator import Animation, Animator
from deathrooms.entity import Entity
from deathrooms.sprite import Sprite
from deathrooms.static_assets import StaticAssets, load_texture


class Player(Entity):
    """Moves with W/A/S/D, faces its walking direction and animates."""

    _loaded = False
    _idle_texture = None
    _run_texture = None

    def __init__(self, key_state):
        super().__init__()
        self.key_state = key_state
        self.speed = 100.0
        self.sprite = Sprite(StaticAssets.null_texture)
        self.animator = Animator(self.sprite)
        self.pos = (100.0, 100.0)
        self.looking_right = True
        self._dir = [0.0, 0.0]
        self.is_moving = False
        self.sprite.scale = (1.25, 1.25)

        cls = type(self)
        if not cls._loaded:
            cls._idle_texture = load_texture(StaticAssets.path("player/idle.png"))
            cls._run_texture = load_texture(StaticAssets.path("player/run.png"))
            cls._loaded = cls._idle_texture is not None and cls._run_texture is not None

        self.animator.push_anim("IDLE", Animation(cls._idle_texture, 8, 10, 192, 192, True))
        self.animator.push_anim("RUN", Animation(cls._run_texture, 6, 14, 192, 192, True))
        self.animator.set_anim("IDLE")

    def tick(self, dt, window, scene):
        if self.key_state("W"):
            self._dir[1] -= 1.0
            self.is_moving = True
        if self.key_state("S"):
            self._dir[1] += 1.0
            self.is_moving = True
        if self.key_state("A"):
            self._dir[0] -= 1.0
            self.looking_right = False
            self.is_moving = True
        if self.key_state("D"):
            self._dir[0] += 1.0
            self.looking_right = True
            self.is_moving = True

        sx, sy = self.sprite.scale
        if (self.looking_right and sx < 0) or (not self.looking_right and sx > 0):
            self.sprite.scale = (-sx, sy)

        if self.is_moving:
            length = math.hypot(*self._dir)
            if length != 0.0:
                step = self.speed * dt / length
                self.pos = (self.pos[0] + self._dir[0] * step, self.pos[1] + self._dir[1] * step)
                self._dir = [0.0, 0.0]
            self.animator.set_anim("RUN")
        else:
            self.animator.set_anim("IDLE")

        self.sprite.position = self.pos
        self.animator.tick(dt)
        self.is_moving = False
        self.rect = self.sprite.global_bounds()

    def render(self, window):
        view = getattr(window, "view", None)
        offset = view.offset() if view is not None else (0.0, 0.0)
        self.sprite.draw(window.surface, offset)

    def finish(self):
        if type(self)._loaded:
            type(self)._idle_texture = None