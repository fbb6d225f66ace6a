"""Frame-strip animations played on a sprite."""

from __future__ import annotations

from dataclasses import dataclass, field

from deathrooms.sprite import Sprite


@dataclass(init=False)
class Animation:
    """A horizontal strip of equally sized frames in one texture."""

    texture: object = None
    frames: int = 0
    frame_h: int = 0
    frame_w: int = 0
    delay: float = 0.0
    is_loop: bool = False

    def __init__(self, texture=None, frames=0, fps=0, frame_h=0, frame_w=0, loop=False):
        self.texture = texture
        self.frames = frames
        self.delay = 0.0 if fps == 0 else 1.0 / float(fps)
        self.frame_h = frame_h
        self.frame_w = frame_w
        self.is_loop = loop


class Animator:
    """Switches between named animations and advances the current one."""

    def __init__(self, sprite: Sprite):
        self.sprite = sprite
        self.frame = 0
        self._current: str | None = None
        self._animations: dict[str, Animation] = {}
        self._timer = 0.0

    def push_anim(self, name, animation):
        self._animations[name] = animation

    def set_anim(self, name):
        """Start the named animation; unknown names and the current one are ignored."""
        if self._current == name or name not in self._animations:
            return
        self._current = name
        self.frame = 0
        self._timer = 0.0
        anim = self._animations[name]
        self.sprite.set_texture(anim.texture)
        self.sprite.set_texture_rect((0, 0, anim.frame_w, anim.frame_h))
        self.sprite.origin = self.sprite.local_bounds().center

    def tick(self, dt):
        if self._current is None:
            return
        anim = self._animations[self._current]
        if self.frame + 1 >= anim.frames:
            if not anim.is_loop:
                return
            self.frame = 0
        else:
            self.frame += 1
        self._timer += dt
        if self._timer >= anim.delay:
            self.sprite.set_texture_rect(
                (self.frame * anim.frame_w, 0, anim.frame_w, anim.frame_h)
            )
            self._timer = 0.0

    def current_anim(self):
        """Name of the playing animation, or None."""
        return self._current