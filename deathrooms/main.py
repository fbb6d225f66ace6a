"""Window setup and the main loop."""

from __future__ import annotations

import time

import pygame

from deathrooms.game_scene import GameScene
from deathrooms.scenes_handler import ScenesHandler
from deathrooms.static_assets import StaticAssets

_KEYS = {"W": pygame.K_w, "A": pygame.K_a, "S": pygame.K_s, "D": pygame.K_d}


class _Clock:
    def __init__(self):
        self._last = time.perf_counter()

    def restart(self):
        now = time.perf_counter()
        elapsed, self._last = now - self._last, now
        return elapsed


class _Window:
    def __init__(self, size, title, view_size=(960, 540)):
        self.screen = pygame.display.set_mode(size, vsync=1)
        pygame.display.set_caption(title)
        self.surface = pygame.Surface(view_size)
        self.view = None
        self.is_open = True

    def poll_events(self):
        return pygame.event.get()

    def close(self):
        self.is_open = False

    def clear(self, color):
        self.surface.fill(color)

    def display(self):
        pygame.transform.scale(self.surface, self.screen.get_size(), self.screen)
        pygame.display.flip()


def run(handler, window, clock, max_frames=None):
    """Drive the handler until the window closes; return the frame count."""
    frames = 0
    clock.restart()
    while window.is_open and (max_frames is None or frames < max_frames):
        for event in window.poll_events():
            if event.type == pygame.QUIT:
                clock.restart()
                window.close()
            handler.call_event(event, window)
        handler.call_tick(clock.restart(), window)
        window.clear(handler.clear_color())
        handler.call_render(window)
        window.display()
        frames += 1
    handler.finish()
    return frames


def main(argv=None):
    pygame.init()
    try:
        StaticAssets.load()
        handler = ScenesHandler()
        handler.push_scene(
            "GAME_SCENE", GameScene(lambda key: pygame.key.get_pressed()[_KEYS[key]])
        )
        window = _Window((1280, 720), "Death Rooms")
        handler.go_scene("GAME_SCENE")
        run(handler, window, _Clock())
    finally:
        pygame.quit()
    return 0