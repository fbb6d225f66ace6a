# Death Rooms

Death Rooms is a small top-down game built with pygame. You walk a character around a dark room, and a camera follows it. The game runs on a small engine of its own:

- `deathrooms.scene.Scene` is the base class for scenes. It has `begin`, `tick`, `render`, `event` and `finish` hooks and a `clear_color` attribute, which is black by default.
- `deathrooms.scenes_handler.ScenesHandler` keeps scenes by name. `go_scene` finishes the current scene and begins the new one. If the name is unknown it raises `SceneNotFoundError`. `call_tick`, `call_render` and `call_event` pass each frame's work to the current scene. `clear_color()` returns that scene's colour, or black when no scene is current. `finish()` removes every scene.
- `deathrooms.entity.Entity` is the base class for objects inside a scene. It has the same hooks and a bounding `rect`.
- `deathrooms.sprite.Sprite` shows a rectangle of a texture at a given position, origin and scale. A negative scale flips the image. The sprite can report its local and global bounds as a `FloatRect`.
- `deathrooms.animator.Animation` describes a horizontal strip of frames played at a given fps, with optional looping. `deathrooms.animator.Animator` switches between named animations and moves the sprite's texture rectangle from frame to frame.
- `deathrooms.player.Player` is the character. `deathrooms.game_scene.GameScene` holds the player and a 960×540 `Camera` centred on it. The scene's clear colour is dark grey.
- `deathrooms.static_assets.StaticAssets` loads shared textures from the assets directory. `load_texture` loads a single image.

## Installation

```
pip install .
```

This also installs pygame.

## Playing

Start the game from a directory that contains an `assets/` folder:

```
deathrooms
```

The game opens a 1280×720 window titled "Death Rooms". It draws a 960×540 view and scales it up to fill the window. Move with **W**, **A**, **S** and **D**. The character faces the way it walks and plays its run animation while it moves. When it stops, it plays its idle animation. It moves at 100 units per second, and diagonal movement is normalised to the same speed. Close the window to quit.

The game loads these textures, with paths relative to `assets/`:

- `null_texture.png`, the sprite's starting texture
- `player/idle.png`, an 8-frame idle strip of 192×192 frames at 10 fps
- `player/run.png`, a 6-frame run strip of 192×192 frames at 14 fps

If a texture cannot be read, the game prints `Failed to load a texture` to standard error and keeps running without drawing it.

## Using the engine

```python
from deathrooms.scene import Scene
from deathrooms.scenes_handler import ScenesHandler

class Title(Scene):
    def begin(self):
        self.clear_color = (10, 10, 40)

handler = ScenesHandler()
handler.push_scene("TITLE", Title())
handler.go_scene("TITLE")
handler.clear_color()  # (10, 10, 40)
```

`deathrooms.main.run(handler, window, clock, max_frames=None)` runs the frame loop until the window closes, or until `max_frames` frames have run. It then calls `handler.finish()` and returns the number of frames. The objects you pass in need these members:

- `window`: `is_open`, `poll_events()`, `close()`, `clear(color)` and `display()`
- `clock`: `restart()`, which returns the seconds elapsed since the last call

Events need a `type` attribute. A `pygame.QUIT` event closes the window.

`Player` and `GameScene` take a `key_state` callable. It receives `"W"`, `"A"`, `"S"` or `"D"` and returns whether that key is held down, so you can drive them without a real keyboard.

## What it does not do

The room contains only the player. There are no enemies, combat, walls, collisions, levels, menus or saved games. No textures ship with the package, so supply your own `assets/` folder.

## Tests

```
pip install .[test]
pytest
```