"""A small top-down pygame game on a scene-based engine with animated sprites."""

__version__ = "0.1.0"
__all__ = [
    "animator",
    "entity",
    "game_scene",
    "main",
    "player",
    "scene",
    "scenes_handler",
    "sprite",
    "static_assets",
]