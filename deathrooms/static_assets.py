"""Shared textures loaded from the assets directory."""

from __future__ import annotations

import sys
from pathlib import Path


def load_texture(path):
    """Load an image as a pygame surface, or return None if it cannot be read."""
    import pygame

    try:
        return pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError, OSError):
        print("Failed to load a texture", file=sys.stderr)
        return None


class StaticAssets:
    """Textures used across the game."""

    root = Path("./assets")
    null_texture = None

    @classmethod
    def path(cls, name):
        return cls.root / name

    @classmethod
    def load(cls, root=None):
        if root is not None:
            cls.root = Path(root)
        cls.null_texture = load_texture(cls.path("null_texture.png"))