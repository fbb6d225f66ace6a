"""A textured, transformable sprite with bounds computation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FloatRect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.left + self.width / 2, self.top + self.height / 2)


def _texture_size(texture) -> tuple[int, int]:
    return texture.get_size() if texture is not None else (0, 0)


class Sprite:
    """A region of a texture placed in the world with position, origin and scale."""

    def __init__(self, texture):
        self.texture = texture
        width, height = _texture_size(texture)
        self.texture_rect: tuple[int, int, int, int] = (0, 0, width, height)
        self.position: tuple[float, float] = (0.0, 0.0)
        self.origin: tuple[float, float] = (0.0, 0.0)
        self.scale: tuple[float, float] = (1.0, 1.0)

    def set_texture(self, texture):
        """Change the texture, keeping the current texture rectangle."""
        self.texture = texture

    def set_texture_rect(self, rect):
        self.texture_rect = tuple(int(v) for v in rect)

    def local_bounds(self) -> FloatRect:
        _, _, width, height = self.texture_rect
        return FloatRect(0.0, 0.0, float(width), float(height))

    def global_bounds(self) -> FloatRect:
        local = self.local_bounds()
        px, py = self.position
        ox, oy = self.origin
        sx, sy = self.scale
        xs = (px + (local.left - ox) * sx, px + (local.left + local.width - ox) * sx)
        ys = (py + (local.top - oy) * sy, py + (local.top + local.height - oy) * sy)
        return FloatRect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def draw(self, surface, offset=(0.0, 0.0)):
        """Blit the sprite onto a pygame surface, shifted by -offset."""
        if self.texture is None:
            return
        import pygame

        left, top, width, height = self.texture_rect
        tex_w, tex_h = _texture_size(self.texture)
        area = pygame.Rect(left, top, width, height).clip(pygame.Rect(0, 0, tex_w, tex_h))
        if area.width == 0 or area.height == 0:
            return
        image = self.texture.subsurface(area)
        sx, sy = self.scale
        bounds = self.global_bounds()
        size = (max(1, round(abs(sx) * area.width)), max(1, round(abs(sy) * area.height)))
        image = pygame.transform.scale(image, size)
        if sx < 0 or sy < 0:
            image = pygame.transform.flip(image, sx < 0, sy < 0)
        surface.blit(image, (round(bounds.left - offset[0]), round(bounds.top - offset[1])))