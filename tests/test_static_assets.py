from pathlib import Path

import pygame

from deathrooms.static_assets import StaticAssets, load_texture


def test_path_joins_root(tmp_path):
    StaticAssets.load(tmp_path)
    assert StaticAssets.path("player/idle.png") == tmp_path / "player" / "idle.png"


def test_missing_texture_reports_failure(tmp_path, capsys):
    assert load_texture(tmp_path / "nope.png") is None
    assert "Failed to load a texture" in capsys.readouterr().err


def test_load_reads_null_texture(tmp_path):
    surface = pygame.Surface((3, 5))
    pygame.image.save(surface, str(tmp_path / "null_texture.png"))
    StaticAssets.load(tmp_path)
    assert StaticAssets.null_texture.get_size() == (3, 5)
    StaticAssets.load(Path("./assets"))