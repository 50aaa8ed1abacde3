"""Tile images and drawing the map onto a surface."""

from __future__ import annotations

import os
from collections.abc import Mapping
from os import PathLike
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game_map import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap  # noqa: E402

TILE_SIZE = 64
WINDOW_SIZE = (640, 480)
WINDOW_TITLE = "so_long"
IMAGE_NAMES = ("wall", "floor", "player", "coin", "exit")

_TILE_IMAGES = {
    WALL: "wall",
    FLOOR: "floor",
    PLAYER: "player",
    COLLECTIBLE: "coin",
    EXIT: "exit",
}


class AssetError(Exception):
    """Raised when tile images are missing or cannot be loaded."""

    def __init__(self, missing) -> None:
        self.missing = tuple(missing)
        super().__init__("missing images: " + ", ".join(self.missing))


def image_name_for(tile: str) -> str:
    """Name of the image that draws a tile; unknown tiles draw as floor."""
    return _TILE_IMAGES.get(tile, "floor")


def load_images(asset_dir: str | PathLike[str]) -> dict[str, pygame.Surface]:
    """Load every tile image from asset_dir as <name>.xpm.

    Raises AssetError naming every image that could not be loaded.
    """
    directory = Path(asset_dir)
    images: dict[str, pygame.Surface] = {}
    missing: list[str] = []
    for name in IMAGE_NAMES:
        path = directory / f"{name}.xpm"
        if not path.is_file():
            missing.append(name)
            continue
        try:
            images[name] = pygame.image.load(str(path))
        except (pygame.error, OSError):
            missing.append(name)
    if missing:
        raise AssetError(missing)
    return images


class Renderer:
    """Draws a map onto a surface, one image per tile."""

    def __init__(
        self, surface: pygame.Surface, images: Mapping[str, pygame.Surface]
    ) -> None:
        missing = [name for name in IMAGE_NAMES if name not in images]
        if missing:
            raise AssetError(missing)
        self.surface = surface
        self.images = dict(images)

    def draw(self, game_map: GameMap) -> None:
        """Blit every tile of the map at its grid position."""
        for y, row in enumerate(game_map.rows):
            for x, tile in enumerate(row):
                self.surface.blit(
                    self.images[image_name_for(tile)],
                    (x * TILE_SIZE, y * TILE_SIZE),
                )