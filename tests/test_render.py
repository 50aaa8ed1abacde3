import pygame
import pytest

from solong.game_map import GameMap
from solong.render import (
    IMAGE_NAMES,
    TILE_SIZE,
    AssetError,
    Renderer,
    image_name_for,
    load_images,
)

COLOURS = {
    "wall": (200, 0, 0),
    "floor": (0, 200, 0),
    "player": (0, 0, 200),
    "coin": (200, 200, 0),
    "exit": (0, 200, 200),
}


def solid_images():
    images = {}
    for name, colour in COLOURS.items():
        surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
        surface.fill(colour)
        images[name] = surface
    return images


@pytest.mark.parametrize(
    "tile, name",
    [("1", "wall"), ("0", "floor"), ("P", "player"), ("C", "coin"), ("E", "exit")],
)
def test_image_name_for_known_tiles(tile, name):
    assert image_name_for(tile) == name


def test_unknown_tile_draws_as_floor():
    assert image_name_for("X") == "floor"


def test_load_images_reports_all_missing(tmp_path):
    with pytest.raises(AssetError) as info:
        load_images(tmp_path)
    assert info.value.missing == IMAGE_NAMES


def test_load_images_reports_unreadable_file(tmp_path):
    (tmp_path / "wall.xpm").write_text("not an image", encoding="utf-8")
    with pytest.raises(AssetError) as info:
        load_images(tmp_path)
    assert "wall" in info.value.missing
    assert set(info.value.missing) == set(IMAGE_NAMES)


def test_renderer_requires_every_image():
    images = solid_images()
    del images["coin"]
    with pytest.raises(AssetError) as info:
        Renderer(pygame.Surface((TILE_SIZE, TILE_SIZE)), images)
    assert info.value.missing == ("coin",)


def test_draw_places_tiles_on_grid():
    game_map = GameMap([list("1PC"), list("E0X")])
    surface = pygame.Surface((3 * TILE_SIZE, 2 * TILE_SIZE))
    Renderer(surface, solid_images()).draw(game_map)
    expected = {
        (0, 0): "wall",
        (1, 0): "player",
        (2, 0): "coin",
        (0, 1): "exit",
        (1, 1): "floor",
        (2, 1): "floor",
    }
    for (x, y), name in expected.items():
        centre = (x * TILE_SIZE + TILE_SIZE // 2, y * TILE_SIZE + TILE_SIZE // 2)
        assert tuple(surface.get_at(centre))[:3] == COLOURS[name]


def test_draw_leaves_area_beyond_short_rows():
    game_map = GameMap([list("11"), list("1")])
    surface = pygame.Surface((2 * TILE_SIZE, 2 * TILE_SIZE))
    surface.fill((0, 0, 0))
    Renderer(surface, solid_images()).draw(game_map)
    assert tuple(surface.get_at((TILE_SIZE + 1, TILE_SIZE + 1)))[:3] == (0, 0, 0)
    assert tuple(surface.get_at((1, TILE_SIZE + 1)))[:3] == COLOURS["wall"]