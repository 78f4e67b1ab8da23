import os

import pygame
import pytest

from solong.game import Direction, Game
from solong.mapfile import GameMap, MapError
from solong.render import TILE_SIZE, Renderer

COLOURS = {
    "wall.xpm": (10, 10, 10),
    "empty.xpm": (200, 200, 200),
    "down.xpm": (0, 0, 255),
    "up.xpm": (0, 255, 0),
    "left.xpm": (0, 255, 255),
    "right.xpm": (255, 0, 0),
    "exit.xpm": (255, 255, 0),
    "collect.xpm": (255, 0, 255),
}
ANM_COLOURS = {n: (20 * n, 100, 50) for n in range(1, 11)}


def _write(path, colour):
    surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
    surface.fill(colour)
    png = str(path) + ".png"
    pygame.image.save(surface, png)
    os.replace(png, path)


@pytest.fixture
def textures(tmp_path):
    root = tmp_path / "textures"
    (root / "anm").mkdir(parents=True)
    for name, colour in COLOURS.items():
        _write(root / name, colour)
    for frame, colour in ANM_COLOURS.items():
        _write(root / "anm" / f"anm{frame}.xpm", colour)
    return root


def _game(text):
    return Game(GameMap.from_text(text))


def _tile(surface, x, y):
    return tuple(surface.get_at((x * TILE_SIZE + 1, y * TILE_SIZE + 1)))[:3]


BOARD = "111111\n1P0CE1\n111111\n"


def test_window_size_is_tiles(textures):
    renderer = Renderer(_game(BOARD), textures)
    assert renderer.window_size() == (6 * TILE_SIZE, 3 * TILE_SIZE)


def test_draw_places_every_component(textures):
    renderer = Renderer(_game(BOARD), textures)
    surface = pygame.Surface(renderer.window_size())
    renderer.draw(surface)
    assert _tile(surface, 0, 1) == COLOURS["wall.xpm"]
    assert _tile(surface, 1, 1) == COLOURS["down.xpm"]
    assert _tile(surface, 2, 1) == COLOURS["empty.xpm"]
    assert _tile(surface, 3, 1) == COLOURS["collect.xpm"]
    assert _tile(surface, 4, 1) == COLOURS["exit.xpm"]


def test_draw_follows_player_direction(textures):
    game = _game(BOARD)
    renderer = Renderer(game, textures)
    game.move(Direction.RIGHT)
    surface = pygame.Surface(renderer.window_size())
    renderer.draw(surface)
    assert _tile(surface, 1, 1) == COLOURS["empty.xpm"]
    assert _tile(surface, 2, 1) == COLOURS["right.xpm"]


def test_enemy_frame_is_drawn(textures):
    game = _game("1111111\n1P0NCE1\n1111111\n")
    renderer = Renderer(game, textures)
    for _ in range(501):
        game.tick()
    surface = pygame.Surface(renderer.window_size())
    renderer.draw(surface)
    assert _tile(surface, 3, 1) == ANM_COLOURS[1]


def test_enemy_tile_is_empty_before_animation(textures):
    game = _game("1111111\n1P0NCE1\n1111111\n")
    renderer = Renderer(game, textures)
    surface = pygame.Surface(renderer.window_size())
    renderer.draw(surface)
    assert _tile(surface, 3, 1) == COLOURS["empty.xpm"]


def test_missing_textures_raise(tmp_path):
    with pytest.raises(MapError, match="map utils"):
        Renderer(_game(BOARD), tmp_path / "nothing")


def test_oversized_map_raises(textures):
    wide = "1" * 51
    text = "\n".join([wide, "1PCE" + "0" * 46 + "1", wide])
    with pytest.raises(MapError):
        Renderer(_game(text), textures)