"""Drawing a game with pygame and running the interactive loop."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import (  # noqa: E402
    FRAME_COUNT,
    KEY_DOWN,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    Direction,
    Game,
    Outcome,
)
from solong.mapfile import COLLECTIBLE, EXIT, PLAYER, WALL, MapError  # noqa: E402

TILE_SIZE = 64
MAX_WINDOW_WIDTH = 3200
MAX_WINDOW_HEIGHT = 1755
WINDOW_TITLE = "so_long"
FRAMES_PER_SECOND = 60
TICKS_PER_FRAME = 100
TEXT_COLOUR = (0, 0, 0)

_BASE_TEXTURES = {
    "wall": "wall.xpm",
    "empty": "empty.xpm",
    "avatar": "down.xpm",
    "exit": "exit.xpm",
    "collect": "collect.xpm",
}

_PLAYER_TEXTURES = {
    Direction.DOWN: "down.xpm",
    Direction.UP: "up.xpm",
    Direction.LEFT: "left.xpm",
    Direction.RIGHT: "right.xpm",
}

_PYGAME_KEYS = {
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_ESCAPE: KEY_ESCAPE,
}


def _load(path: Path) -> "pygame.Surface | None":
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        return None


class Renderer:
    """Holds the textures for a game and draws its current state."""

    def __init__(self, game: Game, texture_dir: Union[str, "os.PathLike[str]"] = "textures") -> None:
        self.game = game
        root = Path(texture_dir)

        self.textures = {name: _load(root / file) for name, file in _BASE_TEXTURES.items()}
        width, height = self.window_size()
        if width > MAX_WINDOW_WIDTH or height > MAX_WINDOW_HEIGHT:
            raise MapError("Invalide map utils!")
        if all(texture is None for texture in self.textures.values()):
            raise MapError("Invalide map utils!")

        self.player_textures = {
            direction: _load(root / file) for direction, file in _PLAYER_TEXTURES.items()
        }
        if all(texture is None for texture in self.player_textures.values()):
            raise MapError("Invalide play utils!")

        self.enemy_textures: dict[int, "pygame.Surface | None"] = {}
        if game.enemies:
            self.enemy_textures = {
                frame: _load(root / "anm" / f"anm{frame}.xpm")
                for frame in range(1, FRAME_COUNT + 1)
            }
            if all(texture is None for texture in self.enemy_textures.values()):
                raise MapError("Invalide play utils!")
        self._font: "pygame.font.Font | None" = None

    def window_size(self) -> tuple[int, int]:
        """Window size in pixels: one tile per map cell."""
        rows = self.game.grid
        width = len(rows[0]) if rows else 0
        return width * TILE_SIZE, len(rows) * TILE_SIZE

    def _put(self, surface: "pygame.Surface", x: int, y: int, texture) -> None:
        if texture is not None:
            surface.blit(texture, (x * TILE_SIZE, y * TILE_SIZE))

    def _player_texture(self):
        texture = self.player_textures.get(self.game.facing)
        if self.game.moves == 0 or texture is None:
            return self.textures["avatar"] or texture
        return texture

    def draw(self, surface: "pygame.Surface") -> None:
        """Draw the whole board, the active enemy frame and the move counter."""
        for y, row in enumerate(self.game.grid):
            for x, cell in enumerate(row):
                if cell == WALL:
                    self._put(surface, x, y, self.textures["wall"])
                    continue
                self._put(surface, x, y, self.textures["empty"])
                if cell == PLAYER:
                    self._put(surface, x, y, self._player_texture())
                elif cell == EXIT:
                    self._put(surface, x, y, self.textures["exit"])
                elif cell == COLLECTIBLE:
                    self._put(surface, x, y, self.textures["collect"])

        enemy = self.game.enemy
        frame = self.game.enemy_frame
        if enemy is not None and frame is not None:
            ex, ey = enemy
            if frame == FRAME_COUNT:
                self._put(surface, ex, ey, self.textures["empty"])
            self._put(surface, ex, ey, self.enemy_textures.get(frame))

        if self.game.moves > 0:
            self._put(surface, 0, 0, self.textures["wall"])
            if self._font is None:
                pygame.font.init()
                self._font = pygame.font.Font(None, TILE_SIZE // 2)
            text = self._font.render(str(self.game.moves), True, TEXT_COLOUR)
            surface.blit(text, (TILE_SIZE // 3, TILE_SIZE // 2))


def run(game: Game, texture_dir: Union[str, "os.PathLike[str]"] = "textures") -> Outcome:
    """Open a window and play until the game is won, lost or closed."""
    renderer = Renderer(game, texture_dir)
    pygame.init()
    try:
        screen = pygame.display.set_mode(renderer.window_size())
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        while game.outcome is Outcome.PLAYING:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.outcome = Outcome.QUIT
                elif event.type == pygame.KEYDOWN:
                    code = _PYGAME_KEYS.get(event.key)
                    if code is None:
                        continue
                    before = game.moves
                    game.press_key(code)
                    if game.moves != before:
                        print(game.moves, flush=True)
                if game.outcome is not Outcome.PLAYING:
                    break
            for _ in range(TICKS_PER_FRAME):
                if game.tick() is not Outcome.PLAYING:
                    break
            renderer.draw(screen)
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()
    return game.outcome