"""Game state: moving the player, collecting, winning and enemy patrols."""

from __future__ import annotations

import enum

from solong.mapfile import COLLECTIBLE, ENEMY, EXIT, FREE, PLAYER, WALL, GameMap, MapError

KEY_LEFT = 123
KEY_RIGHT = 124
KEY_DOWN = 125
KEY_UP = 126
KEY_ESCAPE = 53

FRAME_STEP = 500
FRAME_REPEAT = 4000
FRAME_REPEATS = 5
FRAME_COUNT = 10
CYCLE_LENGTH = 21500


class Direction(enum.Enum):
    """A step on the grid as ``(dx, dy)``."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @classmethod
    def from_key(cls, key: int) -> "Direction | None":
        """Map an arrow key code to a direction, or None for other keys."""
        return _KEY_DIRECTIONS.get(key)


_KEY_DIRECTIONS = {
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
}


class Outcome(enum.Enum):
    """State of a game; the value is the message shown when it ends."""

    PLAYING = ""
    WON = "BRAVOOOO!! YOU WIN"
    LOST = "HAHAHAHA!! YOU LOSE"
    QUIT = "good by"

    @property
    def exit_code(self) -> int:
        return 1 if self is Outcome.LOST else 0


def animation_frame(tick: int) -> int | None:
    """Enemy animation frame (1 to 10) drawn at ``tick``, or None."""
    if tick == FRAME_STEP:
        return 1
    if tick == 2 * FRAME_STEP:
        return 2
    for frame in range(3, FRAME_COUNT + 1):
        base = frame * FRAME_STEP
        offset = tick - base
        if offset >= 0 and offset % FRAME_REPEAT == 0 and offset // FRAME_REPEAT < FRAME_REPEATS:
            return frame
    return None


class Game:
    """A running game on a mutable copy of a map."""

    def __init__(self, game_map: GameMap) -> None:
        start = game_map.find(PLAYER)
        if start is None:
            raise MapError("Invalide components in the map!")
        self.grid: list[list[str]] = [list(row) for row in game_map.rows]
        self.x, self.y = start
        self.facing = Direction.DOWN
        self.collectibles = game_map.counts().collectibles
        self.looted = 0
        self.moves = 0
        self.enemies: list[tuple[int, int]] = game_map.positions(ENEMY)
        self.outcome = Outcome.PLAYING
        self.enemy_frame: int | None = None
        self._clock = 0
        self._active = 0

    @property
    def player(self) -> tuple[int, int]:
        return self.x, self.y

    @property
    def enemy(self) -> tuple[int, int] | None:
        """Position of the enemy that is currently animating."""
        return self.enemies[self._active] if self.enemies else None

    def cell(self, x: int, y: int) -> str:
        """The map character at ``(x, y)``."""
        return self.grid[y][x]

    def move(self, direction: Direction) -> Outcome:
        """Try to step the player; walls and a locked exit block the step."""
        if self.outcome is not Outcome.PLAYING:
            return self.outcome
        nx, ny = self.x + direction.dx, self.y + direction.dy
        target = self.grid[ny][nx]
        if target == WALL:
            return self.outcome
        if target == EXIT and self.looted != self.collectibles:
            return self.outcome
        self.grid[self.y][self.x] = FREE
        self.x, self.y = nx, ny
        self.facing = direction
        if target == COLLECTIBLE:
            self.looted += 1
        if target == EXIT and self.looted == self.collectibles:
            self.outcome = Outcome.WON
            return self.outcome
        self.grid[ny][nx] = PLAYER
        return self.outcome

    def press_key(self, key: int) -> Outcome:
        """Handle a key code: arrows count and move, escape quits."""
        if self.outcome is not Outcome.PLAYING:
            return self.outcome
        direction = Direction.from_key(key)
        if direction is not None:
            self.moves += 1
        if key == KEY_ESCAPE:
            self.outcome = Outcome.QUIT
            return self.outcome
        if direction is not None:
            return self.move(direction)
        return self.outcome

    def tick(self) -> Outcome:
        """Advance the enemy animation by one step; touching the player loses."""
        if self.outcome is not Outcome.PLAYING or not self.enemies:
            return self.outcome
        ex, ey = self.enemies[self._active]
        if FRAME_STEP < self._clock < CYCLE_LENGTH and self.grid[ey][ex] == PLAYER:
            self.outcome = Outcome.LOST
            return self.outcome
        frame = animation_frame(self._clock)
        if frame is not None:
            self.enemy_frame = frame
        if self._clock == CYCLE_LENGTH:
            self.enemy_frame = None
            self._active = self._active + 1 if self._active + 1 < len(self.enemies) else 0
            self._clock = 0
        self._clock += 1
        return self.outcome