import pytest

from solong.game import (
    CYCLE_LENGTH,
    Direction,
    Game,
    Outcome,
    animation_frame,
)
from solong.mapfile import GameMap, MapError

SIMPLE = "1111111\n1P0C0E1\n1111111\n"
ENEMIES = "11111111\n1PN0C0E1\n10N00001\n11111111\n"


def make(text):
    return Game(GameMap.from_text(text))


def test_initial_state():
    game = make(SIMPLE)
    assert game.player == (1, 1)
    assert game.collectibles == 1
    assert game.looted == 0
    assert game.outcome is Outcome.PLAYING


def test_missing_player_raises():
    with pytest.raises(MapError):
        make("1111\n1CE1\n1111")


def test_wall_blocks_move():
    game = make(SIMPLE)
    assert game.move(Direction.UP) is Outcome.PLAYING
    assert game.player == (1, 1)
    assert game.move(Direction.LEFT) is Outcome.PLAYING
    assert game.player == (1, 1)


def test_move_updates_grid():
    game = make(SIMPLE)
    game.move(Direction.RIGHT)
    assert game.player == (2, 1)
    assert game.cell(1, 1) == "0"
    assert game.cell(2, 1) == "P"
    assert game.facing is Direction.RIGHT


def test_collect_and_win():
    game = make(SIMPLE)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game.looted == 1
    game.move(Direction.RIGHT)
    assert game.move(Direction.RIGHT) is Outcome.WON
    assert game.outcome.exit_code == 0


def test_exit_locked_until_collected():
    game = make("1111111\n1CPE001\n1111111")
    assert game.move(Direction.RIGHT) is Outcome.PLAYING
    assert game.player == (2, 1)
    game.move(Direction.LEFT)
    assert game.looted == 1
    game.move(Direction.RIGHT)
    assert game.move(Direction.RIGHT) is Outcome.WON


def test_direction_from_key():
    assert Direction.from_key(126) is Direction.UP
    assert Direction.from_key(125) is Direction.DOWN
    assert Direction.from_key(123) is Direction.LEFT
    assert Direction.from_key(124) is Direction.RIGHT
    assert Direction.from_key(53) is None


def test_press_key_counts_arrows_even_when_blocked():
    game = make(SIMPLE)
    game.press_key(126)
    game.press_key(124)
    game.press_key(0)
    assert game.moves == 2
    assert game.player == (2, 1)


def test_escape_quits_and_stops_input():
    game = make(SIMPLE)
    assert game.press_key(53) is Outcome.QUIT
    assert game.press_key(124) is Outcome.QUIT
    assert game.player == (1, 1)
    assert Outcome.QUIT.value == "good by"


def test_animation_frames_from_schedule():
    assert animation_frame(0) is None
    assert animation_frame(500) == 1
    assert animation_frame(1000) == 2
    assert animation_frame(1500) == 3
    assert animation_frame(5500) == 3
    assert animation_frame(17500) == 3
    assert animation_frame(21000) == 10
    assert animation_frame(21500) is None
    assert animation_frame(501) is None


def test_tick_without_enemies_is_idle():
    game = make(SIMPLE)
    for _ in range(1000):
        assert game.tick() is Outcome.PLAYING
    assert game.enemy is None
    assert game.enemy_frame is None


def test_enemy_rotation():
    game = make(ENEMIES)
    assert game.enemies == [(2, 1), (2, 2)]
    assert game.enemy == (2, 1)
    for _ in range(CYCLE_LENGTH + 1):
        game.tick()
    assert game.enemy == (2, 2)
    assert game.enemy_frame is None
    for _ in range(CYCLE_LENGTH + 1):
        game.tick()
    assert game.enemy == (2, 1)
    assert game.outcome is Outcome.PLAYING


def test_enemy_frame_follows_schedule():
    game = make(ENEMIES)
    for _ in range(501):
        game.tick()
    assert game.enemy_frame == 1
    for _ in range(500):
        game.tick()
    assert game.enemy_frame == 2


def test_touching_enemy_loses():
    game = make(ENEMIES)
    game.move(Direction.RIGHT)
    assert game.cell(2, 1) == "P"
    for _ in range(501):
        assert game.tick() is Outcome.PLAYING
    assert game.tick() is Outcome.LOST
    assert game.outcome.exit_code == 1
    assert game.move(Direction.RIGHT) is Outcome.LOST