# solong

A small top-down puzzle game. You walk an avatar across a tile map,
pick up every collectible and then step onto the exit. Maps may hold
enemies that come to life one after another; stand on the one that is
awake and you lose.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Playing

```
solong maps/level1.ber
```

The only argument is a map file whose extension starts with `.be`
(as in `.ber`). Use the arrow keys to move and Escape (or the window's
close button) to quit. Every arrow key press is counted: the count is
drawn in the top-left tile and printed on standard output. When the
game ends the command prints `BRAVOOOO!! YOU WIN`, `HAHAHAHA!! YOU LOSE`
or `good by` and exits with status 0, except after a loss, which exits
with status 1.

Textures are read from a `textures` directory in the current working
directory: `wall.xpm`, `empty.xpm`, `exit.xpm`, `collect.xpm`, and the
player images `down.xpm`, `up.xpm`, `left.xpm`, `right.xpm`. Maps with
enemies also need `textures/anm/anm1.xpm` to `anm10.xpm`. Images are
loaded through `pygame.image.load`. Missing files are skipped; if every
file of a group is missing the game stops with an error. A map larger
than 3200 by 1755 pixels (64-pixel tiles) is refused.

## Map format

A map is a plain text file, one row per line; empty lines are ignored.

| char | meaning                     |
|------|-----------------------------|
| `1`  | wall                        |
| `0`  | empty floor                 |
| `P`  | player start (exactly one)  |
| `E`  | exit (exactly one)          |
| `C`  | collectible (at least one)  |
| `N`  | enemy (optional)            |

A map is accepted only if all rows have the same length and it is not
square, it is fully enclosed by walls, it has the right components,
the exit can be reached from the start, and every collectible can
reach the start without passing the exit. Otherwise the command prints
`Error :` and the reason, and exits with status 1.

```
1111111111
1P0C00N0E1
1111111111
```

## Using it as a library

```python
from solong.mapfile import GameMap
from solong.paths import is_path_valid
from solong.game import Game, Direction

game_map = GameMap.from_text("1111111\n1PC00E1\n1111111\n")
assert is_path_valid(game_map)

game = Game(game_map)
outcome = game.move(Direction.RIGHT)   # picks up the collectible
```

- `solong.mapfile`: `GameMap` (`from_text`, `load`, `width`, `height`,
  `counts`, `find`, `positions`, `is_rectangular`, `is_closed`),
  `Counts`, `load_map`, which reads and validates a file and raises
  `MapError` with the reason, plus `read_map_lines` and
  `has_map_extension`.
- `solong.paths`: `exit_reachable`, `collectibles_reachable`,
  `is_path_valid`.
- `solong.game`: `Game` with `move`, `press_key` (key codes 123 to 126
  for the arrows, 53 for Escape), `tick` for the enemy animation and
  `cell`; `Direction`, `Outcome` and `animation_frame`.
- `solong.render`: `Renderer`, which draws a `Game` onto a pygame
  surface, and `run`, which opens the window and plays until the game
  ends.
- `solong.cli.main`: the `solong` command.

The package also carries standalone helpers that the game itself does
not use: `solong.ftprintf` (`format_printf` and `printf`, with the
conversions `c s d i p u x X %` on 32-bit integers) and, under
`solong.libft`, the modules `chars`, `convert`, `text`, `memory`,
`lists` (a `LinkedList` of `Node`s) and `output`.

## Tests

```
pip install .[test]
pytest
```