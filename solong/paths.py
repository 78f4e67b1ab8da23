"""Reachability checks for the exit and the collectibles."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from solong.mapfile import COLLECTIBLE, EXIT, PLAYER, WALL, GameMap


def _connected(
    game_map: GameMap,
    start: tuple[int, int],
    goal: str,
    blocked: Iterable[str],
) -> bool:
    """Search from ``start`` for a ``goal`` cell, never entering ``blocked`` cells."""
    blocked = frozenset(blocked)
    width, height = game_map.width, game_map.height

    def cell(x: int, y: int) -> str | None:
        if not (0 <= x < width and 0 <= y < height):
            return None
        row = game_map.rows[y]
        return row[x] if x < len(row) else None

    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        value = cell(x, y)
        if value is None or value in blocked:
            continue
        if value == goal:
            return True
        for nxt in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return False


def exit_reachable(game_map: GameMap) -> bool:
    """True if the player can walk to the exit around walls."""
    start = game_map.find(PLAYER)
    if start is None:
        return False
    return _connected(game_map, start, EXIT, {WALL})


def collectibles_reachable(game_map: GameMap) -> bool:
    """True if every collectible reaches the player without crossing walls or the exit."""
    return all(
        _connected(game_map, position, PLAYER, {WALL, EXIT})
        for position in game_map.positions(COLLECTIBLE)
    )


def is_path_valid(game_map: GameMap) -> bool:
    """True if both the exit and every collectible are reachable."""
    return exit_reachable(game_map) and collectibles_reachable(game_map)