"""Command line entry point: validate a map and play it."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from solong.game import Game
from solong.mapfile import MapError, load_map
from solong.paths import is_path_valid
from solong.render import run

TEXTURE_DIR = Path("textures")


def _say(message: str) -> None:
    sys.stdout.write(message)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named by the single argument; return the exit code."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        _say("Error : Invalide arguments!")
        return 1
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        _say(f"Error :\n {exc}")
        return 1
    if not is_path_valid(game_map):
        _say("Error :\n Invalide path!")
        return 1
    game = Game(game_map)
    try:
        outcome = run(game, TEXTURE_DIR)
    except MapError as exc:
        _say(f"Error :\n {exc}")
        return 1
    _say(outcome.value)
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(main())