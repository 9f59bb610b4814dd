from __future__ import annotations

# Facade module that re-exports the dungeon core.
# The Flask app and the tests import from here; single-responsibility modules live under dungeon_core/*.

import sys

# Works both when imported as part of a package and directly from the repo root.
try:
    from .dungeon_core.tiles import (  # type: ignore
        Tile,
        TILES,
        TILE_OPEN,
        TILE_PLAYER,
        TILE_PILLAR,
        TILE_TREASURE,
        TILE_AMULET,
        TILE_MONSTER,
        TILE_DOOR,
        TILE_EXIT,
    )
    from .dungeon_core.grid import Grid, Coord  # type: ignore
    from .dungeon_core.state import Player, Level  # type: ignore
    from .dungeon_core.loader import LoadError, load_level, load_level_text  # type: ignore
    from .dungeon_core.resize import ResizeError, resize_grid  # type: ignore
    from .dungeon_core.moves import (  # type: ignore
        MoveOutcome,
        KEY_DELTA,
        direction_delta,
        next_position,
        move_player,
        apply_key,
    )
    from .dungeon_core.monsters import monster_step  # type: ignore
    from .dungeon_core.session import GameSession, TurnResult, next_level_path  # type: ignore
except ImportError:
    from dungeon_core.tiles import (  # type: ignore
        Tile,
        TILES,
        TILE_OPEN,
        TILE_PLAYER,
        TILE_PILLAR,
        TILE_TREASURE,
        TILE_AMULET,
        TILE_MONSTER,
        TILE_DOOR,
        TILE_EXIT,
    )
    from dungeon_core.grid import Grid, Coord  # type: ignore
    from dungeon_core.state import Player, Level  # type: ignore
    from dungeon_core.loader import LoadError, load_level, load_level_text  # type: ignore
    from dungeon_core.resize import ResizeError, resize_grid  # type: ignore
    from dungeon_core.moves import (  # type: ignore
        MoveOutcome,
        KEY_DELTA,
        direction_delta,
        next_position,
        move_player,
        apply_key,
    )
    from dungeon_core.monsters import monster_step  # type: ignore
    from dungeon_core.session import GameSession, TurnResult, next_level_path  # type: ignore


def main() -> None:
    # CLI driver delegated to dungeon_core.cli
    try:
        from .dungeon_core.cli import main as _main  # type: ignore
    except ImportError:
        from dungeon_core.cli import main as _main  # type: ignore
    sys.exit(_main())


if __name__ == '__main__':
    main()
