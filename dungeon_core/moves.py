from __future__ import annotations

import enum
from typing import Dict

from .grid import Coord, Grid
from .state import Player
from .tiles import (
    BLOCKING,
    Tile,
    TILE_AMULET,
    TILE_DOOR,
    TILE_EXIT,
    TILE_OPEN,
    TILE_PLAYER,
    TILE_TREASURE,
)


class MoveOutcome(enum.IntEnum):
    """Result of a single player step."""
    BLOCKED = 0
    MOVED = 1
    MOVED_COLLECTED_TREASURE = 2
    MOVED_FOUND_AMULET = 3
    MOVED_THROUGH_DOOR = 4
    MOVED_TO_EXIT = 5


# Row / column deltas for each movement key.
KEY_DELTA: Dict[str, Coord] = {
    'w': (-1, 0),
    's': (1, 0),
    'a': (0, -1),
    'd': (0, 1),
}

_OUTCOME_BY_TILE: Dict[Tile, MoveOutcome] = {
    TILE_OPEN: MoveOutcome.MOVED,
    TILE_TREASURE: MoveOutcome.MOVED_COLLECTED_TREASURE,
    TILE_AMULET: MoveOutcome.MOVED_FOUND_AMULET,
    TILE_DOOR: MoveOutcome.MOVED_THROUGH_DOOR,
    TILE_EXIT: MoveOutcome.MOVED_TO_EXIT,
}


def direction_delta(key: str) -> Coord:
    """Translates a movement key into a (row, col) change; unknown keys do not move."""
    return KEY_DELTA.get(key, (0, 0))


def next_position(player: Player, key: str) -> Coord:
    """The cell the player would step onto for the given key."""
    dr, dc = direction_delta(key)
    return player.row + dr, player.col + dc


def move_player(grid: Grid, player: Player, target_row: int, target_col: int) -> MoveOutcome:
    """
    Moves the player onto (target_row, target_col) if the tile there allows it.

    Leaving the grid, walking into a pillar or a monster, and reaching the exit
    without any treasure are all BLOCKED and leave grid and player untouched.
    """
    if not grid.in_bounds(target_row, target_col):
        return MoveOutcome.BLOCKED
    tile = grid.at(target_row, target_col)
    if tile in BLOCKING:
        return MoveOutcome.BLOCKED
    outcome = _OUTCOME_BY_TILE.get(tile, MoveOutcome.BLOCKED)
    if outcome is MoveOutcome.BLOCKED:
        # Stepping in place onto the player's own tile.
        return outcome
    if outcome is MoveOutcome.MOVED_TO_EXIT and player.treasure <= 0:
        return MoveOutcome.BLOCKED

    if outcome is MoveOutcome.MOVED_COLLECTED_TREASURE:
        player.treasure += 1
    grid.set(player.row, player.col, TILE_OPEN)
    player.move_to(target_row, target_col)
    grid.set(target_row, target_col, TILE_PLAYER)
    return outcome


def apply_key(grid: Grid, player: Player, key: str) -> MoveOutcome:
    """Moves the player one step in the direction of a ``w``/``a``/``s``/``d`` key."""
    target_row, target_col = next_position(player, key)
    return move_player(grid, player, target_row, target_col)
