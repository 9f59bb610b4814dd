from __future__ import annotations

from typing import Iterator, List, Tuple

from .grid import Coord, Grid
from .state import Player
from .tiles import TILE_MONSTER, TILE_OPEN, TILE_PILLAR

# Scan order matters: rays share the grid and run one after another.
RAY_ORDER: Tuple[Tuple[str, Coord], ...] = (
    ('up', (-1, 0)),
    ('down', (1, 0)),
    ('right', (0, 1)),
    ('left', (0, -1)),
)


def _ray(grid: Grid, origin: Coord, delta: Coord) -> Iterator[Coord]:
    """Yields cells outward from ``origin`` (exclusive) until the grid edge."""
    r, c = origin
    dr, dc = delta
    r, c = r + dr, c + dc
    while grid.in_bounds(r, c):
        yield (r, c)
        r, c = r + dr, c + dc


def _advance_on_ray(grid: Grid, player: Player, delta: Coord) -> bool:
    """Moves the nearest visible monster on one ray a step toward the player.

    Returns True if that step lands on the player.
    """
    dr, dc = delta
    for r, c in _ray(grid, player.pos, delta):
        tile = grid.at(r, c)
        if tile == TILE_PILLAR:
            return False
        if tile == TILE_MONSTER:
            nr, nc = r - dr, c - dc
            grid.set(r, c, TILE_OPEN)
            grid.set(nr, nc, TILE_MONSTER)
            return (nr, nc) == player.pos
    return False


def monster_step(grid: Grid, player: Player) -> bool:
    """
    Lets every monster with a clear straight line to the player take one step closer.

    Each of the four rays (up, down, right, left) is scanned outward from the player;
    a pillar blocks the view, and only the nearest monster on a ray moves.
    All rays are evaluated even after a capture. Returns True if any monster
    reached the player's cell.
    """
    captured: List[bool] = [_advance_on_ray(grid, player, delta) for _, delta in RAY_ORDER]
    return any(captured)
