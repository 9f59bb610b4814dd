from __future__ import annotations

import enum
from typing import Optional, Union

from .debug import trace
from .grid import Grid
from .tiles import TILE_OPEN, TILE_PLAYER


class ResizeError(enum.Enum):
    EMPTY_GRID = 'EmptyGrid'


def resize_grid(grid: Optional[Grid]) -> Union[Grid, ResizeError]:
    """
    Doubles both dimensions of the grid, tiling the old contents 2x2 into the new one.

    Cell (r, c) of the result copies cell (r % rows, c % cols) of the old grid, so the
    original sits top-left with copies to the right, below and diagonally.
    The player is never duplicated: only the top-left quadrant keeps the player tile.
    """
    if grid is None or grid.is_empty():
        return ResizeError.EMPTY_GRID

    old_rows, old_cols = grid.rows, grid.cols
    new = Grid.filled(old_rows * 2, old_cols * 2)
    for r, c in new.coords():
        tile = grid.at(r % old_rows, c % old_cols)
        if tile == TILE_PLAYER and (r >= old_rows or c >= old_cols):
            tile = TILE_OPEN
        new.set(r, c, tile)
    trace('resize', f'{old_rows}x{old_cols} -> {new.rows}x{new.cols}')
    return new
