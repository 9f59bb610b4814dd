from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from .tiles import Tile, TILE_OPEN, TILE_PLAYER

Coord = Tuple[int, int]


@dataclass
class Grid:
    """Mutable rows x cols array of tiles."""
    rows: int
    cols: int
    tiles: List[Tile] = field(default_factory=list)  # row-major, length == rows * cols

    @classmethod
    def filled(cls, rows: int, cols: int, tile: Tile = TILE_OPEN) -> 'Grid':
        """Creates a grid with every cell set to the same tile."""
        return cls(rows=rows, cols=cols, tiles=[tile] * (rows * cols))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Tile]]) -> 'Grid':
        """Builds a grid from a list of rows, e.g. ``["-o-", "+$!"]``."""
        height = len(rows)
        width = len(rows[0]) if height else 0
        flat: List[Tile] = []
        for row in rows:
            if len(row) != width:
                raise ValueError('All rows must have the same length')
            flat.extend(row)
        return cls(rows=height, cols=width, tiles=flat)

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * self.cols + c

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def at(self, r: int, c: int) -> Tile:
        """Gets the tile at a given row and column."""
        if not self.in_bounds(r, c):
            raise IndexError(f'({r}, {c}) outside {self.rows}x{self.cols} grid')
        return self.tiles[self.index(r, c)]

    def set(self, r: int, c: int, tile: Tile) -> None:
        if not self.in_bounds(r, c):
            raise IndexError(f'({r}, {c}) outside {self.rows}x{self.cols} grid')
        self.tiles[self.index(r, c)] = tile

    def is_empty(self) -> bool:
        return self.rows == 0 or self.cols == 0

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the grid."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def find(self, tile: Tile) -> List[Coord]:
        """Returns every coordinate holding ``tile``, in row-major order."""
        return [(r, c) for (r, c) in self.coords() if self.at(r, c) == tile]

    def player_position(self) -> Optional[Coord]:
        hits = self.find(TILE_PLAYER)
        return hits[0] if hits else None

    def pretty(self) -> str:
        """Generates a human-readable string representation of the grid."""
        lines: List[str] = []
        for r in range(self.rows):
            start = self.index(r, 0)
            lines.append(" ".join(self.tiles[start:start + self.cols]))
        return "\n".join(lines)
