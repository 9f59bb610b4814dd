from __future__ import annotations

from dataclasses import dataclass

from .grid import Coord, Grid


@dataclass
class Player:
    """The player's position and the treasure collected so far."""
    row: int
    col: int
    treasure: int = 0

    @property
    def pos(self) -> Coord:
        return (self.row, self.col)

    def move_to(self, r: int, c: int) -> None:
        self.row = r
        self.col = c


@dataclass
class Level:
    """A freshly loaded level: the grid with the player stamped on it, and the player."""
    grid: Grid
    player: Player
