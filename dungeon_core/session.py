from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Optional, Union

from .debug import trace
from .grid import Grid
from .loader import LoadError, load_level
from .moves import MoveOutcome, apply_key
from .monsters import monster_step
from .resize import ResizeError, resize_grid
from .state import Player

_TRAILING_NUMBER = re.compile(r'(\d+)(?!.*\d)')


def next_level_path(path: str) -> Optional[str]:
    """Derives the following level's file name, e.g. ``level1.txt`` -> ``level2.txt``.

    Returns None when the file name carries no number to increment.
    """
    directory, name = os.path.split(path)
    stem, ext = os.path.splitext(name)
    m = _TRAILING_NUMBER.search(stem)
    if not m:
        return None
    number = str(int(m.group(1)) + 1).zfill(len(m.group(1)))
    return os.path.join(directory, stem[:m.start()] + number + stem[m.end():] + ext)


@dataclass(frozen=True)
class TurnResult:
    """What happened during one turn of play."""
    outcome: MoveOutcome
    captured: bool = False
    resized: bool = False
    next_level: bool = False
    escaped: bool = False
    over: bool = False


class GameSession:
    """One game in progress: the current level file, its grid and the player."""

    def __init__(
        self,
        level_path: str,
        grid: Grid,
        player: Player,
        monsters: bool = True,
        auto_resize: bool = True,
    ) -> None:
        self.level_path = level_path
        self.grid = grid
        self.player = player
        self.monsters = monsters
        self.auto_resize = auto_resize
        self.over = False

    @classmethod
    def start(cls, level_path: str, monsters: bool = True, auto_resize: bool = True) -> Union['GameSession', LoadError]:
        """Loads the first level; returns the LoadError instead when it is rejected."""
        level = load_level(level_path)
        if isinstance(level, LoadError):
            return level
        trace('session', f'started {level_path}')
        return cls(level_path, level.grid, level.player, monsters=monsters, auto_resize=auto_resize)

    def resize(self) -> bool:
        """Doubles the grid in place. Returns False if the grid could not be resized."""
        result = resize_grid(self.grid)
        if isinstance(result, ResizeError):
            return False
        self.grid = result
        return True

    def _advance_level(self) -> bool:
        nxt = next_level_path(self.level_path)
        if nxt is None:
            trace('session', f'no level follows {self.level_path}')
            return False
        level = load_level(nxt)
        if isinstance(level, LoadError):
            trace('session', f'{nxt}: {level.value}')
            return False
        # Treasure carries over between levels.
        level.player.treasure = self.player.treasure
        self.level_path = nxt
        self.grid = level.grid
        self.player = level.player
        return True

    def play_turn(self, key: str) -> TurnResult:
        """Applies one movement key, then reacts to the outcome and lets monsters pursue."""
        if self.over:
            return TurnResult(outcome=MoveOutcome.BLOCKED, over=True)

        outcome = apply_key(self.grid, self.player, key)
        trace('session', f'{key!r} -> {outcome.name} at {self.player.pos}')

        if outcome is MoveOutcome.MOVED_TO_EXIT:
            self.over = True
            return TurnResult(outcome=outcome, escaped=True, over=True)

        if outcome is MoveOutcome.MOVED_THROUGH_DOOR:
            if self._advance_level():
                return TurnResult(outcome=outcome, next_level=True)
            self.over = True
            return TurnResult(outcome=outcome, over=True)

        resized = False
        if outcome is MoveOutcome.MOVED_FOUND_AMULET and self.auto_resize:
            resized = self.resize()

        captured = False
        if self.monsters:
            captured = monster_step(self.grid, self.player)
            if captured:
                self.over = True
        return TurnResult(outcome=outcome, captured=captured, resized=resized, over=captured)

    def status_line(self) -> str:
        return f"Treasure: {self.player.treasure}  Position: ({self.player.row}, {self.player.col})"

    def render(self) -> str:
        return self.grid.pretty() + "\n" + self.status_line()
