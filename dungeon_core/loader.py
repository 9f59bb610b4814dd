from __future__ import annotations

import enum
import io
import os
import re
from typing import Callable, IO, List, Optional, Tuple, Union

from .debug import trace
from .grid import Grid
from .state import Level, Player
from .tiles import LEVEL_TILES, Tile, TILE_DOOR, TILE_EXIT, TILE_OPEN, TILE_PLAYER

Source = Union[str, 'os.PathLike[str]', IO[str]]

_TOKEN = re.compile(r'\S+')


class LoadError(enum.Enum):
    """Why a level could not be loaded."""
    FILE_NOT_FOUND = 'FileNotFound'
    MALFORMED_HEADER = 'MalformedHeader'
    TILE_COUNT_MISMATCH = 'TileCountMismatch'
    INVALID_TILE = 'InvalidTile'
    DOOR_EXIT_INVARIANT_VIOLATED = 'DoorExitInvariantViolated'


def _read_path(path: Union[str, 'os.PathLike[str]']) -> Optional[str]:
    try:
        # Undecodable bytes become U+FFFD and fail the tile alphabet check.
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            return f.read()
    except OSError:
        return None


def _reader_for(source: Source) -> Callable[[], Optional[str]]:
    """Returns a callable producing the full level text on every call.

    Paths are re-opened on each call. Streams can only be consumed once, so
    their text is captured up front and handed out again.
    """
    if isinstance(source, (str, os.PathLike)):
        return lambda: _read_path(source)
    text = source.read()
    return lambda: text


def _split_header(text: str) -> Tuple[List[str], str]:
    """Splits off the first four whitespace-separated tokens; returns (tokens, body)."""
    tokens: List[str] = []
    end = 0
    for m in _TOKEN.finditer(text):
        tokens.append(m.group())
        end = m.end()
        if len(tokens) == 4:
            break
    return tokens, text[end:]


def _parse_ints(tokens: List[str]) -> Optional[Tuple[int, int]]:
    if len(tokens) != 2:
        return None
    try:
        return int(tokens[0]), int(tokens[1])
    except ValueError:
        return None


def _parse_header(text: str) -> Union[Tuple[int, int, int, int, str], LoadError]:
    """Returns (rows, cols, start_row, start_col, body) or MALFORMED_HEADER."""
    tokens, body = _split_header(text)

    dims = _parse_ints(tokens[0:2])
    if dims is None or dims[0] <= 0 or dims[1] <= 0:
        trace('load', f'bad dimensions {tokens[0:2]}')
        return LoadError.MALFORMED_HEADER
    rows, cols = dims

    start = _parse_ints(tokens[2:4])
    if start is None:
        trace('load', f'bad start position {tokens[2:4]}')
        return LoadError.MALFORMED_HEADER
    start_row, start_col = start
    if not (0 <= start_row < rows and 0 <= start_col < cols):
        trace('load', f'start {start} outside {rows}x{cols}')
        return LoadError.MALFORMED_HEADER
    return rows, cols, start_row, start_col, body


def _body_tiles(body: str) -> List[Tile]:
    # Every non-whitespace character is one tile, whether or not tiles are space separated.
    return [ch for ch in body if not ch.isspace()]


def load_level(source: Source, *, accept_player_token: bool = False) -> Union[Level, LoadError]:
    """
    Loads a level description into a Level, or returns the LoadError explaining the rejection.

    Format: ``rows cols``, ``start_row start_col``, then rows * cols tiles in row-major order.
    The source is read twice: a counting pass and the parsing pass.
    A literal player marker ``o`` in the body is rejected as INVALID_TILE unless
    ``accept_player_token`` is set, in which case it is read as an open cell.
    """
    read = _reader_for(source)

    text = read()
    if text is None:
        trace('load', f'cannot open {source!r}')
        return LoadError.FILE_NOT_FOUND
    header = _parse_header(text)
    if isinstance(header, LoadError):
        return header
    rows, cols, start_row, start_col, body = header

    count = len(_body_tiles(body))
    if count != rows * cols:
        trace('load', f'expected {rows * cols} tiles, found {count}')
        return LoadError.TILE_COUNT_MISMATCH

    # Authoritative pass over a fresh read of the source.
    text = read()
    if text is None:
        return LoadError.FILE_NOT_FOUND
    header = _parse_header(text)
    if isinstance(header, LoadError):
        return header
    rows, cols, start_row, start_col, body = header
    cells = _body_tiles(body)
    if len(cells) != rows * cols:
        return LoadError.TILE_COUNT_MISMATCH

    grid = Grid(rows=rows, cols=cols, tiles=[])
    door = False
    exit_door = False
    for tile in cells:
        if tile == TILE_DOOR:
            door = True
        elif tile == TILE_EXIT:
            exit_door = True
        if tile == TILE_PLAYER:
            if not accept_player_token:
                trace('load', 'player marker in level body')
                return LoadError.INVALID_TILE
            tile = TILE_OPEN
        elif tile not in LEVEL_TILES:
            trace('load', f'invalid tile {tile!r}')
            return LoadError.INVALID_TILE
        grid.tiles.append(tile)

    if door == exit_door:
        trace('load', f'door={door} exit={exit_door}')
        return LoadError.DOOR_EXIT_INVARIANT_VIOLATED

    grid.set(start_row, start_col, TILE_PLAYER)
    trace('load', f'{rows}x{cols} start=({start_row}, {start_col})')
    return Level(grid=grid, player=Player(row=start_row, col=start_col, treasure=0))


def load_level_text(text: str, *, accept_player_token: bool = False) -> Union[Level, LoadError]:
    """Loads a level from an in-memory description rather than a file path."""
    return load_level(io.StringIO(text), accept_player_token=accept_player_token)
