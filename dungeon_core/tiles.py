from __future__ import annotations

from typing import FrozenSet

Tile = str  # one of TILES

TILE_OPEN = '-'
TILE_PLAYER = 'o'
TILE_PILLAR = '+'
TILE_TREASURE = '$'
TILE_AMULET = '@'
TILE_MONSTER = 'M'
TILE_DOOR = '?'
TILE_EXIT = '!'

TILES: FrozenSet[Tile] = frozenset({
    TILE_OPEN,
    TILE_PLAYER,
    TILE_PILLAR,
    TILE_TREASURE,
    TILE_AMULET,
    TILE_MONSTER,
    TILE_DOOR,
    TILE_EXIT,
})

# Tiles a level body may contain as-is. A literal player marker is handled
# separately by the loader.
LEVEL_TILES: FrozenSet[Tile] = TILES - {TILE_PLAYER}

# Tiles the player cannot step onto.
BLOCKING: FrozenSet[Tile] = frozenset({TILE_PILLAR, TILE_MONSTER})
