from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .loader import LoadError
from .moves import KEY_DELTA, MoveOutcome
from .session import GameSession, TurnResult

MESSAGES = {
    MoveOutcome.BLOCKED: "You can't go that way.",
    MoveOutcome.MOVED_COLLECTED_TREASURE: 'You found treasure!',
    MoveOutcome.MOVED_FOUND_AMULET: 'You found a magic amulet! The dungeon grows.',
    MoveOutcome.MOVED_THROUGH_DOOR: 'You went through a door.',
    MoveOutcome.MOVED_TO_EXIT: 'You escaped the dungeon!',
}


def describe(result: TurnResult) -> List[str]:
    """Lines to show the player after a turn."""
    lines: List[str] = []
    msg = MESSAGES.get(result.outcome)
    if msg:
        lines.append(msg)
    if result.outcome is MoveOutcome.MOVED_THROUGH_DOOR and not result.next_level:
        lines.append('There is nothing beyond this door. The game is over.')
    if result.captured:
        lines.append('A monster caught you! Game over.')
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Turn-based dungeon crawl')
    parser.add_argument('level', help='Level file, e.g. levels/level1.txt')
    parser.add_argument('--no-monsters', action='store_true', help='Monsters stay put')
    parser.add_argument('--no-resize', action='store_true', help='Amulets do not grow the dungeon')
    args = parser.parse_args(argv)

    session = GameSession.start(args.level, monsters=not args.no_monsters, auto_resize=not args.no_resize)
    if isinstance(session, LoadError):
        print(f"error: could not load {args.level}: {session.value}", file=sys.stderr)
        return 1

    print(session.render())
    keys = '/'.join(KEY_DELTA)
    while not session.over:
        try:
            text = input(f'Move [{keys}] (q = quit): ').strip().lower()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if text in ('q', 'quit'):
            break
        result = session.play_turn(text[:1])
        print(session.render())
        for line in describe(result):
            print(line)
    print(f"Final treasure: {session.player.treasure}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
