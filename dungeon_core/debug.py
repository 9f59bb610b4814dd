from __future__ import annotations

import os


def debug_enabled() -> bool:
    """True when DUNGEON_DEBUG is set to 1/true/yes/on."""
    return os.getenv('DUNGEON_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


def trace(tag: str, message: str) -> None:
    """Print a tagged trace line, e.g. ``[load] 3x3 start=(1, 1)``, when debugging is on."""
    if debug_enabled():
        print(f"[{tag}] {message}")
