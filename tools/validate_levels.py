#!/usr/bin/env python3
"""
Check dungeon level files and summarize which ones load.

- Accepts level files and/or directories (every *.txt inside is checked).
- Prints a JSON object mapping each path to "ok" or the LoadError name.
- Exits with status 1 if any level is rejected.

Usage:
  python tools/validate_levels.py levels/
  python tools/validate_levels.py levels/level1.txt levels/level2.txt
"""
from __future__ import annotations

import json
import os
import sys
from typing import Dict, List

# Ensure we can import the core package from the repo root
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from dungeon_core.loader import LoadError, load_level  # noqa: E402


def collect_paths(args: List[str]) -> List[str]:
    paths: List[str] = []
    for arg in args:
        if os.path.isdir(arg):
            paths.extend(sorted(
                os.path.join(arg, name) for name in os.listdir(arg) if name.endswith('.txt')
            ))
        else:
            paths.append(arg)
    return paths


def validate(paths: List[str]) -> Dict[str, str]:
    summary: Dict[str, str] = {}
    for path in paths:
        result = load_level(path)
        summary[path] = result.value if isinstance(result, LoadError) else 'ok'
    return summary


def main(argv: List[str]) -> int:
    if not argv:
        print('usage: validate_levels.py LEVEL_OR_DIR [...]', file=sys.stderr)
        return 2
    paths = collect_paths(argv)
    if not paths:
        print('error: no level files found', file=sys.stderr)
        return 2
    summary = validate(paths)
    print(json.dumps(summary, indent=2))
    return 0 if all(v == 'ok' for v in summary.values()) else 1


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
