"""
Dungeon crawl core Python package.

Pure-logic pieces of the game, kept free of terminal and HTTP concerns so they
can be driven by the CLI, the Flask app or the tests alike.
Modules:
- tiles.py: tile symbols and the closed tile alphabet
- grid.py: Grid
- state.py: Player, Level
- loader.py: load_level, LoadError
- resize.py: resize_grid, ResizeError
- moves.py: move_player, MoveOutcome, direction_delta
- monsters.py: monster_step
- session.py: GameSession, TurnResult
- cli.py: terminal driver
"""
