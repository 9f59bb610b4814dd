import os
import unittest

from game import (
    GameSession,
    Grid,
    Level,
    MoveOutcome,
    TILE_PLAYER,
    load_level,
    monster_step,
    move_player,
    resize_grid,
)

HERE = os.path.dirname(os.path.abspath(__file__))
LEVEL1 = os.path.join(HERE, 'levels', 'level1.txt')


class TestDungeonBasics(unittest.TestCase):
    def test_bundled_level_loads_with_single_player(self):
        level = load_level(LEVEL1)
        self.assertIsInstance(level, Level)
        assert isinstance(level, Level)
        self.assertEqual((level.grid.rows, level.grid.cols), (6, 8))
        self.assertEqual(level.grid.find(TILE_PLAYER), [level.player.pos])

    def test_player_marker_stays_unique_through_moves_and_resize(self):
        level = load_level(LEVEL1)
        assert isinstance(level, Level)
        grid, player = level.grid, level.player
        self.assertIs(move_player(grid, player, 1, 2), MoveOutcome.MOVED_COLLECTED_TREASURE)
        grid = resize_grid(grid)
        assert isinstance(grid, Grid)
        self.assertEqual(grid.find(TILE_PLAYER), [(1, 2)])
        self.assertEqual(player.treasure, 1)

    def test_pillar_shields_player_from_monster(self):
        level = load_level(LEVEL1)
        assert isinstance(level, Level)
        # The monster at (1, 6) is behind the pillar at (1, 4)
        for _ in range(3):
            self.assertFalse(monster_step(level.grid, level.player))
        self.assertEqual(level.grid.at(1, 6), 'M')

    def test_session_walks_bundled_level_to_amulet(self):
        session = GameSession.start(LEVEL1, monsters=False)
        self.assertIsInstance(session, GameSession)
        assert isinstance(session, GameSession)
        for key in ('a', 's', 's', 'd', 'd', 'd'):
            self.assertIs(session.play_turn(key).outcome, MoveOutcome.MOVED)
        result = session.play_turn('d')
        self.assertIs(result.outcome, MoveOutcome.MOVED_FOUND_AMULET)
        self.assertTrue(result.resized)
        self.assertEqual((session.grid.rows, session.grid.cols), (12, 16))


if __name__ == '__main__':
    unittest.main()
