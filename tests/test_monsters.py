import unittest

from game import Grid, Player, TILE_MONSTER, TILE_PLAYER, monster_step


def make(rows):
    grid = Grid.from_rows(rows)
    pos = grid.player_position()
    assert pos is not None
    return grid, Player(row=pos[0], col=pos[1])


class TestMonsterStep(unittest.TestCase):
    def test_given_monster_three_cells_above_when_stepping_then_reaches_player_on_third_call(self):
        grid, p = make(["M", "-", "-", "o"])
        self.assertFalse(monster_step(grid, p))
        self.assertEqual(grid.tiles, ["-", "M", "-", "o"])
        self.assertFalse(monster_step(grid, p))
        self.assertEqual(grid.tiles, ["-", "-", "M", "o"])
        self.assertTrue(monster_step(grid, p))
        self.assertEqual(grid.at(3, 0), TILE_MONSTER)

    def test_given_pillar_between_when_stepping_then_monster_never_moves(self):
        grid, p = make(["M", "+", "-", "o"])
        for _ in range(5):
            self.assertFalse(monster_step(grid, p))
        self.assertEqual(grid.tiles, ["M", "+", "-", "o"])

    def test_given_monsters_below_right_and_left_when_stepping_then_each_moves_toward_player(self):
        grid, p = make([
            "--o--",
            "-----",
            "--M--",
        ])
        self.assertFalse(monster_step(grid, p))
        self.assertEqual(grid.at(1, 2), TILE_MONSTER)

        grid, p = make(["M-o-M"])
        self.assertFalse(monster_step(grid, p))
        self.assertEqual(grid.tiles, ["-", "M", "o", "M", "-"])
        self.assertTrue(monster_step(grid, p))
        self.assertEqual(grid.tiles, ["-", "-", "M", "-", "-"])

    def test_given_two_monsters_on_one_ray_when_stepping_then_only_nearest_moves(self):
        grid, p = make(["M", "M", "-", "o"])
        self.assertFalse(monster_step(grid, p))
        self.assertEqual(grid.tiles, ["M", "-", "M", "o"])

    def test_given_adjacent_monsters_in_two_directions_when_stepping_then_all_rays_run(self):
        grid, p = make([
            "-M-",
            "Mo-",
            "---",
        ])
        self.assertTrue(monster_step(grid, p))
        self.assertEqual(grid.at(0, 1), "-")
        self.assertEqual(grid.at(1, 0), "-")
        self.assertEqual(grid.at(1, 1), TILE_MONSTER)

    def test_given_monster_off_axis_when_stepping_then_no_movement(self):
        grid, p = make([
            "M--",
            "-o-",
            "--M",
        ])
        self.assertFalse(monster_step(grid, p))
        self.assertEqual(grid.find(TILE_MONSTER), [(0, 0), (2, 2)])
        self.assertEqual(grid.find(TILE_PLAYER), [(1, 1)])

    def test_given_item_between_when_stepping_then_monster_moves_over_it(self):
        grid, p = make(["M$o"])
        self.assertFalse(monster_step(grid, p))
        self.assertEqual(grid.tiles, ["-", "M", "o"])

    def test_given_pillar_on_one_ray_when_stepping_then_other_rays_unaffected(self):
        grid, p = make([
            "--M--",
            "--+--",
            "M-o--",
        ])
        self.assertFalse(monster_step(grid, p))
        self.assertEqual(grid.at(0, 2), TILE_MONSTER)
        self.assertEqual(grid.at(2, 1), TILE_MONSTER)
        self.assertEqual(grid.at(2, 0), "-")


if __name__ == "__main__":
    unittest.main(verbosity=2)
