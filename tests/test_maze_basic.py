import random
import unittest

from mazecrawl.maze import generate

from maze_test_utils import room_cells


class TestBasicMaze(unittest.TestCase):
    def setUp(self):
        self.grid = generate(21, random.Random(42))

    def test_dimensions(self):
        self.assertEqual(len(self.grid), 21)
        self.assertTrue(all(len(row) == 21 for row in self.grid))

    def test_border_stays_solid(self):
        n = len(self.grid)
        for i in range(n):
            self.assertTrue(self.grid[0][i], f"Top border open at {(i, 0)}")
            self.assertTrue(self.grid[n - 1][i], f"Bottom border open at {(i, n - 1)}")
            self.assertTrue(self.grid[i][0], f"Left border open at {(0, i)}")
            self.assertTrue(self.grid[i][n - 1], f"Right border open at {(n - 1, i)}")

    def test_entry_open(self):
        self.assertFalse(self.grid[1][1])

    def test_every_room_open(self):
        for x, z in room_cells(21):
            self.assertFalse(self.grid[z][x], f"Room {(x, z)} left solid")

    def test_even_even_cells_solid(self):
        # Pillars between corridors are never carved
        for z in range(0, 21, 2):
            for x in range(0, 21, 2):
                self.assertTrue(self.grid[z][x], f"Pillar {(x, z)} carved")

    def test_grid_is_frozen(self):
        self.assertIsInstance(self.grid, tuple)
        with self.assertRaises(TypeError):
            self.grid[1][1] = True  # type: ignore[index]


def test_border_invariant_across_sizes():
    for n in (5, 7, 9, 15, 33):
        for s in range(5):
            g = generate(n, random.Random(s))
            assert all(g[0][i] and g[n - 1][i] and g[i][0] and g[i][n - 1] for i in range(n)), (n, s)
            assert g[1][1] is False


if __name__ == "__main__":
    unittest.main()
