import unittest

from dungeonweave.dungeon import CORRIDOR, EMPTY, FLOOR, WALL, GenerationGrid, generate
from dungeonweave.dungeon.tiles import state_to_char, state_to_name
from dungeon_test_utils import compact_config


class TestDungeonCharMapping(unittest.TestCase):
    def test_state_to_char(self):
        self.assertEqual(state_to_char(EMPTY), ' ')
        self.assertEqual(state_to_char(FLOOR), '.')
        self.assertEqual(state_to_char(WALL), '#')
        self.assertEqual(state_to_char(CORRIDOR), ',')

    def test_state_to_name(self):
        self.assertEqual(state_to_name(FLOOR), 'floor')
        self.assertEqual(state_to_name(CORRIDOR), 'corridor')

    def test_grid_rows_are_y_major(self):
        g = GenerationGrid(3, 2)
        g.set(2, 0, WALL)
        g.set(0, 1, FLOOR)
        self.assertEqual(g.rows(), ['  #', '.  '])

    def test_reset_fills_every_cell(self):
        g = GenerationGrid(4, 4)
        g.set(1, 1, FLOOR)
        g.reset()
        self.assertEqual(g.count(EMPTY), 16)

    def test_generated_grid_translation(self):
        layout = generate(compact_config(seed=101, use_organic_generation=False))
        seen = set(''.join(layout.grid.rows()))
        # minimal expectation
        self.assertIn('.', seen)
        self.assertIn('#', seen)
        self.assertTrue(seen <= {' ', '.', '#', ','})


if __name__ == '__main__':
    unittest.main()
