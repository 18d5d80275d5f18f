import unittest

import numpy as np

from islanddiscovery.config import ConfigError
from islanddiscovery.grid import AreaStatus, IslandGrid, parse_land_map


class IslandGridTests(unittest.TestCase):
    def test_new_grid_is_all_sea(self) -> None:
        grid = IslandGrid(4, sea_color="#000011")
        self.assertEqual(grid.count(AreaStatus.SEA), 16)
        self.assertTrue((grid.color == "#000011").all())

    def test_rejects_non_positive_size(self) -> None:
        with self.assertRaises(ConfigError):
            IslandGrid(0)

    def test_neighbors_stay_in_bounds(self) -> None:
        grid = IslandGrid(5)
        self.assertEqual(sorted(grid.neighbors(0, 0)), [(0, 1), (1, 0), (1, 1)])
        self.assertEqual(len(grid.neighbors(0, 2)), 5)
        self.assertEqual(len(grid.neighbors(2, 2)), 8)
        self.assertEqual(len(grid.neighbors(4, 4)), 3)
        self.assertNotIn((2, 2), grid.neighbors(2, 2))

    def test_accessors_check_bounds(self) -> None:
        grid = IslandGrid(3)
        grid.set_value(2, 1, AreaStatus.LAND)
        grid.set_color(2, 1, "#ABCDEF")
        self.assertEqual(grid.get_value(2, 1), AreaStatus.LAND)
        self.assertEqual(grid.get_color(2, 1), "#ABCDEF")
        for row, col in [(-1, 0), (0, 3), (3, 0)]:
            with self.assertRaises(ValueError):
                grid.get_value(row, col)
            with self.assertRaises(ValueError):
                grid.set_color(row, col, "#000000")

    def test_from_land_mask(self) -> None:
        mask = np.array([[1, 0], [0, 1]], dtype=bool)
        grid = IslandGrid.from_land_mask(mask, land_color="#111111")
        self.assertEqual(grid.count(AreaStatus.LAND), 2)
        self.assertEqual(grid.get_color(1, 1), "#111111")
        self.assertEqual(grid.get_color(0, 1), grid.sea_color)
        np.testing.assert_array_equal(grid.land_mask(), mask)

    def test_from_land_mask_requires_square(self) -> None:
        with self.assertRaises(ConfigError):
            IslandGrid.from_land_mask(np.zeros((2, 3), dtype=bool))


class ParseLandMapTests(unittest.TestCase):
    def test_parse(self) -> None:
        mask = parse_land_map("#..\n.#.\n..#\n")
        self.assertEqual(mask.shape, (3, 3))
        self.assertTrue(mask[0, 0])
        self.assertFalse(mask[0, 1])
        self.assertEqual(int(mask.sum()), 3)

    def test_parse_errors(self) -> None:
        for text in ["", "\n\n", "#.\n#", "#..\n..#\n"]:
            with self.subTest(text=text):
                with self.assertRaises(ConfigError):
                    parse_land_map(text)


if __name__ == "__main__":
    unittest.main()
