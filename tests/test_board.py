import unittest

from game import HexBoard, SIDE, build_board


class TestBoardGraph(unittest.TestCase):
    def setUp(self):
        self.board = build_board()

    def test_given_side_11_when_building_then_ragged_rows_taper_to_one(self):
        lengths = [len(row) for row in self.board.rows]
        self.assertEqual(self.board.height, 21)
        self.assertEqual(lengths, list(range(1, 12)) + list(range(10, 0, -1)))
        self.assertEqual(len(self.board), 121)
        self.assertEqual(self.board.middle_row, 10)
        self.assertEqual(self.board.center, (10, 5))

    def test_given_other_side_when_building_then_rejected(self):
        with self.assertRaises(ValueError):
            build_board(7)

    def test_given_every_pair_when_checking_adjacency_then_symmetric(self):
        for coord in self.board.coords():
            for n in self.board.neighbors(coord):
                self.assertIn(coord, self.board.neighbors(n), f"{coord} -> {n} not mirrored")

    def test_given_every_cell_when_counting_neighbors_then_within_bounds(self):
        for coord in self.board.coords():
            cell = self.board.cell(coord)
            self.assertGreaterEqual(len(cell.neighbors), 2)
            self.assertLessEqual(len(cell.neighbors), 6)
            self.assertEqual(len(set(cell.neighbors)), len(cell.neighbors))
            self.assertNotIn(coord, cell.neighbors)
            if not cell.is_border:
                self.assertEqual(len(cell.neighbors), 6, coord)

    def test_given_cells_when_classifying_border_then_first_or_last_in_row(self):
        for r, row in enumerate(self.board.rows):
            for c, cell in enumerate(row):
                self.assertEqual(cell.coord, (r, c))
                self.assertEqual(cell.is_border, c == 0 or c == len(row) - 1)
        # The whole middle row except its two ends is interior
        self.assertTrue(self.board.is_border((10, 0)))
        self.assertTrue(self.board.is_border((10, 10)))
        self.assertFalse(self.board.is_border((10, 5)))

    def test_given_corners_when_listing_neighbors_then_truncated_at_edge(self):
        self.assertEqual(set(self.board.neighbors((0, 0))), {(1, 0), (1, 1)})
        self.assertEqual(set(self.board.neighbors((20, 0))), {(19, 0), (19, 1)})
        self.assertEqual(set(self.board.neighbors((10, 0))), {(9, 0), (10, 1), (11, 0)})
        self.assertEqual(set(self.board.neighbors((10, 10))), {(9, 9), (10, 9), (11, 9)})

    def test_given_center_when_listing_neighbors_then_offsets_follow_middle_row_table(self):
        self.assertEqual(
            set(self.board.neighbors((10, 5))),
            {(9, 4), (9, 5), (10, 4), (10, 6), (11, 5), (11, 4)},
        )
        # Upper third leans one way, lower third the other
        self.assertEqual(
            set(self.board.neighbors((5, 2))),
            {(4, 1), (4, 2), (5, 1), (5, 3), (6, 2), (6, 3)},
        )
        self.assertEqual(
            set(self.board.neighbors((15, 2))),
            {(14, 3), (14, 2), (15, 1), (15, 3), (16, 2), (16, 1)},
        )

    def test_given_coords_when_checking_containment_then_ragged_bounds_respected(self):
        self.assertTrue(self.board.contains((0, 0)))
        self.assertFalse(self.board.contains((0, 1)))
        self.assertFalse(self.board.contains((-1, 0)))
        self.assertFalse(self.board.contains((10, -1)))
        self.assertFalse(self.board.contains((21, 0)))
        self.assertTrue(self.board.contains((20, 0)))
        with self.assertRaises(KeyError):
            self.board.cell((3, 4))

    def test_given_two_builds_when_comparing_then_identical(self):
        self.assertEqual(self.board, build_board(SIDE))
        self.assertIsInstance(self.board, HexBoard)

    def test_given_cat_and_blockers_when_pretty_then_symbols_rendered(self):
        txt = self.board.pretty((10, 5), {(0, 0), (20, 0)})
        lines = txt.split("\n")
        self.assertEqual(len(lines), 21)
        self.assertEqual(txt.count("C"), 1)
        self.assertEqual(txt.count("#"), 2)
        self.assertEqual(txt.count("."), 121 - 3)
        self.assertIn("C", lines[10])


if __name__ == '__main__':
    unittest.main(verbosity=2)
