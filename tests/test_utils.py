import unittest

import numpy as np

from connectfour.utils import (Cell, Direction, GameStatus, InvalidConfigurationError,
                               find_winning_line, is_line_owned, line_from,
                               validate_dimensions)


def grid_with(cells, value=Cell.FIRST.value, height=6, width=7):
    grid = np.zeros((height, width), dtype=np.int8)
    for r, c in cells:
        grid[r, c] = value
    return grid


class TestWinScan(unittest.TestCase):
    def test_given_horizontal_four_at_right_edge_when_scanning_then_found(self):
        grid = grid_with([(5, 3), (5, 4), (5, 5), (5, 6)])
        self.assertEqual(find_winning_line(grid, Cell.FIRST), [(5, 3), (5, 4), (5, 5), (5, 6)])

    def test_given_vertical_four_in_top_corner_when_scanning_then_found(self):
        grid = grid_with([(0, 6), (1, 6), (2, 6), (3, 6)])
        self.assertEqual(find_winning_line(grid, Cell.FIRST), [(0, 6), (1, 6), (2, 6), (3, 6)])

    def test_given_down_right_diagonal_to_corner_when_scanning_then_found(self):
        grid = grid_with([(2, 3), (3, 4), (4, 5), (5, 6)])
        self.assertEqual(find_winning_line(grid, Cell.FIRST), [(2, 3), (3, 4), (4, 5), (5, 6)])

    def test_given_down_left_diagonal_to_corner_when_scanning_then_found(self):
        grid = grid_with([(2, 3), (3, 2), (4, 1), (5, 0)])
        self.assertEqual(find_winning_line(grid, Cell.FIRST), [(2, 3), (3, 2), (4, 1), (5, 0)])

    def test_given_longer_line_when_scanning_then_first_four_returned(self):
        grid = grid_with([(5, c) for c in range(6)])
        self.assertEqual(find_winning_line(grid, Cell.FIRST), [(5, 0), (5, 1), (5, 2), (5, 3)])

    def test_given_three_in_a_row_when_scanning_then_no_win(self):
        grid = grid_with([(5, 4), (5, 5), (5, 6)])
        self.assertIsNone(find_winning_line(grid, Cell.FIRST))

    def test_given_pieces_wrapping_row_end_when_scanning_then_no_win(self):
        # Consecutive in row-major order but split across two rows
        grid = grid_with([(0, 5), (0, 6), (1, 0), (1, 1)])
        self.assertIsNone(find_winning_line(grid, Cell.FIRST))

    def test_given_diagonal_running_off_board_when_scanning_then_no_win(self):
        grid = grid_with([(3, 4), (4, 5), (5, 6), (0, 0)])
        self.assertIsNone(find_winning_line(grid, Cell.FIRST))

    def test_given_broken_line_when_scanning_then_no_win(self):
        grid = grid_with([(5, 0), (5, 1), (5, 3), (5, 4)])
        self.assertIsNone(find_winning_line(grid, Cell.FIRST))

    def test_given_opponent_line_when_scanning_for_mover_then_no_win(self):
        grid = grid_with([(5, 0), (5, 1), (5, 2), (5, 3)], value=Cell.SECOND.value)
        self.assertIsNone(find_winning_line(grid, Cell.FIRST))
        self.assertIsNotNone(find_winning_line(grid, Cell.SECOND))

    def test_given_empty_seat_when_scanning_then_nothing_matches(self):
        grid = np.zeros((6, 7), dtype=np.int8)
        self.assertIsNone(find_winning_line(grid, Cell.EMPTY))

    def test_given_board_smaller_than_four_when_scanning_then_no_win(self):
        grid = np.full((3, 3), Cell.FIRST.value, dtype=np.int8)
        self.assertIsNone(find_winning_line(grid, Cell.FIRST))


class TestHelpers(unittest.TestCase):
    def test_given_direction_when_building_line_then_coordinates_follow_vector(self):
        self.assertEqual(line_from(0, 3, Direction.DIAGONAL_DOWN_LEFT),
                         [(0, 3), (1, 2), (2, 1), (3, 0)])
        self.assertEqual(line_from(1, 1, Direction.VERTICAL, length=2), [(1, 1), (2, 1)])

    def test_given_line_leaving_board_when_checking_ownership_then_false(self):
        grid = np.full((6, 7), Cell.FIRST.value, dtype=np.int8)
        self.assertTrue(is_line_owned(grid, line_from(0, 3, Direction.HORIZONTAL), Cell.FIRST.value))
        self.assertFalse(is_line_owned(grid, line_from(0, 4, Direction.HORIZONTAL), Cell.FIRST.value))
        self.assertFalse(is_line_owned(grid, line_from(0, 2, Direction.DIAGONAL_DOWN_LEFT), Cell.FIRST.value))

    def test_given_dimensions_when_validating_then_ints_pass_and_bad_values_raise(self):
        self.assertEqual(validate_dimensions(np.int64(7), 6), (7, 6))
        with self.assertRaises(InvalidConfigurationError):
            validate_dimensions(0, 6)
        self.assertTrue(issubclass(InvalidConfigurationError, ValueError))

    def test_given_seats_and_statuses_when_queried_then_expected_values(self):
        self.assertEqual(Cell.FIRST.other(), Cell.SECOND)
        self.assertEqual(Cell.SECOND.other(), Cell.FIRST)
        self.assertEqual(Cell.EMPTY.other(), Cell.EMPTY)
        self.assertTrue(GameStatus.WIN.is_game_over())
        self.assertTrue(GameStatus.TIE.is_game_over())
        self.assertFalse(GameStatus.IN_PROGRESS.is_game_over())
        self.assertFalse(GameStatus.NOT_STARTED.is_game_over())


if __name__ == '__main__':
    unittest.main()
