"""Tests for placement checks and the bounded solution counter."""

import pytest

from backend.solver.backtracking import (
    SudokuSolver,
    box_size_for,
    count_candidates,
    ensure_square_grid,
    is_valid_placement,
)


def test_is_valid_placement_checks_row_col_box():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][0] = 7
    grid[1][1] = 7

    assert is_valid_placement(grid, 0, 2, 7) is False  # row conflict
    assert is_valid_placement(grid, 2, 0, 7) is False  # col conflict
    assert is_valid_placement(grid, 2, 2, 7) is False  # box conflict
    assert is_valid_placement(grid, 4, 4, 7) is True


def test_duplicate_five_in_row_is_illegal(solved_grid):
    solved_grid[0][1] = 5  # row 0 now holds 5 at columns 0 and 1

    assert is_valid_placement(solved_grid, 0, 1, 5) is False
    assert is_valid_placement(solved_grid, 0, 0, 5) is False


def test_every_solution_cell_revalidates(solved_grid):
    for r in range(9):
        for c in range(9):
            assert is_valid_placement(solved_grid, r, c, solved_grid[r][c])


def test_count_candidates_for_single_hole(solved_grid):
    solved_grid[4][4] = 0

    assert count_candidates(solved_grid, 4, 4) == 1


def test_count_candidates_on_empty_board():
    grid = [[0] * 9 for _ in range(9)]

    assert count_candidates(grid, 0, 0) == 9


def test_box_size_for_rejects_non_square():
    assert box_size_for(9) == 3
    assert box_size_for(4) == 2
    with pytest.raises(ValueError):
        box_size_for(6)
    with pytest.raises(ValueError):
        box_size_for(0)


class TestSolutionCounter:
    """Tests for SudokuSolver.count_solutions."""

    def test_full_grid_has_one_solution(self, solved_grid):
        assert SudokuSolver().count_solutions(solved_grid) == 1

    def test_empty_board_has_many_solutions(self):
        grid = [[0] * 9 for _ in range(9)]

        assert SudokuSolver().count_solutions(grid, max_count=2) == 2

    def test_inconsistent_grid_has_none(self, solved_grid):
        solved_grid[0][1] = 5

        assert SudokuSolver().count_solutions(solved_grid) == 0

    def test_counter_does_not_modify_input(self, solved_grid):
        solved_grid[0][0] = 0
        before = [row[:] for row in solved_grid]

        SudokuSolver().count_solutions(solved_grid)

        assert solved_grid == before


class TestGridValidation:
    """Tests for structural grid validation."""

    def test_ensure_square_grid(self, solved_grid):
        assert ensure_square_grid(solved_grid) == 9
        assert ensure_square_grid([[0] * 4 for _ in range(4)]) == 4

        with pytest.raises(ValueError):
            ensure_square_grid([])
        with pytest.raises(ValueError):
            ensure_square_grid([[0] * 5 for _ in range(5)])
        with pytest.raises(ValueError):
            ensure_square_grid([[0] * 9 for _ in range(8)] + [[0] * 8])

    def test_ensure_square_grid_rejects_out_of_range(self):
        grid = [[0] * 9 for _ in range(9)]
        grid[3][3] = 10

        with pytest.raises(ValueError, match="out-of-range"):
            ensure_square_grid(grid)
