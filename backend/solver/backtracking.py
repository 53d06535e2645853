"""Row/column/box placement checks and a bounded backtracking solution counter."""

from typing import Optional, List, Tuple
import copy
import math


Grid = List[List[int]]


def box_size_for(n: int) -> int:
    """Return the box side for an n x n board, raising if n is not a square."""
    box = math.isqrt(n)
    if n <= 0 or box * box != n:
        raise ValueError(f"Grid size must be a positive perfect square, got {n}")
    return box


def is_valid_placement(grid: Grid, row: int, col: int, num: int) -> bool:
    """
    Check if placing num at (row, col) breaks no row, column or box rule.

    The cell itself is ignored, so a filled grid can be re-validated cell by
    cell without clearing anything first.

    Args:
        grid: Current grid state (n x n, 0 for empty)
        row: Row index
        col: Column index
        num: Number to place (1-n)

    Returns:
        True if placement is valid, False otherwise
    """
    n = len(grid)
    box = box_size_for(n)

    for c in range(n):
        if c != col and grid[row][c] == num:
            return False

    for r in range(n):
        if r != row and grid[r][col] == num:
            return False

    box_row = row - row % box
    box_col = col - col % box
    for r in range(box_row, box_row + box):
        for c in range(box_col, box_col + box):
            if (r, c) != (row, col) and grid[r][c] == num:
                return False

    return True


def count_candidates(grid: Grid, row: int, col: int) -> int:
    """Count the values 1..n that could legally occupy (row, col)."""
    n = len(grid)
    return sum(1 for num in range(1, n + 1) if is_valid_placement(grid, row, col, num))


class SudokuSolver:
    """Counts solutions of Sudoku puzzles using backtracking."""

    def __init__(self):
        self.solutions_count = 0

    def _find_empty_cell(self, grid: Grid) -> Optional[Tuple[int, int]]:
        """
        Find the next empty cell (contains 0).

        Args:
            grid: Current grid state

        Returns:
            Tuple of (row, col) if empty cell found, None otherwise
        """
        n = len(grid)
        for r in range(n):
            for c in range(n):
                if grid[r][c] == 0:
                    return (r, c)
        return None

    def count_solutions(self, grid: Grid, max_count: int = 2) -> int:
        """
        Count number of solutions (up to max_count).

        Args:
            grid: n x n grid to solve
            max_count: Stop counting after finding this many solutions

        Returns:
            Number of solutions found
        """
        self.solutions_count = 0
        grid_copy = copy.deepcopy(grid)
        if not self._is_consistent_grid(grid_copy):
            return 0
        self._count_solutions_recursive(grid_copy, max_count)
        return self.solutions_count

    def _count_solutions_recursive(self, grid: Grid, max_count: int) -> None:
        """Recursively count solutions, stopping at max_count."""
        if self.solutions_count >= max_count:
            return

        empty = self._find_empty_cell(grid)
        if not empty:
            self.solutions_count += 1
            return

        row, col = empty

        for num in range(1, len(grid) + 1):
            if is_valid_placement(grid, row, col, num):
                grid[row][col] = num
                self._count_solutions_recursive(grid, max_count)
                grid[row][col] = 0
                if self.solutions_count >= max_count:
                    return

    def _is_consistent_grid(self, grid: Grid) -> bool:
        """Check existing non-zero givens are mutually consistent."""
        n = len(grid)
        for r in range(n):
            for c in range(n):
                num = grid[r][c]
                if num != 0 and not is_valid_placement(grid, r, c, num):
                    return False
        return True


def ensure_square_grid(grid: Grid) -> int:
    """Return the side of an n x n grid of ints in [0, n], raising ValueError otherwise."""
    if not isinstance(grid, list) or not grid:
        raise ValueError("Grid must be a non-empty list of rows")
    n = len(grid)
    box_size_for(n)
    for r, row in enumerate(grid):
        if not isinstance(row, list) or len(row) != n:
            raise ValueError(f"Row {r} must contain exactly {n} cells")
        for cell in row:
            if not isinstance(cell, int) or cell < 0 or cell > n:
                raise ValueError(f"Row {r} holds out-of-range value {cell!r}")
    return n
