"""Randomized backtracking fill of a complete Sudoku grid."""

from __future__ import annotations

import logging
import random
from typing import Optional

from ..solver.backtracking import Grid, box_size_for, is_valid_placement

_LOGGER = logging.getLogger(__name__)


class GridFiller:
    """Fill an n x n board so every row, column and box holds 1..n once."""

    def __init__(
        self,
        size: int = 9,
        rng: random.Random | None = None,
        fill_diagonal: bool = True,
    ):
        self.size = size
        self.box = box_size_for(size)
        self.rng = rng if rng is not None else random.Random()
        self.fill_diagonal = fill_diagonal
        self.attempts_used = 0

    def empty_grid(self) -> Grid:
        return [[0] * self.size for _ in range(self.size)]

    def fill(self, attempts: int = 5) -> Optional[Grid]:
        """
        Produce one complete grid, retrying the whole fill on failure.

        Args:
            attempts: Maximum number of fills started from an empty board

        Returns:
            The filled grid, or None when every attempt failed
        """
        for attempt in range(1, attempts + 1):
            self.attempts_used = attempt
            _LOGGER.debug("Grid fill attempt %d/%d", attempt, attempts)
            grid = self.empty_grid()
            if self.fill_grid(grid):
                return grid
            _LOGGER.warning("Grid fill attempt %d/%d failed", attempt, attempts)
        return None

    def fill_grid(self, grid: Grid) -> bool:
        """Fill the empty cells of *grid* in place; pre-seeded cells are kept."""
        if len(grid) != self.size or any(len(row) != self.size for row in grid):
            raise ValueError(f"Expected a {self.size}x{self.size} grid")
        if self.fill_diagonal and all(cell == 0 for row in grid for cell in row):
            self._fill_diagonal_boxes(grid)
        return self._fill_from(grid, 0, 0)

    def _shuffled_values(self) -> list[int]:
        values = list(range(1, self.size + 1))
        self.rng.shuffle(values)
        return values

    def _fill_diagonal_boxes(self, grid: Grid) -> None:
        # Diagonal boxes share no row or column, so each is an independent permutation.
        for start in range(0, self.size, self.box):
            values = self._shuffled_values()
            for i in range(self.box):
                for j in range(self.box):
                    grid[start + i][start + j] = values[i * self.box + j]

    def _fill_from(self, grid: Grid, row: int, col: int) -> bool:
        if col == self.size:
            row, col = row + 1, 0
        if row == self.size:
            return True

        if grid[row][col] != 0:
            return self._fill_from(grid, row, col + 1)

        for num in self._shuffled_values():
            if is_valid_placement(grid, row, col, num):
                grid[row][col] = num
                if self._fill_from(grid, row, col + 1):
                    return True
                grid[row][col] = 0

        return False
