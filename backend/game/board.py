"""Checks run against a player's board: conflicts, completion and hints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..solver.backtracking import Grid, box_size_for, ensure_square_grid, is_valid_placement


@dataclass(frozen=True)
class Cell:
    row: int
    col: int
    value: int


def _as_array(grid: Grid) -> tuple[np.ndarray, int]:
    n = ensure_square_grid(grid)
    return np.asarray(grid, dtype=np.int64), box_size_for(n)


def _box_view(board: np.ndarray, box: int) -> np.ndarray:
    """Return boxes as rows: shape (n, n), one flattened box per row."""
    n = board.shape[0]
    return board.reshape(box, box, box, box).transpose(0, 2, 1, 3).reshape(n, n)


def find_conflicts(grid: Grid) -> list[Cell]:
    """
    List every filled cell sharing its value with another cell of its row,
    column or box, in row-major order.
    """
    board, box = _as_array(grid)
    n = board.shape[0]
    conflicted = np.zeros_like(board, dtype=bool)

    for value in range(1, n + 1):
        mask = board == value
        if not mask.any():
            continue
        rows = mask.sum(axis=1) > 1
        cols = mask.sum(axis=0) > 1
        boxes = mask.reshape(box, box, box, box).sum(axis=(1, 3)) > 1
        boxes = np.repeat(np.repeat(boxes, box, axis=0), box, axis=1)
        conflicted |= mask & (rows[:, None] | cols[None, :] | boxes)

    return [
        Cell(int(r), int(c), int(board[r, c])) for r, c in zip(*np.nonzero(conflicted))
    ]


def is_board_full(grid: Grid) -> bool:
    board, _ = _as_array(grid)
    return not bool((board == 0).any())


def is_solved(grid: Grid) -> bool:
    """True when every row, column and box is a permutation of 1..n."""
    board, box = _as_array(grid)
    n = board.shape[0]
    expected = np.arange(1, n + 1)
    for units in (board, board.T, _box_view(board, box)):
        if not np.array_equal(np.sort(units, axis=1), np.broadcast_to(expected, (n, n))):
            return False
    return True


def matches_solution(puzzle: Grid, solution: Grid) -> bool:
    """Whether every clue of *puzzle* equals the solution at the same cell."""
    given, _ = _as_array(puzzle)
    full, _ = _as_array(solution)
    if given.shape != full.shape:
        return False
    clues = given != 0
    return bool(np.array_equal(given[clues], full[clues]))


def find_hint(grid: Grid) -> Optional[Cell]:
    """Return the first empty cell (row-major) that admits exactly one value."""
    n = ensure_square_grid(grid)
    for r in range(n):
        for c in range(n):
            if grid[r][c] != 0:
                continue
            candidates = [
                num for num in range(1, n + 1) if is_valid_placement(grid, r, c, num)
            ]
            if len(candidates) == 1:
                return Cell(r, c, candidates[0])
    return None
