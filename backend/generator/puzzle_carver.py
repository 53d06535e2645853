"""Carve a playable puzzle out of a solved grid."""

from __future__ import annotations

import copy
import logging
import random
from dataclasses import dataclass
from typing import Optional

from ..solver.backtracking import Grid, count_candidates, ensure_square_grid

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CarveResult:
    puzzle: Grid
    requested: int
    removed: int
    attempts: int

    @property
    def partial(self) -> bool:
        """Whether fewer cells were removed than requested."""
        return self.removed < self.requested


class PuzzleCarver:
    """
    Remove cells from a solution, rejecting removals that look ambiguous.

    A removal is kept only when the emptied cell has a single legal value left
    given its row, column and box. This is a local check: the carved puzzle
    may still have more than one global solution.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        max_attempts: Optional[int] = None,
        keep_top_left_clue: bool = True,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts
        self.keep_top_left_clue = keep_top_left_clue

    def carve(self, solution: Grid, removals: int) -> CarveResult:
        """
        Zero up to *removals* cells of a copy of *solution*.

        Args:
            solution: Complete grid (left untouched)
            removals: Number of cells to empty, 0..n*n

        Returns:
            CarveResult; ``partial`` is set when the draw budget ran out first
        """
        n = ensure_square_grid(solution)
        if any(cell == 0 for row in solution for cell in row):
            raise ValueError("Solution grid must not contain empty cells")
        if not 0 <= removals <= n * n:
            raise ValueError(f"removals must be within 0..{n * n}, got {removals}")

        max_attempts = self.max_attempts if self.max_attempts is not None else 3 * n * n
        puzzle = copy.deepcopy(solution)

        cells = [(r, c) for r in range(n) for c in range(n)]
        self.rng.shuffle(cells)

        remaining = removals
        attempts = 0
        for row, col in cells:
            if remaining == 0 or attempts >= max_attempts:
                break
            attempts += 1
            if puzzle[row][col] == 0:
                continue

            value = puzzle[row][col]
            puzzle[row][col] = 0
            if count_candidates(puzzle, row, col) > 1:
                puzzle[row][col] = value
            else:
                remaining -= 1

        if remaining > 0:
            _LOGGER.warning(
                "Could not remove all %d cells; %d remaining after %d draws",
                removals,
                remaining,
                attempts,
            )

        if self.keep_top_left_clue:
            _restore_top_left(puzzle, solution)

        return CarveResult(
            puzzle=puzzle,
            requested=removals,
            removed=removals - remaining,
            attempts=attempts,
        )


def _restore_top_left(puzzle: Grid, solution: Grid) -> None:
    """Move an empty top-left cell onto the first clue in row-major order."""
    if puzzle[0][0] != 0:
        return
    for r, row in enumerate(puzzle):
        for c, value in enumerate(row):
            if value != 0:
                puzzle[0][0] = solution[0][0]
                puzzle[r][c] = 0
                return
