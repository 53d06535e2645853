"""Puzzle generation: fill a solution, then carve it to a difficulty."""

from __future__ import annotations

import copy
import logging
import random
from dataclasses import dataclass
from enum import Enum

from ..config import GeneratorSettings
from ..solver.backtracking import Grid
from .grid_filler import GridFiller
from .puzzle_carver import PuzzleCarver

_LOGGER = logging.getLogger(__name__)


class GenerationFailure(RuntimeError):
    """Raised when no complete grid could be filled within the retry budget."""


class Difficulty(str, Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @classmethod
    def parse(cls, value: "Difficulty | str") -> "Difficulty":
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name == "medium":
            return cls.NORMAL
        try:
            return cls(name)
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {value!r}; expected one of {choices}") from None


# Clues kept on a 9x9 board.
CLUES_BY_DIFFICULTY = {
    Difficulty.EASY: 45,
    Difficulty.NORMAL: 35,
    Difficulty.HARD: 25,
}


def clues_for(difficulty: Difficulty, size: int = 9) -> int:
    """Clues to keep for *difficulty*, scaled by cell count for other sizes."""
    clues = CLUES_BY_DIFFICULTY[difficulty]
    if size == 9:
        return clues
    return max(1, round(clues * size * size / 81))


@dataclass(frozen=True)
class GeneratedPuzzle:
    puzzle: Grid
    solution: Grid
    difficulty: Difficulty
    requested_removals: int
    removed: int
    attempts: int

    @property
    def partial(self) -> bool:
        return self.removed < self.requested_removals

    @property
    def clues(self) -> int:
        return sum(1 for row in self.puzzle for cell in row if cell != 0)


class SudokuGenerator:
    """Generates puzzle/solution pairs from a single random source."""

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        rng: random.Random | None = None,
    ):
        self.settings = (settings or GeneratorSettings()).validate()
        self.rng = rng if rng is not None else random.Random()

    def fill_solution(self) -> tuple[Grid, int]:
        """Return a complete grid and the number of fill attempts it took."""
        filler = GridFiller(
            size=self.settings.grid_size,
            rng=self.rng,
            fill_diagonal=self.settings.fill_diagonal,
        )
        grid = filler.fill(attempts=self.settings.fill_attempts)
        if grid is not None:
            return grid, filler.attempts_used

        _LOGGER.error(
            "Failed to generate a valid solution after %d attempts",
            self.settings.fill_attempts,
        )
        raise GenerationFailure(
            f"Failed to generate a valid solution after "
            f"{self.settings.fill_attempts} attempts"
        )

    def generate(self, difficulty: Difficulty | str = Difficulty.NORMAL) -> GeneratedPuzzle:
        """
        Generate a puzzle and its solution.

        Args:
            difficulty: easy, normal (alias medium) or hard

        Returns:
            GeneratedPuzzle with fresh puzzle and solution grids

        Raises:
            GenerationFailure: if no solution could be filled
            ValueError: if the difficulty is unknown
        """
        level = Difficulty.parse(difficulty)
        size = self.settings.grid_size
        solution, attempts = self.fill_solution()

        removals = size * size - clues_for(level, size)
        carver = PuzzleCarver(
            rng=self.rng,
            max_attempts=self.settings.carve_attempts,
            keep_top_left_clue=self.settings.keep_top_left_clue,
        )
        carved = carver.carve(solution, removals)
        _LOGGER.debug(
            "Generated %s puzzle: removed %d/%d cells",
            level.value,
            carved.removed,
            removals,
        )

        return GeneratedPuzzle(
            puzzle=carved.puzzle,
            solution=copy.deepcopy(solution),
            difficulty=level,
            requested_removals=removals,
            removed=carved.removed,
            attempts=attempts,
        )


def generate(
    difficulty: Difficulty | str = Difficulty.NORMAL,
    *,
    rng: random.Random | None = None,
    settings: GeneratorSettings | None = None,
) -> GeneratedPuzzle:
    """Convenience function to generate one puzzle."""
    generator = SudokuGenerator(settings=settings, rng=rng)
    return generator.generate(difficulty)
