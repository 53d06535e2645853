"""Generator module exports."""

from .grid_filler import GridFiller
from .puzzle_carver import CarveResult, PuzzleCarver
from .sudoku_generator import (
    Difficulty,
    GeneratedPuzzle,
    GenerationFailure,
    SudokuGenerator,
    generate,
)

__all__ = [
    "CarveResult",
    "Difficulty",
    "GeneratedPuzzle",
    "GenerationFailure",
    "GridFiller",
    "PuzzleCarver",
    "SudokuGenerator",
    "generate",
]
