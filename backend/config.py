"""Environment-driven settings for puzzle generation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TypeVar

from .solver.backtracking import box_size_for

_T = TypeVar("_T", int, float, bool)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    if isinstance(default, bool):
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        return default
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class GeneratorSettings:
    grid_size: int = 9
    fill_attempts: int = 5
    carve_attempt_factor: int = 3
    fill_diagonal: bool = True
    keep_top_left_clue: bool = True

    @property
    def box_size(self) -> int:
        return box_size_for(self.grid_size)

    @property
    def carve_attempts(self) -> int:
        """Draw budget for the carver, a multiple of the cell count."""
        return self.carve_attempt_factor * self.grid_size * self.grid_size

    def validate(self) -> "GeneratorSettings":
        box_size_for(self.grid_size)
        if self.fill_attempts < 1:
            raise ValueError(f"fill_attempts must be >= 1, got {self.fill_attempts}")
        if self.carve_attempt_factor < 1:
            raise ValueError(
                f"carve_attempt_factor must be >= 1, got {self.carve_attempt_factor}"
            )
        return self

    @classmethod
    def from_env(cls) -> "GeneratorSettings":
        defaults = cls()
        return cls(
            grid_size=_env("SUDOKU_GRID_SIZE", defaults.grid_size),
            fill_attempts=_env("SUDOKU_FILL_ATTEMPTS", defaults.fill_attempts),
            carve_attempt_factor=_env(
                "SUDOKU_CARVE_ATTEMPT_FACTOR", defaults.carve_attempt_factor
            ),
            fill_diagonal=_env("SUDOKU_FILL_DIAGONAL", defaults.fill_diagonal),
            keep_top_left_clue=_env(
                "SUDOKU_KEEP_TOP_LEFT_CLUE", defaults.keep_top_left_clue
            ),
        ).validate()
