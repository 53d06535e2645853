"""Shared fixtures for generator tests."""

import copy

import pytest

SOLVED_GRID = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


@pytest.fixture
def solved_grid() -> list[list[int]]:
    return copy.deepcopy(SOLVED_GRID)


@pytest.fixture(autouse=True)
def _clear_generator_env(monkeypatch):
    for name in (
        "SUDOKU_GRID_SIZE",
        "SUDOKU_FILL_ATTEMPTS",
        "SUDOKU_CARVE_ATTEMPT_FACTOR",
        "SUDOKU_FILL_DIAGONAL",
        "SUDOKU_KEEP_TOP_LEFT_CLUE",
    ):
        monkeypatch.delenv(name, raising=False)
