"""Tests for randomized grid filling."""

import random

import pytest

from backend.game.board import is_solved
from backend.generator.grid_filler import GridFiller


@pytest.mark.parametrize("seed", [0, 1, 2, 42, 2024])
def test_fill_produces_valid_solution(seed):
    grid = GridFiller(rng=random.Random(seed)).fill()

    assert grid is not None
    assert len(grid) == 9
    assert all(len(row) == 9 for row in grid)
    assert is_solved(grid)


def test_fill_without_diagonal_seeding_is_valid():
    grid = GridFiller(rng=random.Random(7), fill_diagonal=False).fill()

    assert grid is not None
    assert is_solved(grid)


def test_fill_four_by_four():
    grid = GridFiller(size=4, rng=random.Random(3)).fill()

    assert grid is not None
    assert is_solved(grid)
    assert {v for row in grid for v in row} == {1, 2, 3, 4}


def test_same_seed_gives_same_grid():
    first = GridFiller(rng=random.Random(99)).fill()
    second = GridFiller(rng=random.Random(99)).fill()

    assert first == second


def test_rejects_non_square_size():
    with pytest.raises(ValueError):
        GridFiller(size=6)


def test_fill_grid_rejects_wrong_dimensions():
    filler = GridFiller(rng=random.Random(0))

    with pytest.raises(ValueError):
        filler.fill_grid([[0] * 9 for _ in range(8)])


def test_preseeded_cells_are_kept():
    filler = GridFiller(rng=random.Random(5))
    grid = filler.empty_grid()
    grid[4][4] = 7
    grid[0][8] = 2

    assert filler.fill_grid(grid) is True
    assert grid[4][4] == 7
    assert grid[0][8] == 2
    assert is_solved(grid)


def test_unfillable_seed_reports_failure_and_restores_grid():
    # (0, 1) can hold neither 1 (row) nor 2, 3, 4 (column).
    grid = [
        [1, 0, 0, 0],
        [0, 2, 0, 0],
        [0, 3, 0, 0],
        [0, 4, 0, 0],
    ]
    before = [row[:] for row in grid]

    filler = GridFiller(size=4, rng=random.Random(0))

    assert filler.fill_grid(grid) is False
    assert grid == before


def test_fill_returns_none_when_every_attempt_fails(monkeypatch):
    filler = GridFiller(rng=random.Random(0))
    calls = []

    def always_fail(grid):
        calls.append(grid)
        return False

    monkeypatch.setattr(filler, "fill_grid", always_fail)

    assert filler.fill(attempts=5) is None
    assert len(calls) == 5
