"""Tests for the puzzle generation command line script."""

import json

from scripts import generate_puzzle
from scripts.generate_puzzle import format_grid, main


def test_format_grid_marks_empty_cells():
    grid = [
        [1, 0, 3, 4],
        [3, 4, 0, 2],
        [2, 1, 4, 3],
        [4, 3, 2, 1],
    ]

    text = format_grid(grid, box=2)

    assert text.splitlines() == [
        "1 . | 3 4",
        "3 4 | . 2",
        "----+----",
        "2 1 | 4 3",
        "4 3 | 2 1",
    ]


def test_main_prints_json(monkeypatch, capsys):
    monkeypatch.setattr(generate_puzzle, "_configure_logging", lambda debug: None)

    exit_code = main(["--difficulty", "hard", "--seed", "5", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["difficulty"] == "hard"
    assert payload["requested_removals"] == 56
    assert payload["clues"] == 81 - payload["removed"]
    for row_p, row_s in zip(payload["puzzle"], payload["solution"]):
        for given, value in zip(row_p, row_s):
            assert given in (0, value)


def test_main_prints_text(monkeypatch, capsys):
    monkeypatch.setattr(generate_puzzle, "_configure_logging", lambda debug: None)

    exit_code = main(["--seed", "1"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.startswith("Puzzle (normal, ")
    assert "Solution:" in out


def test_main_reports_invalid_settings(monkeypatch):
    monkeypatch.setattr(generate_puzzle, "_configure_logging", lambda debug: None)
    monkeypatch.setenv("SUDOKU_FILL_ATTEMPTS", "0")

    assert main([]) == 2
