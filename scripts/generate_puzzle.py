"""Generate a Sudoku puzzle from the command line."""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from backend.config import GeneratorSettings
from backend.generator import GeneratedPuzzle, GenerationFailure, SudokuGenerator

LOGGER = logging.getLogger("generate_puzzle")


def format_grid(grid: list[list[int]], box: int = 3) -> str:
    """Render a grid as text, with '.' for empty cells and box separators."""
    n = len(grid)
    lines = []
    for r, row in enumerate(grid):
        if r and r % box == 0:
            lines.append("-+-".join("-" * (2 * box - 1) for _ in range(n // box)))
        groups = [
            " ".join(str(v) if v else "." for v in row[c : c + box])
            for c in range(0, n, box)
        ]
        lines.append(" | ".join(groups))
    return "\n".join(lines)


def build_payload(result: GeneratedPuzzle) -> dict:
    return {
        "difficulty": result.difficulty.value,
        "puzzle": result.puzzle,
        "solution": result.solution,
        "clues": result.clues,
        "removed": result.removed,
        "requested_removals": result.requested_removals,
        "partial": result.partial,
    }


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a Sudoku puzzle")
    parser.add_argument(
        "--difficulty",
        choices=["easy", "normal", "medium", "hard"],
        default="normal",
        help="Puzzle difficulty (medium is an alias of normal)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.debug)

    try:
        settings = GeneratorSettings.from_env()
    except ValueError as exc:
        LOGGER.error("Invalid generator settings: %s", exc)
        return 2

    generator = SudokuGenerator(settings=settings, rng=random.Random(args.seed))
    try:
        result = generator.generate(args.difficulty)
    except GenerationFailure as exc:
        LOGGER.error("%s", exc)
        return 1

    if result.partial:
        LOGGER.info(
            "Carved %d of %d requested cells", result.removed, result.requested_removals
        )

    if args.json:
        print(json.dumps(build_payload(result)))
    else:
        box = settings.box_size
        print(f"Puzzle ({result.difficulty.value}, {result.clues} clues):")
        print(format_grid(result.puzzle, box))
        print()
        print("Solution:")
        print(format_grid(result.solution, box))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
