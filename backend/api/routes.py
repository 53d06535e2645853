"""API routes for the Sudoku generator service."""

from __future__ import annotations

import logging
import random

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool

from ..config import GeneratorSettings
from ..game.board import find_conflicts, find_hint, is_board_full, is_solved
from ..generator import GeneratedPuzzle, GenerationFailure, SudokuGenerator
from ..models.schemas import (
    BoardRequest,
    CheckResponse,
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
    HealthResponse,
    HintResponse,
    SudokuCell,
)
from ..solver.backtracking import Grid, SudokuSolver, ensure_square_grid

router = APIRouter()
_SETTINGS: GeneratorSettings | None = None
_LOGGER = logging.getLogger(__name__)


def _get_settings() -> tuple[GeneratorSettings | None, str | None]:
    global _SETTINGS

    if _SETTINGS is not None:
        return _SETTINGS, None

    try:
        settings = GeneratorSettings.from_env()
    except ValueError as e:
        return None, str(e)

    _SETTINGS = settings
    return _SETTINGS, None


def _require_settings() -> GeneratorSettings:
    settings, error = _get_settings()
    if settings is None:
        raise HTTPException(status_code=503, detail=error or "Generator not configured")
    return settings


def _board_cells(grid: Grid, settings: GeneratorSettings) -> Grid:
    """Validate a caller board, mapping malformed input to HTTP 422."""
    try:
        n = ensure_square_grid(grid)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if n != settings.grid_size:
        raise HTTPException(
            status_code=422,
            detail=f"Expected a {settings.grid_size}x{settings.grid_size} grid, got {n}x{n}",
        )
    return grid


def _generate(settings: GeneratorSettings, difficulty: str, seed: int | None) -> GeneratedPuzzle:
    rng = random.Random(seed)
    return SudokuGenerator(settings=settings, rng=rng).generate(difficulty)


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    settings, _ = _get_settings()

    return HealthResponse(
        status="healthy" if settings is not None else "misconfigured",
        grid_size=settings.grid_size if settings else None,
        fill_attempts=settings.fill_attempts if settings else None,
    )


@router.post(
    "/api/v1/sudoku:generate",
    response_model=GenerateResponse,
    responses={503: {"model": ErrorResponse}},
    tags=["Sudoku"],
)
async def generate_sudoku(request: GenerateRequest):
    """
    Generate a new puzzle and its solution.

    Difficulty maps to the number of clues kept on a 9x9 board:
    easy 45, normal (or medium) 35, hard 25. When the carver cannot reach
    the target the puzzle keeps extra clues and ``partial`` is true.
    """
    settings = _require_settings()

    try:
        result = await run_in_threadpool(
            _generate, settings, request.difficulty, request.seed
        )
    except GenerationFailure as e:
        _LOGGER.error("Puzzle generation failed: %s", e)
        raise HTTPException(status_code=503, detail=str(e))

    solution_count = SudokuSolver().count_solutions(result.puzzle, max_count=2)

    message = f"New {result.difficulty.value} puzzle generated"
    if result.partial:
        message += (
            f" (removed {result.removed} of {result.requested_removals} requested cells)"
        )

    return GenerateResponse(
        success=True,
        difficulty=result.difficulty.value,
        puzzle=result.puzzle,
        solution=result.solution,
        clues=result.clues,
        removed=result.removed,
        requested_removals=result.requested_removals,
        partial=result.partial,
        solution_count=solution_count,
        message=message,
    )


@router.post("/api/v1/sudoku:check", response_model=CheckResponse, tags=["Sudoku"])
async def check_board(request: BoardRequest):
    """
    Check a player's board.

    Reports cells that repeat a value in their row, column or box, and
    whether the board is full and solved.
    """
    settings = _require_settings()
    grid = _board_cells(request.grid.cells, settings)

    conflicts = find_conflicts(grid)
    full = is_board_full(grid)
    solved = full and not conflicts and is_solved(grid)

    if solved:
        message = "Puzzle solved"
    elif conflicts:
        message = "Conflicts detected in the grid"
    else:
        message = "No conflicts"

    return CheckResponse(
        valid=not conflicts,
        full=full,
        solved=solved,
        conflicts=[
            SudokuCell(row=cell.row, col=cell.col, value=cell.value) for cell in conflicts
        ],
        message=message,
    )


@router.post("/api/v1/sudoku:hint", response_model=HintResponse, tags=["Sudoku"])
async def hint_board(request: BoardRequest):
    """Return the first empty cell that has exactly one legal value."""
    settings = _require_settings()
    grid = _board_cells(request.grid.cells, settings)

    if find_conflicts(grid):
        return HintResponse(found=False, message="Please fix errors before getting a hint")

    hint = find_hint(grid)
    if hint is None:
        return HintResponse(found=False, message="No obvious hint available")

    return HintResponse(
        found=True,
        hint=SudokuCell(row=hint.row, col=hint.col, value=hint.value),
        message=f"Hint for cell ({hint.row + 1}, {hint.col + 1})",
    )
