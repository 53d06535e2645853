"""Pydantic models for API requests and responses."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DifficultyName = Literal["easy", "normal", "medium", "hard"]


class SudokuCell(BaseModel):
    """A single Sudoku cell."""

    value: int = Field(ge=0, description="Cell value (0 for empty)")
    row: int = Field(ge=0, description="Row index (0-based)")
    col: int = Field(ge=0, description="Column index (0-based)")


class SudokuGrid(BaseModel):
    """A Sudoku grid."""

    cells: list[list[int]] = Field(description="9x9 grid (0 for empty cells)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "cells": [
                    [5, 3, 0, 0, 7, 0, 0, 0, 0],
                    [6, 0, 0, 1, 9, 5, 0, 0, 0],
                    [0, 9, 8, 0, 0, 0, 0, 6, 0],
                    [8, 0, 0, 0, 6, 0, 0, 0, 3],
                    [4, 0, 0, 8, 0, 3, 0, 0, 1],
                    [7, 0, 0, 0, 2, 0, 0, 0, 6],
                    [0, 6, 0, 0, 0, 0, 2, 8, 0],
                    [0, 0, 0, 4, 1, 9, 0, 0, 5],
                    [0, 0, 0, 0, 8, 0, 0, 7, 9],
                ]
            }
        }
    )


class GenerateRequest(BaseModel):
    """Request to generate a new puzzle."""

    difficulty: DifficultyName = Field(
        default="normal", description="Puzzle difficulty (medium is an alias of normal)"
    )
    seed: int | None = Field(
        default=None, description="Optional seed for a reproducible puzzle"
    )


class GenerateResponse(BaseModel):
    """Generated puzzle together with its solution."""

    success: bool = Field(description="Whether a puzzle was generated")
    difficulty: str = Field(description="Normalized difficulty name")
    puzzle: list[list[int]] = Field(description="Playable grid (0 for empty cells)")
    solution: list[list[int]] = Field(description="Complete solution grid")
    clues: int = Field(description="Number of given cells in the puzzle")
    removed: int = Field(description="Number of cells removed from the solution")
    requested_removals: int = Field(description="Number of cells asked to remove")
    partial: bool = Field(
        description="True when fewer cells were removed than requested"
    )
    solution_count: int = Field(
        description="Solutions of the puzzle, counted up to 2 (diagnostic only)"
    )
    message: str = Field(description="Status message")


class BoardRequest(BaseModel):
    """A player's board to analyse."""

    grid: SudokuGrid = Field(description="Current board state")


class CheckResponse(BaseModel):
    """Result of checking a board for conflicts and completion."""

    valid: bool = Field(description="Whether the board has no conflicts")
    full: bool = Field(description="Whether every cell is filled")
    solved: bool = Field(description="Whether the board is a complete solution")
    conflicts: list[SudokuCell] = Field(
        default_factory=list, description="Cells that break a row, column or box rule"
    )
    message: str = Field(description="Status message")


class HintResponse(BaseModel):
    """Single-candidate hint for a board."""

    found: bool = Field(description="Whether a hint was found")
    hint: SudokuCell | None = Field(default=None, description="Cell and value to fill")
    message: str = Field(description="Status message")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(description="Error message")
    detail: str | None = Field(description="Detailed error information")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")
    grid_size: int | None = Field(default=None, description="Configured board side")
    fill_attempts: int | None = Field(
        default=None, description="Configured fill retry budget"
    )
