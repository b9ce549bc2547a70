"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, SIZE, BOX_SIZE
from .validator import is_safe, is_valid_board, is_solved_grid, has_unique_solution

__all__ = [
    "SudokuBoard",
    "SIZE",
    "BOX_SIZE",
    "is_safe",
    "is_valid_board",
    "is_solved_grid",
    "has_unique_solution",
]
