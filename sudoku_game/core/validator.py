"""Validation utilities for Sudoku grids."""

from __future__ import annotations
from typing import TYPE_CHECKING

from .board import SIZE, BOX_SIZE

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_safe(board: SudokuBoard, row: int, col: int, num: int) -> bool:
    """
    Check whether num can go at (row, col) without repeating a digit.

    Only non-zero cells are considered. Callers use this on empty cells;
    the value currently at (row, col) is not excluded from the scan.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        num: Candidate digit (1-9).

    Returns:
        True if num does not already appear in the row, column or box.
    """
    grid = board.grid

    for x in range(SIZE):
        if grid[row, x] == num:
            return False

    for y in range(SIZE):
        if grid[y, col] == num:
            return False

    start_row = row - row % BOX_SIZE
    start_col = col - col % BOX_SIZE
    for r in range(BOX_SIZE):
        for c in range(BOX_SIZE):
            if grid[start_row + r, start_col + c] == num:
                return False

    return True


def is_valid_board(board: SudokuBoard) -> bool:
    """Check that no row, column or box repeats a digit."""
    return board.is_valid()


def is_solved_grid(board: SudokuBoard) -> bool:
    """Check that every unit holds each digit 1-9 exactly once."""
    return board.is_solved()


def count_solutions(board: SudokuBoard, limit: int = 2) -> int:
    """
    Count the number of solutions for a puzzle (up to limit).

    Uses backtracking with the minimum-remaining-values heuristic and stops
    early once limit is reached. Generation never calls this; it is used to
    report how many generated puzzles happen to be uniquely solvable.

    Args:
        board: The puzzle board.
        limit: Maximum solutions to count before stopping.

    Returns:
        Number of solutions found (up to limit).
    """
    work_board = board.copy()
    count = [0]

    def candidates(row: int, col: int):
        return [n for n in range(1, SIZE + 1) if is_safe(work_board, row, col, n)]

    def backtrack() -> bool:
        """Returns True if limit reached."""
        empty_cells = work_board.get_empty_cells()
        if not empty_cells:
            count[0] += 1
            return count[0] >= limit

        best_cell = None
        best_candidates = None
        for cell in empty_cells:
            cell_candidates = candidates(*cell)
            if best_candidates is None or len(cell_candidates) < len(best_candidates):
                best_cell, best_candidates = cell, cell_candidates
                if not cell_candidates:
                    return False  # dead end

        row, col = best_cell
        for val in best_candidates:
            work_board.set(row, col, val)
            if backtrack():
                return True
            work_board.clear(row, col)

        return False

    if work_board.is_valid():
        backtrack()
    return count[0]


def has_unique_solution(board: SudokuBoard) -> bool:
    """Check if a puzzle has exactly one solution."""
    return count_solutions(board, limit=2) == 1
