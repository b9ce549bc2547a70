"""Sudoku puzzle generator with fixed removal counts per difficulty."""

from __future__ import annotations
import os
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Optional, Dict, Any

from ..core.board import SudokuBoard, SIZE
from ..core.validator import is_safe


class Difficulty(Enum):
    """Difficulty levels for Sudoku puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def removals(self) -> int:
        """Number of cells blanked out of the solved grid."""
        counts = {
            Difficulty.EASY: 35,
            Difficulty.MEDIUM: 45,
            Difficulty.HARD: 55,
        }
        return counts[self]

    @property
    def clues(self) -> int:
        """Number of givens left in the puzzle."""
        return SIZE * SIZE - self.removals


@dataclass
class GenerationStats:
    """Statistics from the most recent solved-grid generation."""
    placements: int = 0
    backtracks: int = 0
    time_seconds: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "placements": self.placements,
            "backtracks": self.backtracks,
            "time_seconds": self.time_seconds,
        }


class SudokuGenerator:
    """
    Generator for Sudoku puzzles.

    Algorithm:
    1. Fill an empty grid with randomized backtracking (row-major scan,
       digits tried in a shuffled order).
    2. Blank random cells until the difficulty's removal count is reached.

    The puzzle is not checked for a unique solution; random removal can
    leave puzzles with several completions.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility. Ignored if rng is given.
            rng: Random number generator to draw from.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.stats = GenerationStats()

    def generate(self, difficulty: Difficulty = Difficulty.MEDIUM) -> SudokuBoard:
        """Generate a puzzle (clues only, no solution)."""
        puzzle, _ = self.generate_with_solution(difficulty)
        return puzzle

    def generate_batch(self, count: int, difficulty: Difficulty = Difficulty.MEDIUM) -> List[SudokuBoard]:
        """Generate multiple puzzles of the same difficulty."""
        return [self.generate(difficulty) for _ in range(count)]

    def generate_with_solution(self, difficulty: Difficulty = Difficulty.MEDIUM) -> Tuple[SudokuBoard, SudokuBoard]:
        """
        Generate a puzzle along with its solution.

        Returns:
            Tuple of (puzzle, solution) SudokuBoards.
        """
        solution = self.generate_solved_grid()
        puzzle = self.generate_puzzle_from_solved(solution, difficulty)
        return puzzle, solution

    def generate_solved_grid(self) -> SudokuBoard:
        """
        Generate a complete valid grid by solving an empty board.

        Every digit is tried at every cell, and an empty 9x9 board always
        has a completion, so the search cannot fail or loop forever.
        """
        self.stats = GenerationStats()
        board = SudokuBoard()

        start_time = time.perf_counter()
        solved = self.solve_grid(board)
        self.stats.time_seconds = time.perf_counter() - start_time

        if not solved:
            raise RuntimeError("Backtracking failed to complete an empty grid")
        return board

    def solve_grid(self, board: SudokuBoard) -> bool:
        """
        Fill the board in place using randomized backtracking.

        Returns True once no empty cell remains, False if the first empty
        cell admits no digit. On False every cell this call filled has been
        reset to 0.
        """
        for row in range(SIZE):
            for col in range(SIZE):
                if not board.is_empty(row, col):
                    continue

                digits = list(range(1, SIZE + 1))
                self.rng.shuffle(digits)
                for num in digits:
                    if is_safe(board, row, col, num):
                        board.set(row, col, num)
                        self.stats.placements += 1
                        if self.solve_grid(board):
                            return True
                        board.clear(row, col)
                        self.stats.backtracks += 1
                return False
        return True

    def generate_puzzle_from_solved(self, solution: SudokuBoard, difficulty: Difficulty) -> SudokuBoard:
        """
        Blank cells of a copy of solution until difficulty.removals are empty.

        Cells are drawn uniformly at random; drawing one already blanked is
        simply retried. The solution itself is left untouched.
        """
        puzzle = solution.copy()
        removals = difficulty.removals

        # Never blank more cells than are filled.
        removals = min(removals, puzzle.count_filled())

        removed = 0
        while removed < removals:
            row = self.rng.randrange(SIZE)
            col = self.rng.randrange(SIZE)
            if not puzzle.is_empty(row, col):
                puzzle.clear(row, col)
                removed += 1

        return puzzle

    @staticmethod
    def save_to_folder(puzzles: List[SudokuBoard], folder_path: str, prefix: str = "puzzle") -> List[str]:
        """
        Save a list of puzzles to a folder as individual text files.

        Args:
            puzzles: List of SudokuBoard objects.
            folder_path: Directory to save the puzzles.
            prefix: Prefix for the filename (default: "puzzle").

        Returns:
            Paths of the written files.
        """
        os.makedirs(folder_path, exist_ok=True)

        paths = []
        for i, puzzle in enumerate(puzzles, 1):
            file_path = os.path.join(folder_path, f"{prefix}_{i}.txt")
            with open(file_path, "w") as f:
                f.write(puzzle.to_string())
                f.write("\n\nPretty format:\n")
                f.write(str(puzzle))
            paths.append(file_path)
        return paths
