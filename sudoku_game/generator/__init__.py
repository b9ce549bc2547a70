"""Generator module for creating Sudoku puzzles."""

from .generator import SudokuGenerator, Difficulty, GenerationStats

__all__ = ["SudokuGenerator", "Difficulty", "GenerationStats"]
