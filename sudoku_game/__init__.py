"""Sudoku puzzle generator and game engine."""

from .core import SudokuBoard, is_safe
from .generator import SudokuGenerator, Difficulty
from .game import Game, GameSession, new_game, edit_cell, check_solution, is_wrong_cell

__version__ = "1.0.0"
