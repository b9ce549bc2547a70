"""Game session: new games, player edits and solution checking."""

from __future__ import annotations
import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..core.board import SudokuBoard, SIZE
from ..generator import SudokuGenerator, Difficulty


SOLVED_MESSAGE = "Congratulations! You solved the Sudoku!"
UNSOLVED_MESSAGE = "Not finished yet, or some numbers are wrong."

_DIGITS = "123456789"


class GameState(Enum):
    """Where a game stands: not started, being played, or just checked."""
    UNINITIALIZED = "uninitialized"
    PLAYING = "playing"
    CHECKED = "checked"


@dataclass(frozen=True)
class GameSession:
    """The solution, puzzle and player grid of one game, replaced together."""
    difficulty: Difficulty
    solution: SudokuBoard
    puzzle: SudokuBoard
    user_grid: SudokuBoard


@dataclass(frozen=True)
class CheckResult:
    """Outcome of checking the player grid against the solution."""
    solved: bool
    message: str


def new_game(difficulty: Difficulty, generator: Optional[SudokuGenerator] = None) -> GameSession:
    """
    Generate a fresh solution and puzzle for difficulty.

    The player grid starts as a copy of the puzzle.
    """
    generator = generator or SudokuGenerator()
    solution = generator.generate_solved_grid()
    puzzle = generator.generate_puzzle_from_solved(solution, difficulty)
    return GameSession(
        difficulty=difficulty,
        solution=solution,
        puzzle=puzzle,
        user_grid=puzzle.copy(),
    )


def sanitize_input(raw: str) -> int:
    """Return the first digit 1-9 in raw, or 0 when there is none."""
    for ch in raw or "":
        if ch in _DIGITS:
            return int(ch)
    return 0


def edit_cell(user_grid: SudokuBoard, puzzle: SudokuBoard, row: int, col: int, raw: str) -> SudokuBoard:
    """
    Apply player input to a copy of user_grid.

    Givens (non-zero puzzle cells) are never changed; the copy is returned
    as-is for them. Coordinates outside 0-8 raise ValueError.
    """
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise ValueError(f"Cell ({row}, {col}) is outside the {SIZE}x{SIZE} grid")
    updated = user_grid.copy()
    if not puzzle.is_empty(row, col):
        return updated
    updated.set(row, col, sanitize_input(raw))
    return updated


def check_solution(user_grid: SudokuBoard, solution: SudokuBoard) -> CheckResult:
    """Compare the player grid to the solution cell by cell."""
    for r in range(SIZE):
        for c in range(SIZE):
            value = user_grid.get(r, c)
            if value == 0 or value != solution.get(r, c):
                return CheckResult(solved=False, message=UNSOLVED_MESSAGE)
    return CheckResult(solved=True, message=SOLVED_MESSAGE)


def is_wrong_cell(user_grid: SudokuBoard, solution: SudokuBoard, row: int, col: int,
                  mistakes_enabled: bool) -> bool:
    """True only when mistakes are shown and a filled cell disagrees with the solution."""
    if not mistakes_enabled:
        return False
    value = user_grid.get(row, col)
    if value == 0:
        return False
    return value != solution.get(row, col)


class Game:
    """
    Stateful game orchestrating generation, edits and checks.

    States move UNINITIALIZED -> PLAYING on start(), PLAYING -> CHECKED on
    check(), and back to PLAYING on any edit or new game. Starting a new
    game replaces the whole session and hides mistakes again.
    """

    def __init__(self, difficulty: Difficulty = Difficulty.EASY,
                 generator: Optional[SudokuGenerator] = None):
        """
        Args:
            difficulty: Difficulty used by start() when none is given.
            generator: Source of solved grids and puzzles.
        """
        self.generator = generator or SudokuGenerator()
        self._difficulty = difficulty
        self._session: Optional[GameSession] = None
        self._state = GameState.UNINITIALIZED
        self._status = ""
        self._show_mistakes = False

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def status(self) -> str:
        return self._status

    @property
    def show_mistakes(self) -> bool:
        return self._show_mistakes

    @property
    def session(self) -> GameSession:
        if self._session is None:
            raise RuntimeError("No game in progress; call start() first")
        return self._session

    def start(self, difficulty: Optional[Difficulty] = None) -> GameSession:
        """Start a new game, at difficulty if given, else the current one."""
        if difficulty is not None:
            self._difficulty = difficulty
        self._session = new_game(self._difficulty, self.generator)
        self._status = ""
        self._show_mistakes = False
        self._state = GameState.PLAYING
        return self._session

    new_game = start

    def set_difficulty(self, difficulty: Difficulty) -> GameSession:
        """Switch difficulty, which always starts a new game."""
        return self.start(difficulty)

    def is_given(self, row: int, col: int) -> bool:
        return not self.session.puzzle.is_empty(row, col)

    def edit(self, row: int, col: int, raw: str) -> int:
        """
        Enter raw input at (row, col) and return the cell's resulting value.

        Edits to givens are ignored. The mistakes flag is left as it is.
        """
        session = self.session
        user_grid = edit_cell(session.user_grid, session.puzzle, row, col, raw)
        self._session = dataclasses.replace(session, user_grid=user_grid)
        self._state = GameState.PLAYING
        return user_grid.get(row, col)

    def check(self) -> CheckResult:
        """Check the player grid and turn on mistake highlighting."""
        session = self.session
        self._show_mistakes = True
        result = check_solution(session.user_grid, session.solution)
        self._status = result.message
        self._state = GameState.CHECKED
        return result

    def is_wrong(self, row: int, col: int) -> bool:
        session = self.session
        return is_wrong_cell(session.user_grid, session.solution, row, col, self._show_mistakes)

    def wrong_cells(self) -> List[Tuple[int, int]]:
        """All cells currently flagged as mistakes."""
        return [
            (r, c)
            for r in range(SIZE)
            for c in range(SIZE)
            if self.is_wrong(r, c)
        ]
