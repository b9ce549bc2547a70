"""Game module: session state and the operations a front-end calls."""

from .session import (
    Game,
    GameSession,
    GameState,
    CheckResult,
    new_game,
    sanitize_input,
    edit_cell,
    check_solution,
    is_wrong_cell,
    SOLVED_MESSAGE,
    UNSOLVED_MESSAGE,
)

__all__ = [
    "Game",
    "GameSession",
    "GameState",
    "CheckResult",
    "new_game",
    "sanitize_input",
    "edit_cell",
    "check_solution",
    "is_wrong_cell",
    "SOLVED_MESSAGE",
    "UNSOLVED_MESSAGE",
]
