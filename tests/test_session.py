"""Unit tests for game sessions."""

import pytest
from sudoku_game.core.board import SudokuBoard
from sudoku_game.generator import SudokuGenerator, Difficulty
from sudoku_game.game import (
    Game,
    GameState,
    new_game,
    sanitize_input,
    edit_cell,
    check_solution,
    is_wrong_cell,
    SOLVED_MESSAGE,
    UNSOLVED_MESSAGE,
)


@pytest.fixture
def session():
    return new_game(Difficulty.EASY, SudokuGenerator(seed=42))


def first_editable(puzzle):
    return puzzle.get_empty_cells()[0]


def first_given(puzzle):
    for r in range(9):
        for c in range(9):
            if not puzzle.is_empty(r, c):
                return r, c
    raise AssertionError("puzzle has no givens")


def wrong_digit(correct):
    return correct % 9 + 1


class TestNewGame:

    def test_session_shape(self, session):
        assert session.difficulty is Difficulty.EASY
        assert session.solution.is_solved()
        assert session.puzzle.count_filled() == 46
        assert session.user_grid == session.puzzle

    def test_user_grid_is_a_copy(self, session):
        row, col = first_editable(session.puzzle)
        session.user_grid.set(row, col, 1)
        assert session.puzzle.is_empty(row, col)

    def test_default_generator(self):
        session = new_game(Difficulty.HARD)
        assert session.puzzle.count_empty() == 55


class TestSanitizeInput:

    @pytest.mark.parametrize("raw,expected", [
        ("7", 7),
        ("ab3cd", 3),
        ("", 0),
        ("0", 0),
        ("x", 0),
        ("98", 9),
        (" 5", 5),
    ])
    def test_sanitize(self, raw, expected):
        assert sanitize_input(raw) == expected


class TestEditCell:

    def test_edit_editable_cell(self, session):
        row, col = first_editable(session.puzzle)

        grid = edit_cell(session.user_grid, session.puzzle, row, col, "7")
        assert grid.get(row, col) == 7

        grid = edit_cell(grid, session.puzzle, row, col, "ab3cd")
        assert grid.get(row, col) == 3

        grid = edit_cell(grid, session.puzzle, row, col, "")
        assert grid.get(row, col) == 0

    def test_edit_does_not_touch_input_grid(self, session):
        row, col = first_editable(session.puzzle)
        edit_cell(session.user_grid, session.puzzle, row, col, "4")
        assert session.user_grid.is_empty(row, col)

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (9, 0), (0, 9)])
    def test_edit_outside_grid_rejected(self, session, row, col):
        with pytest.raises(ValueError):
            edit_cell(session.user_grid, session.puzzle, row, col, "5")
        # Nothing wrapped around to the far edge
        assert session.user_grid == session.puzzle

    @pytest.mark.parametrize("raw", ["1", "9", "", "abc"])
    def test_edit_given_is_ignored(self, session, raw):
        row, col = first_given(session.puzzle)
        original = session.user_grid.get(row, col)

        grid = edit_cell(session.user_grid, session.puzzle, row, col, raw)
        assert grid.get(row, col) == original


class TestCheckSolution:

    def test_filled_correctly_is_solved(self, session):
        result = check_solution(session.solution.copy(), session.solution)
        assert result.solved
        assert result.message == SOLVED_MESSAGE

    def test_incomplete_is_not_solved(self, session):
        result = check_solution(session.user_grid, session.solution)
        assert not result.solved
        assert result.message == UNSOLVED_MESSAGE

    def test_wrong_digit_is_flagged(self, session):
        row, col = first_editable(session.puzzle)
        grid = session.solution.copy()
        grid.set(row, col, wrong_digit(session.solution.get(row, col)))

        assert not check_solution(grid, session.solution).solved
        assert is_wrong_cell(grid, session.solution, row, col, True)
        assert not is_wrong_cell(grid, session.solution, row, col, False)

    def test_checking_is_idempotent(self, session):
        results = [check_solution(session.user_grid, session.solution) for _ in range(3)]
        assert results[0] == results[1] == results[2]

    def test_empty_cell_is_never_wrong(self, session):
        row, col = first_editable(session.puzzle)
        assert not is_wrong_cell(session.user_grid, session.solution, row, col, True)

    def test_correct_cell_is_not_wrong(self, session):
        row, col = first_editable(session.puzzle)
        grid = session.user_grid.copy()
        grid.set(row, col, session.solution.get(row, col))
        assert not is_wrong_cell(grid, session.solution, row, col, True)


class TestGame:

    @pytest.fixture
    def game(self):
        game = Game(Difficulty.MEDIUM, SudokuGenerator(seed=3))
        game.start()
        return game

    def test_requires_start(self):
        game = Game()
        assert game.state is GameState.UNINITIALIZED
        with pytest.raises(RuntimeError):
            game.check()

    def test_start(self, game):
        assert game.state is GameState.PLAYING
        assert game.status == ""
        assert not game.show_mistakes
        assert game.session.puzzle.count_empty() == 45

    def test_solve_end_to_end(self, game):
        session = game.session
        for row, col in session.puzzle.get_empty_cells():
            game.edit(row, col, str(session.solution.get(row, col)))

        result = game.check()
        assert result.solved
        assert game.status == SOLVED_MESSAGE
        assert game.state is GameState.CHECKED
        assert game.wrong_cells() == []

    def test_mistake_shown_after_check(self, game):
        solution = game.session.solution
        cells = game.session.puzzle.get_empty_cells()
        for row, col in cells:
            game.edit(row, col, str(solution.get(row, col)))
        row, col = cells[-1]
        game.edit(row, col, str(wrong_digit(solution.get(row, col))))

        assert not game.is_wrong(row, col)
        result = game.check()
        assert not result.solved
        assert game.status == UNSOLVED_MESSAGE
        assert game.is_wrong(row, col)
        assert game.wrong_cells() == [(row, col)]

        # Checking again without edits gives the same answer
        assert game.check() == result

    def test_edit_after_check_returns_to_playing(self, game):
        game.check()
        row, col = first_editable(game.session.puzzle)
        assert game.edit(row, col, "x5") == 5
        assert game.state is GameState.PLAYING
        assert game.show_mistakes

    def test_edit_given_ignored(self, game):
        row, col = first_given(game.session.puzzle)
        before = game.session.user_grid.get(row, col)
        assert game.is_given(row, col)
        assert game.edit(row, col, "1") == before

    def test_edit_outside_grid_keeps_session(self, game):
        old = game.session
        with pytest.raises(ValueError):
            game.edit(-1, 0, "5")
        assert game.session is old

    def test_edit_replaces_session(self, game):
        old = game.session
        row, col = first_editable(old.puzzle)
        game.edit(row, col, "2")
        assert game.session is not old
        assert game.session.solution is old.solution
        assert old.user_grid.is_empty(row, col)

    def test_new_game_resets(self, game):
        old = game.session
        game.check()
        game.new_game()

        assert game.session is not old
        assert game.state is GameState.PLAYING
        assert game.status == ""
        assert not game.show_mistakes

    def test_set_difficulty_starts_new_game(self, game):
        session = game.set_difficulty(Difficulty.HARD)
        assert game.difficulty is Difficulty.HARD
        assert session is game.session
        assert session.difficulty is Difficulty.HARD
        assert session.puzzle.count_filled() == 26


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
