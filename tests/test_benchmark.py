"""Tests for the generation benchmark."""

import json
import os
import time

import pytest
from sudoku_game.generator import SudokuGenerator, Difficulty
from sudoku_game.benchmark import GenerationBenchmark


class TestGenerationBenchmark:

    def test_run_collects_results(self):
        benchmark = GenerationBenchmark(
            games_per_difficulty=2,
            difficulties=[Difficulty.EASY, Difficulty.HARD],
            seed=1
        )
        results = benchmark.run(show_progress=False)

        assert len(results) == 4
        assert {r.difficulty for r in results} == {"easy", "hard"}
        for r in results:
            assert r.clues == Difficulty(r.difficulty).clues
            assert r.placements >= 81
            assert r.unique is None

    def test_time_includes_derivation(self, monkeypatch):
        original = SudokuGenerator.generate_puzzle_from_solved

        def slow_derivation(self, solution, difficulty):
            time.sleep(0.05)
            return original(self, solution, difficulty)

        monkeypatch.setattr(SudokuGenerator, "generate_puzzle_from_solved", slow_derivation)
        benchmark = GenerationBenchmark(games_per_difficulty=1, difficulties=[Difficulty.EASY], seed=1)
        result = benchmark.run(show_progress=False)[0]

        assert result.time_seconds >= 0.05
        assert result.solve_seconds < result.time_seconds

    def test_result_dict_fields(self):
        benchmark = GenerationBenchmark(games_per_difficulty=1, difficulties=[Difficulty.EASY], seed=1)
        data = benchmark.run(show_progress=False)[0].to_dict()

        assert set(data) == {
            "game_id", "difficulty", "time_seconds", "solve_seconds",
            "placements", "backtracks", "clues",
        }

    def test_summary(self):
        benchmark = GenerationBenchmark(games_per_difficulty=2, difficulties=[Difficulty.MEDIUM], seed=2)
        benchmark.run(show_progress=False)
        summary = benchmark.get_summary()

        assert summary["total_games"] == 2
        stats = summary["results_by_difficulty"]["medium"]
        assert stats["games"] == 2
        assert stats["clues"] == 36
        assert stats["min_time_seconds"] <= stats["avg_time_seconds"] <= stats["max_time_seconds"]
        assert "unique_percent" not in stats

    def test_uniqueness_report(self):
        benchmark = GenerationBenchmark(
            games_per_difficulty=1,
            difficulties=[Difficulty.EASY],
            seed=3,
            check_uniqueness=True
        )
        results = benchmark.run(show_progress=False)

        assert isinstance(results[0].unique, bool)
        assert "unique_percent" in benchmark.get_summary()["results_by_difficulty"]["easy"]

    def test_save_results(self, tmp_path):
        benchmark = GenerationBenchmark(games_per_difficulty=1, difficulties=[Difficulty.EASY], seed=4)
        benchmark.run(show_progress=False)
        benchmark.save_results(str(tmp_path))

        with open(tmp_path / "generation_results.json") as f:
            data = json.load(f)
        assert data[0]["difficulty"] == "easy"
        assert os.path.exists(tmp_path / "generation_summary.json")
        assert os.path.exists(tmp_path / "puzzles" / "easy" / "puzzle_easy_1.txt")

    def test_charts(self, tmp_path):
        from sudoku_game.benchmark.visualizer import Visualizer

        benchmark = GenerationBenchmark(games_per_difficulty=2, seed=5)
        results = benchmark.run(show_progress=False)
        charts = Visualizer(results, str(tmp_path)).generate_all()

        assert len(charts) == 3
        for chart in charts:
            assert os.path.exists(chart)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
