"""Benchmarking framework for puzzle generation."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Dict, Any, Optional
import json
import os
import time

from tqdm import tqdm

from ..core.board import SudokuBoard
from ..core.validator import has_unique_solution
from ..generator import SudokuGenerator, Difficulty


@dataclass
class BenchmarkResult:
    """Results from generating a single game."""
    game_id: int
    difficulty: str
    time_seconds: float
    solve_seconds: float
    placements: int
    backtracks: int
    clues: int
    unique: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = {
            "game_id": self.game_id,
            "difficulty": self.difficulty,
            "time_seconds": self.time_seconds,
            "solve_seconds": self.solve_seconds,
            "placements": self.placements,
            "backtracks": self.backtracks,
            "clues": self.clues,
        }
        if self.unique is not None:
            data["unique"] = self.unique
        return data


class GenerationBenchmark:
    """
    Measures how long solved-grid generation and puzzle derivation take.

    time_seconds covers both steps of a game; solve_seconds is the
    backtracking fill alone.

    Optionally reports how many of the generated puzzles happen to have a
    unique solution, which generation itself does not guarantee.
    """

    def __init__(
        self,
        games_per_difficulty: int = 10,
        difficulties: Optional[List[Difficulty]] = None,
        seed: Optional[int] = None,
        check_uniqueness: bool = False
    ):
        """
        Initialize the benchmark.

        Args:
            games_per_difficulty: Number of games to generate per difficulty.
            difficulties: List of difficulties to test (default: all).
            seed: Random seed for reproducibility.
            check_uniqueness: Count solutions of each generated puzzle.
        """
        self.games_per_difficulty = games_per_difficulty
        self.difficulties = difficulties or list(Difficulty)
        self.seed = seed
        self.check_uniqueness = check_uniqueness

        self.results: List[BenchmarkResult] = []
        self.puzzles: Dict[str, List[SudokuBoard]] = {}

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark.

        Returns:
            List of BenchmarkResult objects.
        """
        generator = SudokuGenerator(seed=self.seed)
        self.results = []
        self.puzzles = {}

        total = len(self.difficulties) * self.games_per_difficulty
        pbar = tqdm(total=total, desc="Generating", disable=not show_progress)

        for difficulty in self.difficulties:
            self.puzzles[difficulty.value] = []
            for game_id in range(self.games_per_difficulty):
                start_time = time.perf_counter()
                puzzle, _ = generator.generate_with_solution(difficulty)
                elapsed = time.perf_counter() - start_time
                stats = generator.stats

                unique = has_unique_solution(puzzle) if self.check_uniqueness else None

                self.puzzles[difficulty.value].append(puzzle)
                self.results.append(BenchmarkResult(
                    game_id=game_id,
                    difficulty=difficulty.value,
                    time_seconds=elapsed,
                    solve_seconds=stats.time_seconds,
                    placements=stats.placements,
                    backtracks=stats.backtracks,
                    clues=puzzle.count_filled(),
                    unique=unique
                ))
                pbar.update(1)

        pbar.close()
        return self.results

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_games": len(self.results),
            "difficulties": [d.value for d in self.difficulties],
            "results_by_difficulty": {}
        }

        for difficulty in self.difficulties:
            diff_results = [r for r in self.results if r.difficulty == difficulty.value]
            if not diff_results:
                continue

            times = [r.time_seconds for r in diff_results]
            backtracks = [r.backtracks for r in diff_results]
            stats = {
                "games": len(diff_results),
                "clues": difficulty.clues,
                "avg_time_seconds": sum(times) / len(times),
                "max_time_seconds": max(times),
                "min_time_seconds": min(times),
                "avg_backtracks": sum(backtracks) / len(backtracks),
                "max_backtracks": max(backtracks),
            }
            if self.check_uniqueness:
                unique = [r for r in diff_results if r.unique]
                stats["unique_percent"] = len(unique) / len(diff_results) * 100

            summary["results_by_difficulty"][difficulty.value] = stats

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and generated puzzles to files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "generation_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "generation_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        puzzles_dir = os.path.join(output_dir, "puzzles")
        for difficulty, puzzles in self.puzzles.items():
            diff_dir = os.path.join(puzzles_dir, difficulty)
            SudokuGenerator.save_to_folder(puzzles, diff_dir, prefix=f"puzzle_{difficulty}")

        print(f"Results and puzzles saved to {output_dir}")
