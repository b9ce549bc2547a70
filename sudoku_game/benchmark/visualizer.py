"""Charts for generation benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Chart generator for generation benchmark results.

    Creates charts comparing difficulties on generation cost and clue counts.
    """

    COLORS = {
        "easy": "#2ecc71",    # Green
        "medium": "#f39c12",  # Orange
        "hard": "#e74c3c",    # Red
    }

    DIFFICULTY_ORDER = ["easy", "medium", "hard"]

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def _difficulties(self) -> List[str]:
        present = set(r.difficulty for r in self.results)
        return [d for d in self.DIFFICULTY_ORDER if d in present]

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_by_difficulty(),
            self.plot_backtrack_distribution(),
            self.plot_clue_counts(),
        ]

    def plot_time_by_difficulty(self) -> str:
        """Create bar chart of average generation time per difficulty."""
        fig, ax = plt.subplots(figsize=(10, 6))

        difficulties = self._difficulties()
        avg_times = [
            np.mean([r.time_seconds for r in self.results if r.difficulty == d])
            for d in difficulties
        ]
        colors = [self.COLORS.get(d, "#95a5a6") for d in difficulties]

        bars = ax.bar([d.capitalize() for d in difficulties], avg_times,
                      color=colors, edgecolor='black', linewidth=0.5)

        for bar, value in zip(bars, avg_times):
            ax.annotate(f'{value:.4f}s',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Average Generation Time by Difficulty', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_by_difficulty.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_backtrack_distribution(self) -> str:
        """Create box plot of backtracks needed to fill a grid."""
        fig, ax = plt.subplots(figsize=(10, 6))

        difficulties = self._difficulties()
        sns.boxplot(
            x=[r.difficulty for r in self.results],
            y=[r.backtracks for r in self.results],
            order=difficulties,
            hue=[r.difficulty for r in self.results],
            hue_order=difficulties,
            palette=self.COLORS,
            legend=False,
            ax=ax,
        )

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Backtracks', fontsize=12)
        ax.set_title('Backtracks per Generated Grid', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "backtrack_distribution.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_clue_counts(self) -> str:
        """Create bar chart of givens left per difficulty."""
        fig, ax = plt.subplots(figsize=(10, 6))

        difficulties = self._difficulties()
        clues = [
            np.mean([r.clues for r in self.results if r.difficulty == d])
            for d in difficulties
        ]
        colors = [self.COLORS.get(d, "#95a5a6") for d in difficulties]

        ax.bar([d.capitalize() for d in difficulties], clues,
               color=colors, edgecolor='black', linewidth=0.5)
        ax.axhline(y=81, color='gray', linestyle='--', alpha=0.3)

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Givens', fontsize=12)
        ax.set_title('Givens per Puzzle', fontsize=14, fontweight='bold')
        ax.set_ylim(0, 85)

        plt.tight_layout()
        path = os.path.join(self.output_dir, "clue_counts.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path
